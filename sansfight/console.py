"""A software model of the 160x160 four-colour fantasy console the game runs on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from itertools import product
from typing import Iterator, Sequence

SCREEN_SIZE = 160
FONT_SIZE = 8
FRAMEBUFFER_SIZE = SCREEN_SIZE * SCREEN_SIZE // 4

DEFAULT_PALETTE = (0xE0F8CF, 0x86C06C, 0x306850, 0x071821)
DEFAULT_DRAW_COLORS = 0x1203

BLIT_1BPP = 0
BLIT_2BPP = 1
BLIT_FLIP_X = 2
BLIT_FLIP_Y = 4
BLIT_ROTATE = 8

MOUSE_LEFT = 1
MOUSE_RIGHT = 2
MOUSE_MIDDLE = 4

SYSTEM_PRESERVE_FRAMEBUFFER = 1
SYSTEM_HIDE_GAMEPAD_OVERLAY = 2


class Button(IntFlag):
    """Bits of a gamepad byte."""

    BUTTON_1 = 1
    BUTTON_2 = 2
    LEFT = 16
    RIGHT = 32
    UP = 64
    DOWN = 128


class ToneFlag(IntFlag):
    """Channel, duty-cycle mode and panning bits of a tone."""

    PULSE1 = 0
    PULSE2 = 1
    TRIANGLE = 2
    NOISE = 3
    MODE1 = 0
    MODE2 = 4
    MODE3 = 8
    MODE4 = 12
    PAN_LEFT = 16
    PAN_RIGHT = 32
    NOTE_MODE = 64


@dataclass(frozen=True)
class ToneCall:
    """A tone requested during the current frame."""

    frequency: int
    duration: int
    volume: int
    flags: int


@dataclass(frozen=True)
class TextCall:
    """A string drawn during the current frame; colours are palette indices or None."""

    text: str
    x: int
    y: int
    foreground: int | None
    background: int | None

    def glyphs(self) -> Iterator[tuple[str, int, int]]:
        """Yield each printable character with the top-left corner of its cell."""
        col, row = self.x, self.y
        for char in self.text:
            if char == "\n":
                col = self.x
                row += FONT_SIZE
                continue
            yield char, col, row
            col += FONT_SIZE


def _draw_index(value: int) -> int | None:
    """Map a draw-colour nibble to a palette index; zero means transparent."""
    return None if value == 0 else (value - 1) & 0x3


@dataclass
class Console:
    """Framebuffer, palette, input registers and audio/trace output of the console."""

    palette: list[int] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    draw_colors: int = DEFAULT_DRAW_COLORS
    gamepads: list[int] = field(default_factory=lambda: [0, 0, 0, 0])
    mouse_x: int = 0
    mouse_y: int = 0
    mouse_buttons: int = 0
    system_flags: int = 0
    framebuffer: bytearray = field(default_factory=lambda: bytearray(FRAMEBUFFER_SIZE))
    tones: list[ToneCall] = field(default_factory=list)
    texts: list[TextCall] = field(default_factory=list)
    traces: list[str] = field(default_factory=list)

    def begin_frame(self) -> None:
        """Drop last frame's output and clear the screen unless it is preserved."""
        self.tones.clear()
        if not self.system_flags & SYSTEM_PRESERVE_FRAMEBUFFER:
            self.framebuffer[:] = bytes(FRAMEBUFFER_SIZE)
            self.texts.clear()

    def pixel(self, x: int, y: int) -> int:
        """Return the palette index stored at (x, y)."""
        if not (0 <= x < SCREEN_SIZE and 0 <= y < SCREEN_SIZE):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        index = y * SCREEN_SIZE + x
        return (self.framebuffer[index >> 2] >> ((index & 0x3) << 1)) & 0x3

    def _plot(self, color: int, x: int, y: int) -> None:
        if not (0 <= x < SCREEN_SIZE and 0 <= y < SCREEN_SIZE):
            return
        index = y * SCREEN_SIZE + x
        offset, shift = index >> 2, (index & 0x3) << 1
        kept = self.framebuffer[offset] & ~(0x3 << shift) & 0xFF
        self.framebuffer[offset] = kept | (color << shift)

    @property
    def _primary(self) -> int | None:
        return _draw_index(self.draw_colors & 0xF)

    @property
    def _secondary(self) -> int | None:
        return _draw_index((self.draw_colors >> 4) & 0xF)

    def blit(self, sprite: Sequence[int], x: int, y: int, width: int, height: int,
             flags: int) -> None:
        """Draw a whole sprite."""
        self.blit_sub(sprite, x, y, width, height, 0, 0, width, flags)

    def blit_sub(self, sprite: Sequence[int], x: int, y: int, width: int, height: int,
                 src_x: int, src_y: int, stride: int, flags: int) -> None:
        """Draw a region of a sprite atlas whose rows are `stride` pixels wide."""
        bpp2 = bool(flags & BLIT_2BPP)
        flip_x = bool(flags & BLIT_FLIP_X)
        flip_y = bool(flags & BLIT_FLIP_Y)
        rotate = bool(flags & BLIT_ROTATE)
        colors = self.draw_colors & 0xFFFF

        if rotate:
            flip_x = not flip_x
            cols = range(max(0, y) - y, min(width, SCREEN_SIZE - y))
            rows = range(max(0, x) - x, min(height, SCREEN_SIZE - x))
        else:
            cols = range(max(0, x) - x, min(width, SCREEN_SIZE - x))
            rows = range(max(0, y) - y, min(height, SCREEN_SIZE - y))

        for row, col in product(rows, cols):
            tx = x + (row if rotate else col)
            ty = y + (col if rotate else row)
            sx = src_x + (width - col - 1 if flip_x else col)
            sy = src_y + (height - row - 1 if flip_y else row)
            bit = sy * stride + sx
            if bpp2:
                color_index = (sprite[bit >> 2] >> (6 - ((bit & 0x3) << 1))) & 0x3
            else:
                color_index = (sprite[bit >> 3] >> (7 - (bit & 0x7))) & 0x1
            dc = (colors >> (color_index << 2)) & 0xF
            if dc:
                self._plot((dc - 1) & 0x3, tx, ty)

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a line between two points, inclusive, in draw colour 1."""
        color = self._primary
        if color is None:
            return
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        dx = abs(x2 - x1)
        step_x = 1 if x1 < x2 else -1
        dy = y2 - y1
        err = dx // 2 if dx > dy else -(dy // 2)
        while True:
            self._plot(color, x1, y1)
            if x1 == x2 and y1 == y2:
                break
            previous = err
            if previous > -dx:
                err -= dy
                x1 += step_x
            if previous < dy:
                err += dx
                y1 += 1

    def hline(self, x: int, y: int, length: int) -> None:
        """Draw a horizontal line of `length` pixels in draw colour 1."""
        color = self._primary
        if color is None:
            return
        for col in range(x, x + length):
            self._plot(color, col, y)

    def vline(self, x: int, y: int, length: int) -> None:
        """Draw a vertical line of `length` pixels in draw colour 1."""
        color = self._primary
        if color is None:
            return
        for row in range(y, y + length):
            self._plot(color, x, row)

    def oval(self, x: int, y: int, width: int, height: int) -> None:
        """Draw an ellipse filled with draw colour 1 and outlined with draw colour 2."""
        if width <= 0 or height <= 0:
            return
        rx, ry = width / 2, height / 2
        cx, cy = x + (width - 1) / 2, y + (height - 1) / 2
        inside = {
            (px, py)
            for py, px in product(range(y, y + height), range(x, x + width))
            if ((px - cx) / rx) ** 2 + ((py - cy) / ry) ** 2 <= 1
        }
        fill, stroke = self._primary, self._secondary
        if fill is not None:
            for px, py in inside:
                self._plot(fill, px, py)
        if stroke is not None:
            for px, py in inside:
                neighbours = ((px - 1, py), (px + 1, py), (px, py - 1), (px, py + 1))
                if any(n not in inside for n in neighbours):
                    self._plot(stroke, px, py)

    def rect(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a rectangle filled with draw colour 1 and outlined with draw colour 2."""
        if width <= 0 or height <= 0:
            return
        fill, stroke = self._primary, self._secondary
        if fill is not None:
            for row, col in product(range(y, y + height), range(x, x + width)):
                self._plot(fill, col, row)
        if stroke is not None:
            right, bottom = x + width - 1, y + height - 1
            for col in range(x, x + width):
                self._plot(stroke, col, y)
                self._plot(stroke, col, bottom)
            for row in range(y, y + height):
                self._plot(stroke, x, row)
                self._plot(stroke, right, row)

    def text(self, text: str, x: int, y: int) -> None:
        """Draw text: colour 1 is the glyph colour, colour 2 fills each 8x8 cell."""
        call = TextCall(text, x, y, self._primary, self._secondary)
        self.texts.append(call)
        if call.background is None:
            return
        for _, col, row in call.glyphs():
            for dy, dx in product(range(FONT_SIZE), repeat=2):
                self._plot(call.background, col + dx, row + dy)

    def tone(self, frequency: int, duration: int, volume: int, flags: int) -> None:
        """Queue a tone for the audio frontend."""
        self.tones.append(ToneCall(frequency, duration, volume, int(flags)))

    def trace(self, message: str) -> None:
        """Record a debug message."""
        self.traces.append(message)