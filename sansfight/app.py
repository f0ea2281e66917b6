"""Desktop front end: window, keyboard input, screen scaling and tone playback."""

from __future__ import annotations

import argparse
import random
from array import array
from functools import lru_cache
from typing import Mapping, Sequence

import pygame

from sansfight.console import SCREEN_SIZE, Button, Console, ToneCall
from sansfight.game import Game

FPS = 60
DEFAULT_SCALE = 3
SAMPLE_RATE = 22050
MAX_AMPLITUDE = 8000
_DUTY_CYCLES = (0.125, 0.25, 0.5, 0.75)
_AUDIO_CHANNELS = 4

KEY_BINDINGS: dict[int, Button] = {
    pygame.K_LEFT: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_UP: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_x: Button.BUTTON_1,
    pygame.K_SPACE: Button.BUTTON_1,
    pygame.K_z: Button.BUTTON_2,
}


def gamepad_from_keys(pressed: Mapping[int, bool] | Sequence[bool]) -> int:
    """Build a gamepad byte from a key-state lookup such as pygame.key.get_pressed()."""
    value = 0
    for key, button in KEY_BINDINGS.items():
        if pressed[key]:
            value |= button
    return int(value)


def _rgb(colour: int) -> tuple[int, int, int]:
    return (colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def render(console: Console, surface: pygame.Surface) -> None:
    """Paint the console framebuffer and text onto `surface`, scaled to fit it."""
    colours = [(c & 0xFFFFFF).to_bytes(3, "big") for c in console.palette]
    data = b"".join(
        colours[(byte >> shift) & 0x3]
        for byte in console.framebuffer
        for shift in (0, 2, 4, 6)
    )
    image = pygame.image.frombuffer(data, (SCREEN_SIZE, SCREEN_SIZE), "RGB")
    if surface.get_size() != image.get_size():
        image = pygame.transform.scale(image, surface.get_size())
    surface.blit(image, (0, 0))

    scale_x = surface.get_width() / SCREEN_SIZE
    scale_y = surface.get_height() / SCREEN_SIZE
    for call in console.texts:
        if call.foreground is None:
            continue
        font = _font(max(1, round(8 * scale_y * 1.25)))
        colour = _rgb(console.palette[call.foreground])
        for char, col, row in call.glyphs():
            glyph = font.render(char, False, colour)
            surface.blit(glyph, (round(col * scale_x), round(row * scale_y)))


@lru_cache(maxsize=256)
def _tone_sound(call: ToneCall) -> pygame.mixer.Sound:
    frequency = max(1, call.frequency & 0xFFFF)
    frames = sum((call.duration >> shift) & 0xFF for shift in (0, 8, 16, 24))
    count = max(1, SAMPLE_RATE * frames // FPS)
    amplitude = int(min(call.volume & 0xFF, 100) / 100 * MAX_AMPLITUDE)
    channel = call.flags & 0x3
    duty = _DUTY_CYCLES[(call.flags >> 2) & 0x3]
    noise = random.Random(frequency)

    def sample(n: int) -> int:
        phase = (n * frequency / SAMPLE_RATE) % 1.0
        if channel == 2:
            return int(amplitude * (4 * abs(phase - 0.5) - 1))
        if channel == 3:
            return noise.choice((-amplitude, amplitude))
        return amplitude if phase < duty else -amplitude

    samples = array("h", (sample(n) for n in range(count)))
    return pygame.mixer.Sound(buffer=samples.tobytes())


def _open_audio() -> bool:
    try:
        pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, allowedchanges=0)
    except pygame.error:
        return False
    pygame.mixer.set_num_channels(_AUDIO_CHANNELS)
    return True


def _play(call: ToneCall) -> None:
    pygame.mixer.Channel(call.flags & 0x3).play(_tone_sound(call))


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="sansfight", description="Dodge the bullets.")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help="window pixels per console pixel")
    parser.add_argument("--frames", type=int, default=None,
                        help="quit after this many frames")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")

    pygame.init()
    try:
        size = SCREEN_SIZE * args.scale
        screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption("Comic-Sans")
        audio = _open_audio()
        console, game, clock = Console(), Game(), pygame.time.Clock()
        frame = 0
        while args.frames is None or frame < args.frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            console.begin_frame()
            console.gamepads[0] = gamepad_from_keys(pygame.key.get_pressed())
            game.update(console)
            if audio:
                for call in console.tones:
                    _play(call)
            render(console, screen)
            pygame.display.flip()
            clock.tick(FPS)
            frame += 1
    finally:
        _tone_sound.cache_clear()
        _font.cache_clear()
        pygame.quit()
    return 0