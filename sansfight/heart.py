"""The player's soul: a small heart moved around the arena."""

from __future__ import annotations

from dataclasses import dataclass, field

from sansfight.console import BLIT_1BPP, Button, Console

HEART_WIDTH = 9
HEART_HEIGHT = 9
HEART_FLAGS = BLIT_1BPP
HEART_SPRITE = bytes([0x9C, 0x84, 0x00, 0x00, 0x00, 0x00, 0x02, 0x03, 0x83, 0xE3, 0x80])

MAX_LIFE = 5
MIN_X, MAX_X = 21, 130
MIN_Y, MAX_Y = 71, 130

LIFE_BAR_X = 50
LIFE_BAR_Y = 145
SEGMENT_WIDTH = 10
SEGMENT_HEIGHT = 5
SEGMENT_SPACING = 2


@dataclass(frozen=True)
class Point:
    """An integer screen position."""

    x: int
    y: int


def _arena_centre() -> Point:
    return Point(20 + (120 - HEART_WIDTH) // 2, 70 + (70 - HEART_HEIGHT) // 2)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Heart:
    """Position and remaining life of the player."""

    body: Point = field(default_factory=_arena_centre)
    life: int = MAX_LIFE

    def update(self, gamepad: int) -> None:
        """Move one pixel per held direction and stay inside the arena."""
        x, y = self.body.x, self.body.y
        if gamepad & Button.LEFT:
            x -= 1
        if gamepad & Button.RIGHT:
            x += 1
        if gamepad & Button.UP:
            y -= 1
        if gamepad & Button.DOWN:
            y += 1
        self.body = Point(_clamp(x, MIN_X, MAX_X), _clamp(y, MIN_Y, MAX_Y))

    def draw(self, console: Console) -> None:
        console.draw_colors = 0x14
        console.blit(HEART_SPRITE, self.body.x, self.body.y,
                     HEART_WIDTH, HEART_HEIGHT, HEART_FLAGS)

    def draw_life_bar(self, console: Console) -> None:
        """Draw one segment per life point, highlighted while the life remains."""
        for segment in range(MAX_LIFE):
            console.draw_colors = 0x41 if segment < self.life else 0x21
            x = LIFE_BAR_X + segment * (SEGMENT_WIDTH + SEGMENT_SPACING)
            console.rect(x, LIFE_BAR_Y, SEGMENT_WIDTH, SEGMENT_HEIGHT)

    def is_hit(self, px: int, py: int) -> bool:
        """Whether the point lies inside the heart's sprite box."""
        hx, hy = self.body.x, self.body.y
        return hx <= px < hx + HEART_WIDTH and hy <= py < hy + HEART_HEIGHT