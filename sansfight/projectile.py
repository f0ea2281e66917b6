"""Bullets fired at the player."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sansfight.console import SCREEN_SIZE, Console
from sansfight.heart import Point

SPEED = 1.5
SIZE = 5


@dataclass
class Projectile:
    """A bullet moving in a straight line at constant velocity."""

    pos: tuple[float, float]
    velocity: tuple[float, float]

    def update(self) -> None:
        self.pos = (self.pos[0] + self.velocity[0], self.pos[1] + self.velocity[1])

    def draw(self, console: Console) -> None:
        console.draw_colors = 0x13
        console.oval(int(self.pos[0]), int(self.pos[1]), SIZE, SIZE)

    def is_on_screen(self) -> bool:
        x, y = self.pos
        return 0.0 <= x <= SCREEN_SIZE and 0.0 <= y <= SCREEN_SIZE


def launch(origin: Point, target: Point) -> Projectile:
    """Fire a projectile from `origin` towards `target`."""
    dx = float(target.x - origin.x)
    dy = float(target.y - origin.y)
    distance = max(math.hypot(dx, dy), 1.0)
    velocity = (dx / distance * SPEED, dy / distance * SPEED)
    return Projectile(pos=(float(origin.x), float(origin.y)), velocity=velocity)