"""The opponent: a sprite at the top of the screen that fires at the heart."""

from __future__ import annotations

from dataclasses import dataclass, field

from sansfight.console import BLIT_1BPP, Console
from sansfight.heart import Heart, Point
from sansfight.projectile import Projectile, launch

SANS_WIDTH = 50
SANS_HEIGHT = 50
SANS_FLAGS = BLIT_1BPP
SANS_SPRITE = bytes((
    0xff, 0xff, 0xf8, 0x01, 0xff, 0xff, 0xff, 0xff, 0xf0, 0x00, 0x0f, 0xff, 0xff, 0xff,
    0xf8, 0x00, 0x03, 0xff, 0xff, 0xff, 0xfc, 0x00, 0x00, 0x3f, 0xff, 0xff, 0xff, 0x00,
    0x00, 0x0f, 0xff, 0xff, 0xff, 0x80, 0x00, 0x01, 0xff, 0xff, 0xff, 0xe1, 0xe0, 0x7c,
    0x7f, 0xff, 0xff, 0xf8, 0xfc, 0x3f, 0x1f, 0xff, 0xff, 0xfe, 0x73, 0x0c, 0xe7, 0xff,
    0xff, 0xff, 0x9c, 0xc3, 0x39, 0xff, 0xff, 0xff, 0xf3, 0xe0, 0x7c, 0xff, 0xff, 0xff,
    0xfe, 0x09, 0x90, 0x7f, 0xff, 0xff, 0xff, 0x84, 0xf2, 0x0f, 0xff, 0xff, 0xff, 0xc4,
    0x3c, 0x23, 0xff, 0xff, 0xff, 0xf1, 0x80, 0x1c, 0xff, 0xff, 0xff, 0xfc, 0x7f, 0xfa,
    0x3f, 0xff, 0xff, 0xff, 0x09, 0x4b, 0x1f, 0xff, 0xff, 0xfe, 0x61, 0xd3, 0x8d, 0xff,
    0xff, 0xff, 0x0e, 0x1f, 0x82, 0x3f, 0xff, 0xff, 0xb0, 0xe0, 0x07, 0x1b, 0xff, 0xff,
    0xff, 0x1f, 0xff, 0xce, 0x7f, 0xff, 0xff, 0xe1, 0x83, 0x86, 0xcf, 0xff, 0xfd, 0xde,
    0x31, 0x8f, 0x7b, 0xff, 0xfe, 0xf7, 0xb7, 0xc7, 0xde, 0x3f, 0xff, 0x7d, 0xef, 0x3d,
    0xf7, 0xe7, 0xff, 0xdf, 0x78, 0xc4, 0x79, 0xf9, 0xff, 0xf7, 0xc0, 0xd1, 0x50, 0x7e,
    0x7f, 0xf9, 0xf7, 0xd4, 0x43, 0xcf, 0x9f, 0xfe, 0x7d, 0xf1, 0x14, 0xfb, 0xf7, 0xff,
    0xcf, 0x7d, 0x44, 0xbe, 0xf9, 0xff, 0xf9, 0xdf, 0x51, 0x2f, 0xbc, 0x7f, 0xff, 0x37,
    0xd7, 0xc7, 0xee, 0x7f, 0xff, 0xec, 0xf8, 0x03, 0xf2, 0x3f, 0xff, 0xfe, 0x00, 0x3e,
    0x01, 0x9f, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xfa, 0x7f, 0xf7, 0xdf,
    0xff, 0xff, 0xfd, 0x1f, 0xfc, 0xf7, 0xff, 0xff, 0xff, 0x4f, 0xef, 0x3d, 0xff, 0xff,
    0xff, 0xd3, 0xf5, 0xdf, 0x7f, 0xff, 0xff, 0xf4, 0xfd, 0x73, 0xef, 0xff, 0xff, 0xf9,
    0x7f, 0x5c, 0xfb, 0xff, 0xff, 0xfe, 0xdf, 0x97, 0x3e, 0xff, 0xff, 0xff, 0xb7, 0xed,
    0xef, 0xbf, 0xff, 0xff, 0xed, 0xfb, 0x7b, 0x8f, 0xff, 0xff, 0xfc, 0x00, 0xe0, 0x17,
    0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0x88, 0xff, 0x83, 0x1f, 0xff,
    0xff, 0xc1, 0x7f, 0xe1, 0x83, 0xff, 0xff, 0xe0, 0x3f, 0xff, 0xc0, 0x7f, 0xff, 0xf8,
    0x09, 0xfc, 0x20, 0x3f, 0xf0,
))

SPRITE_X = 55
SPRITE_Y = 10
SHOOT_INTERVAL = 60
_PROJECTILE_CENTRE = 2


def _start_position() -> Point:
    return Point(80, 20)


@dataclass
class Enemy:
    """Fires a projectile at the heart every second and tracks those in flight."""

    pos: Point = field(default_factory=_start_position)
    projectiles: list[Projectile] = field(default_factory=list)
    _shoot_timer: int = field(default=0, init=False, repr=False)

    def update(self, heart: Heart) -> None:
        """Fire on schedule, move projectiles, and resolve hits on the heart."""
        self._shoot_timer += 1
        if self._shoot_timer >= SHOOT_INTERVAL:
            self.projectiles.append(launch(self.pos, heart.body))
            self._shoot_timer = 0

        for projectile in self.projectiles:
            projectile.update()

        survivors = []
        for projectile in self.projectiles:
            px = int(projectile.pos[0]) + _PROJECTILE_CENTRE
            py = int(projectile.pos[1]) + _PROJECTILE_CENTRE
            if heart.is_hit(px, py) and heart.life > 0:
                heart.life -= 1
                continue
            if projectile.is_on_screen():
                survivors.append(projectile)
        self.projectiles = survivors

    def draw(self, console: Console) -> None:
        console.draw_colors = 0x03
        console.blit(SANS_SPRITE, SPRITE_X, SPRITE_Y, SANS_WIDTH, SANS_HEIGHT, SANS_FLAGS)
        for projectile in self.projectiles:
            projectile.draw(console)