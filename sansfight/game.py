"""Top-level game flow: title screen, battle and game over."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from sansfight.console import SCREEN_SIZE, Console
from sansfight.enemy import SANS_FLAGS, SANS_HEIGHT, SANS_SPRITE, SANS_WIDTH, Enemy
from sansfight.heart import Heart
from sansfight.music import MusicPlayer

START_PALETTE = (0x000000, 0xFFFFFF, 0xFFFFFF, 0x000000)
BATTLE_PALETTE = (0x000000, 0x7F7F7F, 0xFFFFFF, 0xFF0000)

TITLE_LINES = (("Comic-Sans", 10, 10), ("Aperte Z", 10, 30), ("Para iniciar", 10, 40))
TITLE_SPRITE_X = SCREEN_SIZE - SANS_WIDTH + 10
TITLE_SPRITE_Y = SCREEN_SIZE - SANS_HEIGHT + 10

ARENA_X, ARENA_Y, ARENA_WIDTH, ARENA_HEIGHT = 20, 70, 120, 70

GAME_OVER_TEXT = "FIM DE JOGO"
GAME_OVER_X, GAME_OVER_Y = 36, 80


class GameState(Enum):
    """Which screen the game is showing."""

    START_SCREEN = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class Game:
    """Holds the whole game and advances it one frame per update."""

    state: GameState = GameState.START_SCREEN
    heart: Heart | None = None
    enemy: Enemy | None = None
    music: MusicPlayer = field(default_factory=MusicPlayer)

    def update(self, console: Console) -> None:
        """Run one frame of the current screen against `console`."""
        match self.state:
            case GameState.START_SCREEN:
                self._start_screen(console)
            case GameState.PLAYING:
                self._playing(console)
            case GameState.GAME_OVER:
                self._game_over(console)

    def _start_screen(self, console: Console) -> None:
        console.palette = list(START_PALETTE)
        console.draw_colors = 0x12
        for line, x, y in TITLE_LINES:
            console.text(line, x, y)

        console.draw_colors = 0x02
        console.blit(SANS_SPRITE, TITLE_SPRITE_X, TITLE_SPRITE_Y,
                     SANS_WIDTH, SANS_HEIGHT, SANS_FLAGS)

        if console.gamepads[0]:
            self.state = GameState.PLAYING

    def _playing(self, console: Console) -> None:
        if self.heart is None:
            self.heart = Heart()
        if self.enemy is None:
            self.enemy = Enemy()
        heart, enemy = self.heart, self.enemy

        console.palette = list(BATTLE_PALETTE)
        console.draw_colors = 0x31
        console.rect(ARENA_X, ARENA_Y, ARENA_WIDTH, ARENA_HEIGHT)

        if heart.life > 0:
            heart.update(console.gamepads[0])
            enemy.update(heart)

        heart.draw(console)
        heart.draw_life_bar(console)
        enemy.draw(console)

        if heart.life == 0:
            self.state = GameState.GAME_OVER

        self.music.update(console)

    def _game_over(self, console: Console) -> None:
        console.draw_colors = 0x21
        console.text(GAME_OVER_TEXT, GAME_OVER_X, GAME_OVER_Y)