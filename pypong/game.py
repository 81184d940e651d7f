"""The game loop: menu, play, scoring and the end-of-match screen."""

from __future__ import annotations

import argparse
import enum
import os
import random
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .ball import Ball, Score  # noqa: E402
from .paddle import Paddle  # noqa: E402
from .settings import Settings  # noqa: E402
from .sound import SoundBank  # noqa: E402

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_FALLBACK_GRAY = (64, 64, 64)
_TEXTURE_CANDIDATES = (
    Path("../assets/images/blackandwhite.jpg"),
    Path("./assets/images/blackandwhite.jpg"),
    Path("assets/images/blackandwhite.jpg"),
)
_FONT_PATH = Path("../assets/fonts/font.ttf")
_SOUND_DIR = Path("../assets/sounds")
_MENU_FONT_SIZE = 30
_WINNING_POINTS = 5
_WIN_PAUSE_SECONDS = 3
_FRAMERATE = 60


class _Effects(Protocol):
    def paddle(self) -> object: ...

    def wall(self) -> object: ...

    def score(self) -> object: ...


class State(enum.Enum):
    """What the game loop is doing."""

    MENU = enum.auto()
    PLAYING = enum.auto()
    EXIT = enum.auto()


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(_FONT_PATH), size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


def _load_texture() -> pygame.Surface:
    for path in _TEXTURE_CANDIDATES:
        if not path.is_file():
            continue
        try:
            return pygame.image.load(str(path))
        except (OSError, pygame.error):
            continue
    fallback = pygame.Surface((2, 2))
    fallback.fill(_FALLBACK_GRAY)
    return fallback


class Game:
    """A two-player match drawn onto ``surface``."""

    def __init__(
        self,
        surface: pygame.Surface,
        *,
        sound: _Effects | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        if sound is None:
            bank = SoundBank()
            bank.load(_SOUND_DIR)
            sound = bank

        self.surface = surface
        self.state = State.MENU
        self.settings = Settings(*surface.get_size())
        self._sleep = sleep
        self.score = Score()

        width, height = surface.get_size()
        self._width = float(width)
        self._height = float(height)

        net_width = max(1, round(self.settings.net_size()))
        self.net_rect = pygame.Rect(round(self._width / 2), 0, net_width, height)
        self.net_texture = pygame.transform.scale(_load_texture(), self.net_rect.size)

        self._score_font = _load_font(self.settings.font_size())
        self._menu_font = _load_font(_MENU_FONT_SIZE)
        self._title_font = _load_font(_MENU_FONT_SIZE * 2)

        self.ball = Ball(self.settings, sound, rng)
        self.player_one = Paddle(self.settings, False)
        self.player_two = Paddle(self.settings, True)

    def _blit_centered(
        self, font: pygame.font.Font, text: str, center: tuple[float, float]
    ) -> None:
        image = font.render(text, True, _WHITE)
        self.surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))

    def _present(self) -> None:
        if pygame.display.get_init() and self.surface is pygame.display.get_surface():
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> State:
        """React to a window or key event and return the resulting state."""
        key = getattr(event, "key", None)
        if event.type == pygame.QUIT or (
            event.type == pygame.KEYDOWN and key == pygame.K_ESCAPE
        ):
            self.state = State.EXIT
        if event.type == pygame.KEYDOWN and key == pygame.K_SPACE and self.state is State.MENU:
            self.state = State.PLAYING
        return self.state

    def update(self, pressed: Sequence[bool]) -> Score:
        """Advance one frame; ``pressed`` is indexed by key code."""
        self.ball.move()

        self.player_one.check_movement(bool(pressed[pygame.K_w]), bool(pressed[pygame.K_s]))
        self.player_two.check_movement(bool(pressed[pygame.K_UP]), bool(pressed[pygame.K_DOWN]))
        self.player_one.check_collision()
        self.player_two.check_collision()

        self.score = self.ball.check_collisions()
        if self.score.points:
            if self.score.is_right:
                self.player_two.points += 1
            else:
                self.player_one.points += 1

        self.ball.check_object_collisions(self.player_one)
        self.ball.check_object_collisions(self.player_two)
        return self.score

    def winner(self) -> str | None:
        """The victory message once a player has enough points, else None."""
        if self.player_one.points >= _WINNING_POINTS:
            return "Player one has won!"
        if self.player_two.points >= _WINNING_POINTS:
            return "Player two has won!"
        return None

    def check_win(self) -> str | None:
        """Show the winner, pause, and go back to the menu if the match is over."""
        message = self.winner()
        if message is None:
            return None
        self.surface.fill(_BLACK)
        self._blit_centered(self._menu_font, message, (self._width / 2, self._height / 2))
        self._present()
        self._sleep(_WIN_PAUSE_SECONDS)
        self.state = State.MENU
        return message

    def draw_menu(self) -> None:
        """Draw the title screen."""
        w, h = self._width, self._height
        self.surface.fill(_BLACK)
        self._blit_centered(self._title_font, "PONG", (w / 2, h / 4))
        self._blit_centered(
            self._menu_font, "The 1st player to get 5 points wins!", (w / 2, h / 3)
        )
        self._blit_centered(
            self._menu_font,
            "The ball's speed increases with every bounce.",
            (w / 2, h / 3 + 40),
        )
        self._blit_centered(self._menu_font, "Press SPACE to play", (w / 2, h / 2))
        self._blit_centered(self._menu_font, "Press ESC to exit", (w / 2, h / 1.8))
        self._present()

    def render(self) -> None:
        """Draw the net, scores, paddles and ball."""
        w, h = self._width, self._height
        self.surface.fill(_BLACK)
        self.surface.blit(self.net_texture, self.net_rect)
        self._blit_centered(self._score_font, str(self.player_one.points), (w / 4, h / 10))
        self._blit_centered(
            self._score_font, str(self.player_two.points), (w - w / 4, h / 10)
        )
        self.player_one.draw(self.surface)
        self.player_two.draw(self.surface)
        self.ball.draw(self.surface)
        self._present()

    def run(self) -> None:
        """Run the loop until the player quits."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                self.handle_event(event)
            if self.state is State.MENU:
                self.draw_menu()
            elif self.state is State.PLAYING:
                self.update(pygame.key.get_pressed())
                self.render()
                self.check_win()
            else:
                break
            clock.tick(_FRAMERATE)


def create_window(title: str) -> pygame.Surface:
    """Open a fullscreen window the size of the desktop."""
    pygame.init()
    surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    pygame.display.set_caption(title)
    return surface


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(description="Two-player Pong.")
    parser.parse_args(argv)
    window = create_window("Pong")
    try:
        Game(window).run()
    finally:
        pygame.quit()
    return 0