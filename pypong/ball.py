"""The ball: movement, wall bounces, scoring and paddle hits."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

import pygame

from .paddle import Paddle
from .settings import Settings

_WHITE = (255, 255, 255)
_MAX_SPEED_X = 32.0  # beyond this the ball can pass through a paddle
_MAX_SPEED_Y = 8.0


class _Effects(Protocol):
    def paddle(self) -> object: ...

    def wall(self) -> object: ...

    def score(self) -> object: ...


@dataclass(frozen=True)
class Score:
    """A point scored in one frame; ``is_right`` means the right player scored."""

    points: int = 0
    is_right: bool = False


def _intersects(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> bool:
    left = max(a[0], b[0])
    top = max(a[1], b[1])
    right = min(a[0] + a[2], b[0] + b[2])
    bottom = min(a[1] + a[3], b[1] + b[3])
    return left < right and top < bottom


class Ball:
    """A ball whose position (``x``, ``y``) is the top-left of its bounding box."""

    def __init__(
        self,
        settings: Settings,
        sound: _Effects | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.radius = settings.ball_radius()
        self.max_speed = _MAX_SPEED_X
        self._width = float(settings.width)
        self._height = float(settings.height)
        self._speed_x = settings.ball_speed_x()
        self._speed_y = settings.ball_speed_y()
        self._sound = sound
        self._rng = rng if rng is not None else random.Random()
        self.x = 0.0
        self.y = 0.0
        self.vx = 0.0
        self.vy = 0.0
        self.reset(False)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

    def _play(self, effect: str) -> None:
        if self._sound is not None:
            getattr(self._sound, effect)()

    def move(self) -> None:
        """Advance the ball by its velocity."""
        self.x += self.vx
        self.y += self.vy

    def reset(self, is_right: bool) -> None:
        """Put the ball in the middle heading right or left at a random speed."""
        self.x = self._width / 2
        self.y = self._height / 2
        vx = self._rng.uniform(self._speed_x, self._speed_x * 1.5)
        vy = self._rng.uniform(self._speed_y, self._speed_y * 1.5)
        if not is_right:
            vx = -vx
        if self._rng.random() < 0.5:
            vy = -vy
        self.vx, self.vy = vx, vy

    def check_collisions(self) -> Score:
        """Bounce off the top and bottom; return a point if a side was passed."""
        diameter = self.radius * 2
        if self.y <= 0:
            self.y = 0.0
            self.vy = -self.vy
            self._play("wall")
        if self.y + diameter >= self._height:
            self.y = self._height - diameter
            self.vy = -self.vy
            self._play("wall")

        if self.x < 0:
            self.reset(True)
            self._play("score")
            return Score(1, True)
        if self.x + diameter > self._width:
            self.reset(False)
            self._play("score")
            return Score(1, False)
        return Score(0, False)

    def check_object_collisions(self, paddle: Paddle) -> bool:
        """Bounce off ``paddle`` if touching it; return whether it was hit."""
        if not _intersects(self.bounds(), paddle.bounds()):
            return False

        if self.x + self.radius < paddle.x:
            self.x = paddle.x - paddle.width / 2 - self.radius * 2
        else:
            self.x = paddle.x + paddle.width / 2
        self._play("paddle")

        self.vx = -self.vx
        boost = self._speed_x / 5
        self.vx = self.vx + boost if self.vx >= 0 else self.vx - boost
        if abs(self.vx) > self.max_speed:
            self.vx = self.max_speed if self.vx > 0 else -self.max_speed

        offset = self.y + self.radius - paddle.y
        self.vy = max(-_MAX_SPEED_Y, min(_MAX_SPEED_Y, self.vy + offset * 0.1))
        return True

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height)."""
        return (self.x, self.y, self.radius * 2, self.radius * 2)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball as a white disc."""
        center = (round(self.x + self.radius), round(self.y + self.radius))
        pygame.draw.circle(surface, _WHITE, center, max(1, round(self.radius)))