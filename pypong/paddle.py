"""A player's paddle."""

from __future__ import annotations

import pygame

from .settings import Settings

_WHITE = (255, 255, 255)


class Paddle:
    """A vertical paddle whose position (``x``, ``y``) is its centre."""

    def __init__(self, settings: Settings, is_right: bool) -> None:
        self.is_right = is_right
        self.speed = settings.paddle_speed()
        self.points = 0
        self.width = settings.paddle_width()
        self.height = settings.paddle_height()
        self._window_height = float(settings.height)

        margin = self.width * 10
        self.x = settings.width - margin if is_right else margin
        self.y = settings.height / 2

    def check_collision(self) -> None:
        """Keep the paddle inside the window vertically."""
        half = self.height / 2
        if self.y + half > self._window_height:
            self.y = self._window_height - half
        if self.y - half < 0:
            self.y = half

    def check_movement(self, up: bool, down: bool) -> None:
        """Move up and/or down according to which keys are held."""
        if up:
            self.y -= self.speed
        if down:
            self.y += self.speed

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height)."""
        return (
            self.x - self.width / 2,
            self.y - self.height / 2,
            self.width,
            self.height,
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the paddle as a white rectangle."""
        left, top, width, height = self.bounds()
        rect = pygame.Rect(round(left), round(top), max(1, round(width)), round(height))
        pygame.draw.rect(surface, _WHITE, rect)