"""Sizes and speeds of game objects, scaled from the window size."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Game dimensions, each derived from the window's width or height."""

    width: int
    height: int

    def font_size(self) -> int:
        """Character size of the score text: 12% of the height."""
        return int(self.height * 0.12)

    def ball_radius(self) -> float:
        """Ball radius: 2.5% of the height."""
        return self.height * 0.025

    def ball_speed_x(self) -> float:
        """Base horizontal ball speed per frame."""
        return self.height * 0.007

    def ball_speed_y(self) -> float:
        """Base vertical ball speed per frame."""
        return self.height * 0.005

    def net_size(self) -> float:
        """Width of the net drawn down the middle."""
        return self.height * 0.005

    def paddle_speed(self) -> float:
        """Distance a paddle moves per frame."""
        return self.height * 0.015

    def paddle_width(self) -> float:
        """Paddle width: 0.5% of the window width."""
        return self.width * 0.005

    def paddle_height(self) -> float:
        """Paddle height: 20% of the window height."""
        return self.height * 0.20