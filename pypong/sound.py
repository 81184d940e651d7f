"""Sound effects for bounces and scoring."""

from __future__ import annotations

import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

_FILES = {
    "paddle": "paddle_bounce.wav",
    "wall": "wall_bounce.wav",
    "score": "score.wav",
}


class SoundBank:
    """Holds the three effects and plays one at a time."""

    def __init__(self) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._channel: pygame.mixer.Channel | None = None

    @property
    def loaded(self) -> frozenset[str]:
        """Names of the effects that loaded successfully."""
        return frozenset(self._sounds)

    def load(self, directory: str | os.PathLike[str]) -> list[str]:
        """Load the effects from ``directory``; return the names that failed.

        A failure is reported on standard error and leaves that effect silent.
        """
        base = Path(directory)
        failed = []
        for name, filename in _FILES.items():
            try:
                self._sounds[name] = self._read(base / filename)
            except (pygame.error, OSError):
                self._sounds.pop(name, None)
                print(f"Failed to load {name} sound!", file=sys.stderr)
                failed.append(name)
        return failed

    @staticmethod
    def _read(path: Path) -> pygame.mixer.Sound:
        if not path.is_file():
            raise FileNotFoundError(str(path))
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))

    def _play(self, name: str) -> bool:
        sound = self._sounds.get(name)
        if sound is None:
            return False
        if self._channel is not None:
            self._channel.stop()
        self._channel = sound.play()
        return True

    def paddle(self) -> bool:
        """Play the paddle bounce; return whether anything was played."""
        return self._play("paddle")

    def wall(self) -> bool:
        """Play the wall bounce; return whether anything was played."""
        return self._play("wall")

    def score(self) -> bool:
        """Play the score effect; return whether anything was played."""
        return self._play("score")