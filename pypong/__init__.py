"""Two-player full-screen Pong: settings, sounds, paddles, ball and game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]