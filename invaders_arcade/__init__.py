"""A retro space invaders arcade game: game logic plus a pygame window."""

__version__ = "1.0.0"