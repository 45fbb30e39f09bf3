"""A grid-based snake arcade game with power-ups, difficulty levels and wrap-around walls."""

__version__ = "0.1.0"