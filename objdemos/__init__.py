"""Small object-oriented demonstrations, helper building blocks and a terminal snake game."""

__version__ = "0.1.0"