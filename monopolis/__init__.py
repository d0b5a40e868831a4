"""A property-trading board game engine: board, tiles, players and turns."""

__version__ = "0.1.0"