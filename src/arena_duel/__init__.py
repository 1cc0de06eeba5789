"""Arena duel - a two-player, turn-based dueling game."""

__version__ = "0.1.0"
