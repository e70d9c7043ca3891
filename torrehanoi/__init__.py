"""Terminal Tower of Hanoi game with a saved history of played matches."""

__version__ = "1.0.0"
__all__ = ["stack", "game", "history", "cli"]