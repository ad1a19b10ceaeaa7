"""A tile-based puzzle game with its map checks, window, and small text and buffer helpers."""

__version__ = "1.0.0"
__all__ = ["__version__"]