"""A two-player chess board with piece movement rules and a Tk window to play on."""

__version__ = "0.1.0"
__all__ = ["__version__"]