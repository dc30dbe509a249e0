"""Grid puzzle engine where words on the board form the rules, with a simple pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "board", "enums", "game", "objects", "rules"]