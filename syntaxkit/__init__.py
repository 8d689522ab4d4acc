"""Scanner and recursive-descent parser producing a typed syntax tree."""

__version__ = "0.1.2"

__all__ = ["ast", "scanner", "common", "expressions", "statements", "declarations"]