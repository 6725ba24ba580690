"""Classic data structures and algorithms: sorting, expressions, linked lists and grids."""

__version__ = "0.1.0"
__all__ = ["expression", "grid", "linkedlist", "sorting"]