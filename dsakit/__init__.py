"""Classic data structures and algorithms, with menu programs for each."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "heap",
    "bst",
    "dictionary",
    "expression",
    "graph",
    "mst",
    "obst",
    "students",
    "employees",
]