"""Classic data structures and algorithms with small record-file stores."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "booktree",
    "bst",
    "employees",
    "graph",
    "hashtable",
    "optimal_bst",
    "sorting",
    "students",
]