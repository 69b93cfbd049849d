"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "graphs",
    "hashing",
    "heaps",
    "queues",
    "recursion",
    "sorting",
    "stacks",
    "tries",
]