"""Classic algorithms and data structures: sorting, searching, backtracking, recursion, hashing, lists and graphs."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "cli",
    "graph",
    "hashing",
    "heap",
    "linked",
    "recursion",
    "sorting",
    "valuebox",
]