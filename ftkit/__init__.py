"""C-library style helpers for characters, numbers, buffers, strings, lists, tokenizing, PATH lookup and formatting."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "strings",
    "linkedlist",
    "tokenize",
    "env",
    "output",
    "formatting",
]