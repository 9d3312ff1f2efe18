"""Classic data structures and algorithms: searching, sorting, trees, linked lists, a bounded stack, strings, arrays and numbers."""

__version__ = "0.1.0"