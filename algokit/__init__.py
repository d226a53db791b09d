"""Classic sorting, merging, searching and recursion algorithms, with a bounded stack."""

__version__ = "0.1.0"