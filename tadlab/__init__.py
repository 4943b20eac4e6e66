"""Recursion exercises and bounded list, stack and queue types with their algorithms."""

__version__ = "0.1.0"