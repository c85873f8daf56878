"""Helpers for strings, numbers, output, sequences, tables and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "output", "strings", "tables"]