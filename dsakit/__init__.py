"""Classic sorting, searching, recursion, array and string routines."""

__version__ = "0.1.0"
__all__ = ["arrays", "recursion", "searching", "sorting", "strings"]