"""Key event dispatch onto buffer operations and editor commands."""

from .dispatcher import InputDispatcher, is_printable, is_quit

__all__ = ["InputDispatcher", "is_printable", "is_quit"]
