"""Classic algorithm drills on arrays, linked lists and contest problems."""

__version__ = "0.1.0"
__all__ = ["arrays", "basics", "contests", "linked"]