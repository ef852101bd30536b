"""Classic data-structure drills: a sequence list, linked lists, a contact book and a snake game."""

__version__ = "0.1.0"