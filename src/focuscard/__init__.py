"""FocusCard - a focus timer with a to-do list and a collection board."""

__version__ = "0.1.0"
