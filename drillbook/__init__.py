"""Worked solutions to classic algorithm drills on arrays, strings, linked lists and trees."""

__version__ = "0.1.0"