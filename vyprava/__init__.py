"""A terminal fantasy adventure with classes, backstories, fights and villages."""

__version__ = "0.1.0"