"""Text patterns of stars, numbers and letters built one row at a time, with a command to print them."""

__version__ = "0.1.0"
__all__ = ["cli", "letters", "numbers", "shapes"]