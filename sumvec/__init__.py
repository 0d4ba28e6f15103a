"""Build the sequence 1, 2, 3, 4 and print its sum."""

__version__ = "0.1.0"
