"""Student grade pipeline: read a score sheet and print letter grades."""

__version__ = "0.1.0"
