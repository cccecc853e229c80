"""Fantasy cricket contest backend."""

__version__ = "0.1.0"
