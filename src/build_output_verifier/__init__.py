"""Pre-publish verification of library build output."""

__version__ = "0.1.0"
