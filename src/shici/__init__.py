"""shici - classical poem corpus indexing and search."""

__version__ = "0.1.0"
