"""Classic algorithms and small data structures in plain Python."""

__version__ = "0.1.0"