"""Classic algorithms and data structures in plain Python, with a small invoice tool."""

__version__ = "0.1.0"