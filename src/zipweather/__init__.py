"""Console weather report for a list of postal codes."""

__version__ = "0.1.0"
