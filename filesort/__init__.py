"""Sort files into directories by file extension."""

__version__ = "0.1.0"
