"""gov — Go virtual environment tool."""

__version__ = "0.1.0"
