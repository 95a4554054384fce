"""CSV -> token metadata JSON generator."""

__version__ = "0.1.0"
