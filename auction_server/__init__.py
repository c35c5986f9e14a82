"""Data collection backend for the auction experiment."""

__version__ = "0.1.0"
