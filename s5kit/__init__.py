"""Sync strategies, warning errors, argument validation, structured logging and statistics for object-storage tools."""

__version__ = "0.1.0"