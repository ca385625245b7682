"""Swing Trading Academy: interactive course on swing-trading concepts."""

__version__ = "0.1.0"
