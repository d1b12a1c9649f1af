"""Compound interest projector — month-by-month savings growth."""

__version__ = "1.0.0"
