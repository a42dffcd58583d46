"""Grocery receipt spending analytics."""
__version__ = "1.0.0"
