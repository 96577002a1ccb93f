"""Synthetic bank customer and savings account data generation."""

__version__ = "0.1.0"
