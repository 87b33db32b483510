"""Coordinate formatters."""
