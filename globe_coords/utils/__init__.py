"""Numeric and globe helpers."""
