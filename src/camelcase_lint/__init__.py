"""Camel case naming checks for JavaScript identifiers."""

__version__ = "0.1.0"
