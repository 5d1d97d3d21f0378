"""Tolk: translation lookup, pluralization and placeholder substitution."""

__version__ = "0.1.0"
