"""Scalpel - keeps lint suppression directives surgical."""

__version__ = "0.1.0"
