"""Command line interface for Scalpel."""
