"""Checks module for Scalpel."""

from scalpel.checks.base import Check, CheckContext, CheckRegistry
from scalpel.checks.directives import DirectivesCheck

__all__ = [
    "Check",
    "CheckContext",
    "CheckRegistry",
    "DirectivesCheck",
]
