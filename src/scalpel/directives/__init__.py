"""Suppression directive validation for Scalpel."""

from scalpel.directives.classifier import classify, parse_codes_from_content
from scalpel.directives.codes import DiagnosticCode
from scalpel.directives.reporter import SelfProtectingReporter
from scalpel.directives.tracker import SuppressionTracker
from scalpel.directives.types import (
    Annotation,
    CommentForm,
    CorruptionKind,
    CorruptionRecord,
    Directive,
    DirectiveKind,
)

__all__ = [
    "Annotation",
    "CommentForm",
    "CorruptionKind",
    "CorruptionRecord",
    "DiagnosticCode",
    "Directive",
    "DirectiveKind",
    "SelfProtectingReporter",
    "SuppressionTracker",
    "classify",
    "parse_codes_from_content",
]
