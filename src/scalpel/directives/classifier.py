"""Directive classification: kind and bareness."""

import re

from scalpel.directives.types import (
    NOTE_SEPARATOR,
    WILDCARD,
    Annotation,
    Directive,
    DirectiveKind,
)

_COMMENT_OPEN = re.compile(r"^(?://|#|/\*+)\s*")
_COMMENT_CLOSE = re.compile(r"\s*\*/$")
_DIRECTIVE_KEYWORD = re.compile(r"^lint:[\w-]+[ \t]*")


def parse_codes_from_content(raw_text: str) -> list[str]:
    """Parse rule codes from the raw text of a directive comment.

    Used when an annotation arrives without a populated code list.

    Args:
        raw_text: Raw comment text, e.g. ``// lint:enable Foo.Bar, Baz -- note``.

    Returns:
        Code strings in order. Empty if the directive names no codes.
    """
    text = raw_text.strip()
    text = _COMMENT_OPEN.sub("", text, count=1)
    text = _COMMENT_CLOSE.sub("", text, count=1)
    text = _DIRECTIVE_KEYWORD.sub("", text, count=1).partition("\n")[0].strip()

    if not text:
        return []

    code_part = text.split(NOTE_SEPARATOR, 1)[0].strip()
    if not code_part:
        return []

    return [code.strip() for code in code_part.split(",") if code.strip()]


def is_bare_code_set(codes: tuple[str, ...]) -> bool:
    """A code set is bare when empty or exactly the wildcard marker."""
    return len(codes) == 0 or codes == (WILDCARD,)


def classify(annotation: Annotation) -> Directive:
    """Resolve an annotation's bareness and effective code list.

    Args:
        annotation: Annotation produced by an extractor.

    Returns:
        Directive with ``is_bare`` computed once.
    """
    if annotation.kind is DirectiveKind.LEGACY:
        return Directive(annotation=annotation, is_bare=False, codes=())

    if annotation.codes is None and annotation.kind is DirectiveKind.ENABLE:
        # Unpopulated enables may still be targeted; trust the raw text.
        candidates = tuple(parse_codes_from_content(annotation.raw_text))
        return Directive(
            annotation=annotation,
            is_bare=is_bare_code_set(candidates),
            codes=candidates,
        )

    codes = annotation.codes or ()
    return Directive(
        annotation=annotation,
        is_bare=is_bare_code_set(codes),
        codes=codes,
    )
