"""Application of proposed fixes for Scalpel."""

from typing import Iterable

from scalpel.core.types import Fix


class FixConflictError(Exception):
    """Fixes in one pass overlap or fall outside the source."""

    pass


def apply_fixes(source: bytes, fixes: Iterable[Fix]) -> bytes:
    """Apply every fix to ``source`` in a single pass.

    Either all fixes apply or none do: any overlap raises before the
    source is touched.

    Args:
        source: Original file content.
        fixes: Fixes whose byte ranges refer to ``source``.

    Returns:
        The rewritten content.

    Raises:
        FixConflictError: If two fixes overlap or a range is out of bounds.
    """
    ordered = sorted(set(fixes), key=lambda f: (f.start_byte, f.end_byte))
    if not ordered:
        return source

    for previous, current in zip(ordered, ordered[1:]):
        if previous.overlaps(current):
            raise FixConflictError(
                f"Overlapping fixes at bytes {previous.start_byte}..{previous.end_byte} "
                f"and {current.start_byte}..{current.end_byte}"
            )

    if ordered[-1].end_byte > len(source):
        raise FixConflictError(
            f"Fix range {ordered[-1].start_byte}..{ordered[-1].end_byte} "
            f"exceeds source length {len(source)}"
        )

    parts: list[bytes] = []
    cursor = 0
    for fix in ordered:
        parts.append(source[cursor:fix.start_byte])
        parts.append(fix.replacement.encode("utf-8"))
        cursor = fix.end_byte
    parts.append(source[cursor:])

    return b"".join(parts)
