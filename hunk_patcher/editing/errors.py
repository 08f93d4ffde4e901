"""
Error types raised by the hunk engine.
"""

from __future__ import annotations


class HunkPatchError(Exception):
    """Base class for all hunk engine errors."""


class InvalidChange(HunkPatchError):
    """Raised when the diff source hands over a change that breaks its contract."""

    def __init__(self, change: object, reason: str = "equal change without an original line") -> None:
        super().__init__(f"Invalid change detected ({reason}): {change!r}")
        self.change = change
        self.reason = reason


class InvalidDiffFormat(HunkPatchError):
    """Raised when an edited hunk has a line without a recognised marker."""

    def __init__(self, line_number: int, line: str,
                 reason: str = "unrecognised line marker") -> None:
        super().__init__(
            f"Invalid diff format at line {line_number} ({reason}): "
            f"{line.rstrip(chr(10))!r}"
        )
        self.reason = reason
        self.line_number = line_number
        self.line = line


class PatchMismatch(HunkPatchError):
    """Raised when an edited hunk no longer lines up with the original text.

    ``line`` is 1-based. ``expected`` is the original line (``None`` past
    the end of the file or the hunk's bound), ``actual`` is what the
    edited hunk claims.
    """

    def __init__(self, line: int, expected: str | None, actual: str,
                 reason: str | None = None) -> None:
        if reason is not None:
            detail = f"{reason}, got {actual!r}"
        elif expected is None:
            detail = f"expected end of file, got {actual!r}"
        else:
            detail = f"expected {expected!r}, got {actual!r}"
        super().__init__(f"Context mismatch at line {line}: {detail}")
        self.line = line
        self.expected = expected
        self.actual = actual
        self.reason = reason
