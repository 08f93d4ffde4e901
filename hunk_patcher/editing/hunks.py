"""
Hunk builder — groups a change stream into reviewable hunks padded with
a bounded amount of unchanged context.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .changes import Change, ChangeTag, diff_changes
from .errors import InvalidChange

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = 6


class Disposition(enum.Enum):
    """Review state of a hunk."""
    UNDECIDED = "undecided"
    ACCEPT = "accept"
    REJECT = "reject"


@dataclass
class Hunk:
    """A contiguous, independently reviewable region of a diff."""
    changes: list[Change]
    disposition: Disposition = Disposition.UNDECIDED
    # Original-text position of the first change; only consulted when no
    # change carries an old_index (a hunk made purely of insertions).
    start: Optional[int] = None

    def __post_init__(self) -> None:
        self.changes = list(self.changes)
        if not self.changes:
            raise ValueError("A hunk needs at least one change")

    @property
    def anchor(self) -> int:
        """Position in the original text where this hunk starts to apply."""
        for change in self.changes:
            if change.old_index is not None:
                return change.old_index
        return self.start if self.start is not None else 0

    @property
    def new_start(self) -> Optional[int]:
        for change in self.changes:
            if change.new_index is not None:
                return change.new_index
        return None

    @property
    def has_changes(self) -> bool:
        return any(c.tag is not ChangeTag.EQUAL for c in self.changes)

    @property
    def is_accepted(self) -> bool:
        return self.disposition is Disposition.ACCEPT

    def stats(self) -> tuple[int, int]:
        """Return ``(inserted, deleted)`` line counts."""
        inserted = sum(1 for c in self.changes if c.tag is ChangeTag.INSERT)
        deleted = sum(1 for c in self.changes if c.tag is ChangeTag.DELETE)
        return inserted, deleted


def accept(hunk: Hunk) -> Hunk:
    """Mark *hunk* to be applied."""
    hunk.disposition = Disposition.ACCEPT
    return hunk


def reject(hunk: Hunk) -> Hunk:
    """Mark *hunk* to be left out."""
    hunk.disposition = Disposition.REJECT
    return hunk


def build_hunks(
    original: str,
    candidate: str,
    context: int = DEFAULT_CONTEXT,
) -> list[Hunk]:
    """Diff *original* against *candidate* and group the result into hunks.

    Parameters
    ----------
    original:
        The text being patched.
    candidate:
        The proposed replacement text.
    context:
        Unchanged lines kept on each side of a change region.

    Returns
    -------
    list[Hunk]
        Hunks in original-text order; empty when the texts are equal.
    """
    return build_hunks_from_changes(diff_changes(original, candidate), context)


def build_hunks_from_changes(
    changes: Iterable[Change],
    context: int = DEFAULT_CONTEXT,
) -> list[Hunk]:
    """Group an already-typed change stream into hunks.

    A window is closed once *context* equal lines follow its last change.
    Change regions separated by fewer equal lines end up in one hunk.
    """
    if context < 0:
        raise ValueError(f"context must be non-negative, got {context}")

    hunks: list[Hunk] = []
    window: list[Change] = []
    window_start = 0
    consumed = 0
    in_diff = False
    trail = 0

    for change in changes:
        if change.tag is ChangeTag.EQUAL and change.old_index is None:
            raise InvalidChange(change)

        if not window:
            window_start = consumed
        window.append(change)
        if change.consumes_original:
            consumed += 1

        if change.tag is ChangeTag.EQUAL:
            if in_diff:
                trail += 1
                if trail >= context:
                    hunks.append(_trim(window, window_start, context))
                    window = []
                    in_diff = False
                    trail = 0
        else:
            in_diff = True
            trail = 0

    if window and in_diff:
        hunks.append(_trim(window, window_start, context))

    logger.debug("Built %d hunk(s) with context=%d", len(hunks), context)
    return hunks


def _trim(window: list[Change], window_start: int, context: int) -> Hunk:
    """Cut a closed window down to its changes plus *context* lines each side."""
    positions = [i for i, c in enumerate(window) if c.tag is not ChangeTag.EQUAL]
    first = max(positions[0] - context, 0)
    last = min(positions[-1] + context + 1, len(window))

    start = window_start + sum(1 for c in window[:first] if c.consumes_original)
    return Hunk(changes=window[first:last], start=start)
