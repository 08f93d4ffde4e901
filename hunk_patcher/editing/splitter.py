"""
Hunk splitter — breaks a hunk holding several change regions into one
hunk per region.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Sequence

from .changes import ChangeTag
from .hunks import Hunk

logger = logging.getLogger(__name__)


def split_hunk(hunk: Hunk) -> list[Hunk]:
    """Split *hunk* at the equal lines separating its change regions.

    No context is added: the sub-hunks partition the lines of *hunk*.
    A hunk with a single change region comes back as a one-element list,
    which callers should report as "cannot split further".
    """
    pieces: list[Hunk] = []
    current = []
    in_diff = False
    cursor = hunk.anchor
    piece_start = cursor

    for change in hunk.changes:
        if not current:
            piece_start = cursor
        current.append(dataclasses.replace(change))
        if change.consumes_original:
            cursor += 1

        if change.tag is ChangeTag.EQUAL:
            if in_diff:
                pieces.append(Hunk(changes=current, start=piece_start))
                current = []
                in_diff = False
        else:
            in_diff = True

    if in_diff:
        pieces.append(Hunk(changes=current, start=piece_start))
    elif current and pieces:
        # trailing context stays with the last region
        pieces[-1].changes.extend(current)

    if not pieces:
        return [Hunk(changes=[dataclasses.replace(c) for c in hunk.changes],
                     start=hunk.anchor)]

    logger.debug("Split hunk at line %d into %d piece(s)",
                 hunk.anchor + 1, len(pieces))
    return pieces


def splice_hunks(
    hunks: Sequence[Hunk],
    index: int,
    replacement: Sequence[Hunk],
) -> list[Hunk]:
    """Return a new list with ``hunks[index]`` replaced by *replacement*."""
    if not 0 <= index < len(hunks):
        raise IndexError(f"hunk index {index} out of range")
    return [*hunks[:index], *replacement, *hunks[index + 1:]]
