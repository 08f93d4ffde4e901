"""
Patch applier — rebuilds a text from the original and the accepted hunks.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .changes import ChangeTag, split_lines
from .hunks import Hunk

logger = logging.getLogger(__name__)


def apply(original: str, hunks: Iterable[Hunk]) -> str:
    """Apply the accepted *hunks* to *original*.

    Hunks are applied in list order, which must be increasing anchor
    order. Anything not accepted is skipped and the original lines it
    covered are copied through unchanged. No validation happens here:
    hunks are checked when they are built or edited.
    """
    original_lines = split_lines(original)
    out: list[str] = []
    index = 0
    applied = 0

    for hunk in hunks:
        if not hunk.is_accepted:
            continue

        anchor = hunk.anchor
        if index < anchor:
            out.extend(original_lines[index:anchor])
            index = anchor

        for change in hunk.changes:
            if change.tag is ChangeTag.EQUAL:
                out.append(change.text)
                index += 1
            elif change.tag is ChangeTag.INSERT:
                out.append(change.text)
            else:
                index += 1
        applied += 1

    out.extend(original_lines[index:])
    logger.debug("Applied %d hunk(s)", applied)
    return "".join(out)
