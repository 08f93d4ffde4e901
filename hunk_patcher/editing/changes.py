"""
Change stream — turns a raw line diff into typed :class:`Change` records.

The raw diff is computed with :mod:`difflib`; anything producing the same
``(tag, old_index, new_index, text)`` entries can be fed to
:func:`to_changes` instead.
"""

from __future__ import annotations

import difflib
import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .errors import InvalidChange

logger = logging.getLogger(__name__)


class ChangeTag(enum.Enum):
    """Kind of a line-level change; the value is its marker in hunk text."""
    EQUAL = " "
    INSERT = "+"
    DELETE = "-"

    @property
    def marker(self) -> str:
        return self.value


_TAG_NAMES = {
    "equal": ChangeTag.EQUAL,
    "insert": ChangeTag.INSERT,
    "delete": ChangeTag.DELETE,
}


@dataclass
class Change:
    """One line of a diff."""
    tag: ChangeTag
    text: str
    old_index: Optional[int] = None   # 0-based, absent for inserts
    new_index: Optional[int] = None   # 0-based, absent for deletes

    @property
    def consumes_original(self) -> bool:
        """Equal and Delete lines each stand for one original line."""
        return self.tag is not ChangeTag.INSERT


# (tag, old_index, new_index, text)
RawChange = tuple[object, Optional[int], Optional[int], str]


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n`` only, keeping terminators.

    Unlike ``str.splitlines`` this leaves ``\\r``, form feeds and unicode
    separators inside the line so ``"".join(split_lines(t)) == t``.
    """
    if not text:
        return []
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def strip_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` / ``\\r\\n`` (or a lone ``\\r``)."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def line_diff(original: str, candidate: str) -> list[RawChange]:
    """Compute the raw line diff between *original* and *candidate*.

    Returns ``(tag, old_index, new_index, text)`` tuples in text order,
    with ``tag`` one of ``"equal"``, ``"insert"``, ``"delete"``. A
    replaced block is reported as all its deletions followed by all its
    insertions.
    """
    old_lines = split_lines(original)
    new_lines = split_lines(candidate)
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    raw: list[RawChange] = []
    for op, i1, i2, j1, j2 in matcher.get_opcodes():
        if op == "equal":
            for offset in range(i2 - i1):
                raw.append(("equal", i1 + offset, j1 + offset, old_lines[i1 + offset]))
            continue
        if op in ("replace", "delete"):
            for i in range(i1, i2):
                raw.append(("delete", i, None, old_lines[i]))
        if op in ("replace", "insert"):
            for j in range(j1, j2):
                raw.append(("insert", None, j, new_lines[j]))
    return raw


def _coerce_tag(tag) -> ChangeTag:
    if isinstance(tag, ChangeTag):
        return tag
    if isinstance(tag, str):
        key = tag.lower()
        if key in _TAG_NAMES:
            return _TAG_NAMES[key]
        for member in ChangeTag:
            if member.value == tag:
                return member
    raise InvalidChange(tag, reason="unknown change tag")


def to_changes(raw: Iterable[RawChange]) -> list[Change]:
    """Type a raw diff stream as :class:`Change` records.

    Raises
    ------
    InvalidChange
        If an equal entry has no original-text position, or a tag is
        not recognised.
    """
    changes: list[Change] = []
    for tag, old_index, new_index, text in raw:
        change = Change(
            tag=_coerce_tag(tag),
            text=text,
            old_index=old_index,
            new_index=new_index,
        )
        if change.tag is ChangeTag.EQUAL and change.old_index is None:
            raise InvalidChange(change)
        changes.append(change)
    logger.debug("Change stream: %d entries", len(changes))
    return changes


def diff_changes(original: str, candidate: str) -> list[Change]:
    """Shortcut for ``to_changes(line_diff(original, candidate))``."""
    return to_changes(line_diff(original, candidate))
