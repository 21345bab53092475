"""Inline format resolver — ``\\B``, ``\\I``, ``\\U`` markers to styled runs.

Markers are paired open/close toggles.  A marker is *active* only when the
backslash that introduces it is not itself escaped: ``\\B`` is a marker,
``\\\\B`` is a literal backslash followed by ``B``, ``\\\\\\B`` is a literal
backslash followed by a marker.  Active markers are located once, up front,
by a left-to-right scan over escape pairs; the resolver then works purely
on marker offsets.

Resolution of a window ``[lo, hi)``:

1. For each marker type, take the first two markers at or after the cursor
   as that type's candidate region.
2. Pick the candidate with the smallest opening offset (ties: Bold, Italic,
   Underline).
3. Emit the text before it as a leaf with the current flags.
4. Recurse into the region's inner text with the region's flag added, and
   move the cursor past the closing marker.
5. Any other candidate that opened before the new cursor belongs to the
   consumed region; search that type again from the cursor.
6. With no candidate left, emit the remaining text and stop.

Cursor and fragment count are threaded through the recursion as plain
values.  Per-type marker offsets are sorted lists searched by bisection.
"""

from __future__ import annotations

import bisect
import logging
import re
from dataclasses import dataclass
from typing import Any

from sflang.domain.errors import TooManyFragmentsError
from sflang.domain.types import FormatFlag, flag_names

logger = logging.getLogger(__name__)

DEFAULT_MAX_FRAGMENTS = 100

MARKER_LETTERS: dict[str, FormatFlag] = {
    "B": FormatFlag.BOLD,
    "I": FormatFlag.ITALIC,
    "U": FormatFlag.UNDERLINE,
}

# Tie-break order when two candidates open at the same offset.
_SEARCH_ORDER: tuple[FormatFlag, ...] = (
    FormatFlag.BOLD,
    FormatFlag.ITALIC,
    FormatFlag.UNDERLINE,
)

_MARKER_WIDTH = 2
_ESCAPE_PAIR = re.compile(r"\\(.)", re.DOTALL)


@dataclass(frozen=True)
class FormatRun:
    """Leaf run of text sharing one set of inline flags."""

    text: str
    flags: FormatFlag = FormatFlag.NONE

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "flags": flag_names(self.flags)}


@dataclass(frozen=True)
class FormatGroup:
    """Ordered runs and nested groups resolved from one marker region."""

    flags: FormatFlag = FormatFlag.NONE
    children: tuple[FormatRun | FormatGroup, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "flags": flag_names(self.flags),
            "children": [child.to_dict() for child in self.children],
        }


FormatNode = FormatRun | FormatGroup

_Region = tuple[int, int]


def find_markers(text: str) -> dict[FormatFlag, list[int]]:
    """Return the sorted offsets of every active marker, per marker type."""
    markers: dict[FormatFlag, list[int]] = {flag: [] for flag in _SEARCH_ORDER}
    for match in _ESCAPE_PAIR.finditer(text):
        flag = MARKER_LETTERS.get(match.group(1))
        if flag is not None:
            markers[flag].append(match.start())
    return markers


def unescape_text(text: str) -> str:
    """Collapse doubled backslashes in plain text handed to a renderer."""
    return text.replace("\\\\", "\\")


def _find_region(positions: list[int], cursor: int, hi: int) -> _Region | None:
    """First open/close pair of markers inside ``[cursor, hi)``."""
    index = bisect.bisect_left(positions, cursor)
    if index + 1 >= len(positions):
        return None
    opening, closing = positions[index], positions[index + 1]
    if closing >= hi:
        return None
    return opening, closing


def _count(used: int, limit: int) -> int:
    used += 1
    if used > limit:
        msg = f"Inline format produced more than {limit} fragments"
        raise TooManyFragmentsError(msg, limit=limit)
    return used


def _resolve_window(
    text: str,
    markers: dict[FormatFlag, list[int]],
    lo: int,
    hi: int,
    flags: FormatFlag,
    used: int,
    limit: int,
) -> tuple[list[FormatNode], int]:
    nodes: list[FormatNode] = []
    cursor = lo
    candidates: dict[FormatFlag, _Region | None] = {
        flag: _find_region(markers[flag], cursor, hi) for flag in _SEARCH_ORDER
    }

    while True:
        live = [
            (region, order, flag)
            for order, flag in enumerate(_SEARCH_ORDER)
            if (region := candidates[flag]) is not None
        ]
        if not live:
            break
        (opening, closing), _, selected = min(live)

        if opening > cursor:
            used = _count(used, limit)
            nodes.append(FormatRun(unescape_text(text[cursor:opening]), flags))

        inner_flags = flags | selected
        children, used = _resolve_window(
            text, markers, opening + _MARKER_WIDTH, closing, inner_flags, used, limit
        )
        if children:
            used = _count(used, limit)
            nodes.append(FormatGroup(inner_flags, tuple(children)))

        cursor = closing + _MARKER_WIDTH
        candidates[selected] = _find_region(markers[selected], cursor, hi)
        for flag in _SEARCH_ORDER:
            region = candidates[flag]
            if flag is not selected and region is not None and region[0] < cursor:
                candidates[flag] = _find_region(markers[flag], cursor, hi)

    if cursor < hi:
        used = _count(used, limit)
        nodes.append(FormatRun(unescape_text(text[cursor:hi]), flags))
    return nodes, used


def resolve_format(text: str, *, max_fragments: int = DEFAULT_MAX_FRAGMENTS) -> FormatGroup:
    """Resolve inline markers in *text* into a tree of styled runs.

    The returned root group carries no flags.  Empty runs and empty groups
    are never emitted, and delimiter characters never appear in run text.
    Unpaired markers are left in the text as written.

    Raises:
        TooManyFragmentsError: If more than *max_fragments* runs and groups
            would be produced.
    """
    markers = find_markers(text)
    children, used = _resolve_window(
        text, markers, 0, len(text), FormatFlag.NONE, 0, max_fragments
    )
    logger.debug("Resolved inline text into %d fragments", used)
    return FormatGroup(FormatFlag.NONE, tuple(children))


def flatten_runs(node: FormatNode) -> list[FormatRun]:
    """Return the leaf runs of *node* in reading order."""
    if isinstance(node, FormatRun):
        return [node]
    runs: list[FormatRun] = []
    for child in node.children:
        runs.extend(flatten_runs(child))
    return runs
