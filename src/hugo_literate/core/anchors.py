"""Literal anchor detection on single source lines."""

from collections.abc import Iterable

from hugo_literate.core.models import AnchorMatch


def detect_anchor(line: str, anchors: Iterable[str]) -> AnchorMatch:
    """Find the first anchor, in priority order, occurring in ``line``.

    Anchors are plain substrings; the first one found wins even when a later
    one would also match, so ``// START`` beats the bare ``//``. A single
    space right after the anchor is treated as a separator and skipped.
    """
    for anchor in anchors:
        start = line.find(anchor)
        if start == -1:
            continue
        past_index = start + len(anchor)
        if past_index < len(line) and line[past_index] == " ":
            past_index += 1
        return AnchorMatch(anchor=anchor, past_index=past_index)
    return AnchorMatch()


def line_past_anchor(line: str, past_index: int) -> str:
    """Return the text of ``line`` that follows the anchor."""
    if past_index >= len(line):
        return ""
    return line[past_index:]
