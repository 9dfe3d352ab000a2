"""Core scanning and rendering logic for hugo-literate."""

from hugo_literate.core.models import (
    AnchorMatch,
    AnchorSet,
    RenderedDocument,
    State,
)
from hugo_literate.core.anchors import detect_anchor, line_past_anchor
from hugo_literate.core.transducer import AnchorSyntaxError, LiterateTransducer
from hugo_literate.core.renderer import LiterateRenderer

__all__ = [
    "AnchorMatch",
    "AnchorSet",
    "RenderedDocument",
    "State",
    "detect_anchor",
    "line_past_anchor",
    "AnchorSyntaxError",
    "LiterateTransducer",
    "LiterateRenderer",
]
