"""Source file handling for hugo-literate."""

from hugo_literate.formats.source_handler import SourceHandler, SourceReadError

__all__ = [
    "SourceHandler",
    "SourceReadError",
]
