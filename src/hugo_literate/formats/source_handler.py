"""Annotated source file handler."""

from pathlib import Path
from typing import TYPE_CHECKING

from hugo_literate.errors import LiterateError

if TYPE_CHECKING:
    from hugo_literate.core.models import RenderedDocument

# Undecodable bytes survive a read/write round trip unchanged
DECODE_ERRORS = "surrogateescape"


class SourceReadError(LiterateError):
    """The source file could not be opened or read."""


class SourceHandler:
    """Read annotated source files and write rendered documents.

    The whole file is read into memory before scanning starts, and the
    rendered document is written in one go once scanning has finished.
    Line endings are left untouched, so only ``\\n`` separates lines.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: Path) -> str:
        """Read the full text of a source file.

        Raises:
            SourceReadError: If the file cannot be opened or read
        """
        try:
            f = path.open(
                "r", encoding=self.encoding, errors=DECODE_ERRORS, newline=""
            )
        except OSError as e:
            raise SourceReadError(
                f"cannot open file '{path}' for reading: {e}"
            ) from e
        with f:
            try:
                return f.read()
            except OSError as e:
                raise SourceReadError(f"cannot read from file '{path}': {e}") from e

    def read_lines(self, path: Path) -> list[str]:
        """Read a source file split on newlines.

        A trailing newline yields a final empty line, which the transducer
        counts like any other line.
        """
        return self.read(path).split("\n")

    def encode(self, document: "RenderedDocument") -> bytes:
        """Encode a rendered document back to the source encoding."""
        return document.text.encode(self.encoding, DECODE_ERRORS)

    def write(self, document: "RenderedDocument", path: Path) -> None:
        """Write a rendered document, newline-terminated, to ``path``."""
        path.write_bytes(self.encode(document) + b"\n")
