"""Render an annotated source file into a literate document."""

from pathlib import Path
from typing import Optional

from hugo_literate.config import get_settings
from hugo_literate.core.models import RenderedDocument
from hugo_literate.core.transducer import LiterateTransducer
from hugo_literate.errors import ConfigurationError
from hugo_literate.formats import SourceHandler


class LiterateRenderer:
    """Orchestrates reading and transducing one source file.

    Pipeline:
    1. Read the whole source file and split it into lines
    2. Transduce the lines into prose and highlighted code blocks
    3. Hand the rendered document back for a single write
    """

    def __init__(
        self,
        lexer: Optional[str] = None,
        anchor: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            lexer: Chroma lexer name (falls back to LITERATE_LEXER)
            anchor: Base anchor token (falls back to LITERATE_ANCHOR)
            encoding: Source file encoding (falls back to LITERATE_ENCODING)

        Raises:
            ConfigurationError: If no lexer or anchor is available
        """
        settings = get_settings()
        self.lexer = lexer or settings.default_lexer
        self.anchor = anchor or settings.default_anchor

        if not self.lexer:
            raise ConfigurationError("--lexer is a required option")
        if not self.anchor:
            raise ConfigurationError("--anchor is a required option")

        self.handler = SourceHandler(encoding=encoding or settings.encoding)
        self.transducer = LiterateTransducer(lexer=self.lexer, anchor=self.anchor)

    def render_lines(self, lines: list[str]) -> RenderedDocument:
        """Render already-split source lines."""
        return self.transducer.transduce(lines)

    def render_file(self, input_path: Path) -> RenderedDocument:
        """Render a source file.

        Raises:
            SourceReadError: If the file cannot be opened or decoded
            AnchorSyntaxError: If an anchor appears in an invalid state
        """
        lines = self.handler.read_lines(input_path)
        return self.render_lines(lines)
