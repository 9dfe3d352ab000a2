"""Single-pass transducer from annotated source lines to a literate document."""

from collections.abc import Iterable

from hugo_literate.core.anchors import detect_anchor, line_past_anchor
from hugo_literate.core.models import AnchorSet, RenderedDocument, State
from hugo_literate.errors import LiterateError
from hugo_literate.formatting.shortcodes import (
    CODE_BLOCK_EPILOGUE,
    format_code_block_prologue,
)

OUTSIDE_LITERATE_BLOCK = "outside of literate block"
INSIDE_LITERATE_BLOCK = "inside of literate block"
INSIDE_CODE_BLOCK = "inside of code block"


class AnchorSyntaxError(LiterateError):
    """An anchor appeared where the current state does not allow it."""

    def __init__(self, lineno: int, anchor: str, reason: str) -> None:
        self.lineno = lineno
        self.anchor = anchor
        self.reason = reason
        super().__init__(f"line {lineno}: unexpected anchor '{anchor}' {reason}")


class LiterateTransducer:
    """Reclassify source lines as prose, code-block boundaries or code.

    States:
    - FREE: outside any literate block; lines are dropped
    - LITERATE: inside a block; anchored lines are prose, the first
      unanchored line opens a code block
    - CODE: inside a code block; unanchored lines are copied verbatim

    A start anchor opens a block, an end anchor closes it, and a bare anchor
    inside a code block closes the code block and resumes prose on that
    same line. Input ending in any state is accepted.
    """

    def __init__(self, lexer: str, anchor: str) -> None:
        """Initialize the transducer.

        Args:
            lexer: Chroma lexer name used in every code-block prologue
            anchor: Base anchor token, e.g. ``//``

        Raises:
            ValueError: If the anchor token is empty
        """
        self.lexer = lexer
        self.anchors = AnchorSet.from_token(anchor)

    def transduce(self, lines: Iterable[str]) -> RenderedDocument:
        """Scan ``lines`` once and build the rendered document.

        Raises:
            AnchorSyntaxError: On the first anchor found in a state that
                does not permit it. No partial document is returned.
        """
        anchors = self.anchors
        priority = anchors.in_priority_order()
        document = RenderedDocument()
        output = document.lines
        state = State.FREE
        lineno = 1

        for index, line in enumerate(lines):
            match = detect_anchor(line, priority)
            anchor = match.anchor

            if state is State.FREE:
                if anchor == anchors.start:
                    document.literate_blocks += 1
                    state = State.LITERATE
                elif match.found:
                    raise AnchorSyntaxError(index + 1, anchor, OUTSIDE_LITERATE_BLOCK)
                else:
                    lineno += 1

            elif state is State.LITERATE:
                if anchor == anchors.start:
                    raise AnchorSyntaxError(index + 1, anchor, INSIDE_LITERATE_BLOCK)
                elif anchor == anchors.literate:
                    output.append(line_past_anchor(line, match.past_index))
                elif anchor == anchors.end:
                    state = State.FREE
                else:
                    output.append("")
                    output.append(format_code_block_prologue(self.lexer, lineno))
                    output.append(line)
                    document.code_blocks += 1
                    lineno += 1
                    state = State.CODE

            elif state is State.CODE:
                if anchor == anchors.start:
                    raise AnchorSyntaxError(index + 1, anchor, INSIDE_CODE_BLOCK)
                elif anchor == anchors.literate:
                    output.append(CODE_BLOCK_EPILOGUE)
                    output.append(line_past_anchor(line, match.past_index))
                    state = State.LITERATE
                elif anchor == anchors.end:
                    output.append(CODE_BLOCK_EPILOGUE)
                    state = State.FREE
                else:
                    output.append(line)
                    lineno += 1

            else:
                raise AssertionError(f"unknown state {state!r}")

        document.source_lines = lineno - 1
        document.final_state = state
        return document
