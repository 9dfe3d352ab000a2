"""Core data models for hugo-literate.

These structures carry a source file through the anchor scan: the anchor
forms derived from the configured token, the result of scanning one line,
and the rendered document that the CLI finally writes out.
"""

from dataclasses import dataclass, field
from enum import Enum

# Modifiers appended to the base anchor token to open and close a block
START_MODIFIER = "START"
END_MODIFIER = "END"


class State(Enum):
    """Scanner state while walking the source lines."""

    FREE = "FREE"
    LITERATE = "LITERATE"
    CODE = "CODE"


@dataclass(frozen=True)
class AnchorSet:
    """The three literal anchor forms matched against every line.

    Attributes:
        start: Opens a literate block (e.g. ``// START``)
        end: Closes a literate block (e.g. ``// END``)
        literate: Marks a prose line inside a block (e.g. ``//``)
    """

    start: str
    end: str
    literate: str

    @classmethod
    def from_token(
        cls,
        token: str,
        start_modifier: str = START_MODIFIER,
        end_modifier: str = END_MODIFIER,
    ) -> "AnchorSet":
        """Derive the start, end and bare anchors from a base token."""
        if not token:
            raise ValueError("anchor token must not be empty")
        return cls(
            start=f"{token} {start_modifier}",
            end=f"{token} {end_modifier}",
            literate=token,
        )

    def in_priority_order(self) -> tuple[str, str, str]:
        """Return anchors in detection order: start, end, bare."""
        return (self.start, self.end, self.literate)


@dataclass(frozen=True)
class AnchorMatch:
    """Result of scanning a single line for anchors.

    Attributes:
        anchor: The matched anchor string, or "" when nothing matched
        past_index: Index just past the anchor (and one separating space),
            or -1 when nothing matched
    """

    anchor: str = ""
    past_index: int = -1

    @property
    def found(self) -> bool:
        return self.past_index != -1


@dataclass
class RenderedDocument:
    """Output of a transducer run.

    Attributes:
        lines: Output lines (prose, shortcode markers and code)
        source_lines: Number of non-anchor lines consumed
        literate_blocks: Number of literate blocks opened
        code_blocks: Number of highlighted code blocks emitted
        final_state: Scanner state when input ran out
    """

    lines: list[str] = field(default_factory=list)
    source_lines: int = 0
    literate_blocks: int = 0
    code_blocks: int = 0
    final_state: State = State.FREE

    @property
    def is_complete(self) -> bool:
        """Check that every literate block was closed before end of input."""
        return self.final_state is State.FREE

    @property
    def text(self) -> str:
        """Get the document as a single newline-joined string."""
        return "\n".join(self.lines)
