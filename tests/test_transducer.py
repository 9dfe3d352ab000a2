"""Tests for the literate transducer."""

import pytest

from hugo_literate.core.models import State
from hugo_literate.core.transducer import AnchorSyntaxError, LiterateTransducer
from hugo_literate.formatting.shortcodes import (
    CODE_BLOCK_EPILOGUE,
    format_code_block_prologue,
)


def prologue(lineno: int, lexer: str = "go") -> str:
    return format_code_block_prologue(lexer, lineno)


class TestLiterateTransducer:
    """Tests for well-formed input."""

    @pytest.fixture
    def transducer(self) -> LiterateTransducer:
        return LiterateTransducer(lexer="go", anchor="//")

    def test_sample_document(
        self,
        transducer: LiterateTransducer,
        sample_lines: list[str],
        sample_rendered: list[str],
    ):
        """Test the free line before the block counts toward numbering."""
        doc = transducer.transduce(sample_lines)

        assert doc.lines == sample_rendered
        assert doc.source_lines == 4
        assert doc.literate_blocks == 1
        assert doc.code_blocks == 1
        assert doc.is_complete is True

    def test_no_anchors_yields_empty_output(self, transducer: LiterateTransducer):
        """Test that lines outside any block are dropped."""
        doc = transducer.transduce(["package main", "", "func main() {}"])

        assert doc.lines == []
        assert doc.text == ""
        assert doc.source_lines == 3

    def test_block_at_start_of_file(self, transducer: LiterateTransducer):
        """Test prose then two code lines numbered from the first line."""
        lines = ["// START", "// Prose.", "code1", "code2", "// END"]
        doc = transducer.transduce(lines)

        assert doc.lines == [
            "Prose.",
            "",
            prologue(1),
            "code1",
            "code2",
            CODE_BLOCK_EPILOGUE,
        ]

    def test_anchor_lines_not_counted(self, transducer: LiterateTransducer):
        """Test that only non-anchor lines advance the line counter."""
        lines = [
            "one",
            "two",
            "// START",
            "// first",
            "three",
            "// END",
            "four",
            "// START",
            "// second",
            "five",
            "// END",
        ]
        doc = transducer.transduce(lines)

        assert prologue(3) in doc.lines
        assert prologue(5) in doc.lines
        assert doc.code_blocks == 2
        assert doc.literate_blocks == 2

    def test_bare_anchor_in_code_resumes_prose(
        self, transducer: LiterateTransducer
    ):
        """Test that a bare anchor closes the code block and starts prose."""
        lines = ["// START", "x := 1", "// more", "y := 2", "// END"]
        doc = transducer.transduce(lines)

        assert doc.lines == [
            "",
            prologue(1),
            "x := 1",
            CODE_BLOCK_EPILOGUE,
            "more",
            "",
            prologue(2),
            "y := 2",
            CODE_BLOCK_EPILOGUE,
        ]

    def test_end_without_code_has_no_epilogue(
        self, transducer: LiterateTransducer
    ):
        """Test a prose-only block closes without a shortcode."""
        doc = transducer.transduce(["// START", "// just words", "// END"])

        assert doc.lines == ["just words"]
        assert doc.code_blocks == 0

    def test_blank_line_in_block_opens_code(self, transducer: LiterateTransducer):
        """Test that an empty line inside a block is treated as code."""
        doc = transducer.transduce(["// START", "// prose", ""])

        assert doc.lines == ["prose", "", prologue(1), ""]

    def test_code_lines_copied_verbatim(self, transducer: LiterateTransducer):
        """Test indentation and text in code lines are kept."""
        doc = transducer.transduce(["// START", "\tif x {", "\t}", "// END"])

        assert doc.lines[2:4] == ["\tif x {", "\t}"]

    def test_start_anchor_beats_bare_prefix(self):
        """Test a token that prefixes the start anchor opens a block."""
        transducer = LiterateTransducer(lexer="text", anchor="X")
        doc = transducer.transduce(["X START extra", "X prose", "X END"])

        assert doc.lines == ["prose"]

    def test_unterminated_literate_block(self, transducer: LiterateTransducer):
        """Test input ending inside a literate block is accepted."""
        doc = transducer.transduce(["// START", "// open"])

        assert doc.lines == ["open"]
        assert doc.final_state is State.LITERATE
        assert doc.is_complete is False

    def test_unterminated_code_block(self, transducer: LiterateTransducer):
        """Test input ending inside a code block emits no epilogue."""
        doc = transducer.transduce(["// START", "code"])

        assert doc.lines == ["", prologue(1), "code"]
        assert doc.final_state is State.CODE

    def test_lexer_passed_to_prologue(self):
        """Test the configured lexer appears in every prologue."""
        transducer = LiterateTransducer(lexer="python", anchor="#")
        doc = transducer.transduce(["# START", "print(1)", "# END"])

        assert doc.lines[1] == prologue(1, lexer="python")

    def test_empty_anchor_rejected(self):
        """Test that an empty anchor token is refused."""
        with pytest.raises(ValueError):
            LiterateTransducer(lexer="go", anchor="")


class TestAnchorSyntaxErrors:
    """Tests for anchors in states that do not allow them."""

    @pytest.fixture
    def transducer(self) -> LiterateTransducer:
        return LiterateTransducer(lexer="go", anchor="//")

    def test_end_outside_block(self, transducer: LiterateTransducer):
        """Test an end anchor with no open block."""
        with pytest.raises(AnchorSyntaxError) as exc_info:
            transducer.transduce(["x", "// END"])

        assert exc_info.value.lineno == 2
        assert exc_info.value.anchor == "// END"
        assert str(exc_info.value) == (
            "line 2: unexpected anchor '// END' outside of literate block"
        )

    def test_bare_anchor_outside_block(self, transducer: LiterateTransducer):
        """Test a plain comment outside any block is an error."""
        with pytest.raises(AnchorSyntaxError, match="line 1: .*'//' outside"):
            transducer.transduce(["a := b // note"])

    def test_start_inside_literate_block(self, transducer: LiterateTransducer):
        """Test a nested start anchor in prose."""
        with pytest.raises(AnchorSyntaxError) as exc_info:
            transducer.transduce(["// START", "// prose", "// START"])

        assert exc_info.value.lineno == 3
        assert exc_info.value.reason == "inside of literate block"

    def test_start_inside_code_block(self, transducer: LiterateTransducer):
        """Test a nested start anchor in code."""
        with pytest.raises(AnchorSyntaxError) as exc_info:
            transducer.transduce(["", "// START", "code", "// START"])

        assert exc_info.value.lineno == 4
        assert str(exc_info.value) == (
            "line 4: unexpected anchor '// START' inside of code block"
        )
