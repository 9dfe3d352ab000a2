"""Hugo ``highlight`` shortcode markers wrapping rendered code blocks."""

CODE_BLOCK_PROLOGUE = '{{{{< highlight {lexer} "linenos=table,linenostart={lineno}" >}}}}'
CODE_BLOCK_EPILOGUE = "{{< / highlight >}}"


def format_code_block_prologue(lexer: str, lineno: int) -> str:
    """Open a highlighted block whose line numbers start at ``lineno``.

    Args:
        lexer: Chroma lexer name, passed through verbatim
        lineno: 1-based line number of the first code line in the source

    Returns:
        The opening shortcode line
    """
    return CODE_BLOCK_PROLOGUE.format(lexer=lexer, lineno=lineno)
