"""Output markup for rendered literate documents."""

from hugo_literate.formatting.shortcodes import (
    CODE_BLOCK_EPILOGUE,
    CODE_BLOCK_PROLOGUE,
    format_code_block_prologue,
)

__all__ = [
    "CODE_BLOCK_EPILOGUE",
    "CODE_BLOCK_PROLOGUE",
    "format_code_block_prologue",
]
