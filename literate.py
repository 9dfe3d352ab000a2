#!/usr/bin/env python3
"""
hugo-literate - render annotated source files as Hugo literate documents

Simple usage:
    python literate.py --lexer go --anchor // main.go           # Writes to stdout
    python literate.py --lexer go --anchor // main.go -o out.md # Writes to a file
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from hugo_literate.cli import app

if __name__ == "__main__":
    app()
