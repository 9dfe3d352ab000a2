"""Command-line interface for hugo-literate."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from hugo_literate import __version__
from hugo_literate.core.models import RenderedDocument
from hugo_literate.core.renderer import LiterateRenderer
from hugo_literate.errors import ConfigurationError, LiterateError

USAGE = "Usage: literate --lexer <Chroma Highlight lexer name> --anchor <anchor> <filename>"

app = typer.Typer(
    name="literate",
    help="Render an annotated source file as a Hugo literate document.",
    add_completion=False,
)
# Diagnostics only; the rendered document goes to stdout via typer.echo
console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"hugo-literate v{__version__}")
        raise typer.Exit()


def resolve_options(
    lexer: Optional[str],
    anchor: Optional[str],
    filename: Optional[str],
) -> tuple[LiterateRenderer, Path]:
    """Build the renderer and check a filename was given.

    The renderer fills lexer and anchor from settings and rejects them when
    still missing, so errors come out in CLI order: lexer, anchor, filename.

    Raises:
        ConfigurationError: For the first missing option
    """
    renderer = LiterateRenderer(lexer=lexer, anchor=anchor)
    if not filename:
        raise ConfigurationError("<filename> is a required argument")
    return renderer, Path(filename)


def report_summary(path: Path, document: RenderedDocument) -> None:
    """Print a verbose summary of a finished run to stderr."""
    console.print(
        f"[blue]Rendered:[/blue] {document.code_blocks} code block(s) in "
        f"{document.literate_blocks} literate block(s), "
        f"{document.source_lines} source line(s)"
    )
    if not document.is_complete:
        console.print(
            f"[yellow]Warning:[/yellow] {escape(str(path))} ends inside an open "
            f"{document.final_state.value.lower()} block"
        )


@app.command()
def main(
    filename: Optional[str] = typer.Argument(
        None,
        help="Annotated source file to render",
        show_default=False,
    ),
    lexer: Optional[str] = typer.Option(
        None,
        "--lexer",
        help="Chroma Highlight lexer name (default: $LITERATE_LEXER)",
    ),
    anchor: Optional[str] = typer.Option(
        None,
        "--anchor",
        help="Anchor to detect literate comments. Everything to the left of "
        "the anchor, including the anchor and its modifiers, is discarded; "
        "the rest is included in the output (default: $LITERATE_ANCHOR)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the document to this file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render literate prose and highlighted code from an annotated source file.

    Lines between "<anchor> START" and "<anchor> END" make up a literate
    block. Lines carrying the bare anchor become prose; the other lines in
    the block become Hugo highlight blocks numbered as in the source.

    Examples:

        literate --lexer go --anchor // main.go

        literate --lexer python --anchor "#" script.py -o docs/script.md
    """
    try:
        renderer, path = resolve_options(lexer, anchor, filename)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(1)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {escape(str(path))}")
        console.print(f"[blue]Lexer:[/blue] {escape(renderer.lexer)}")
        console.print(f"[blue]Anchor:[/blue] {escape(renderer.anchor)}")

    try:
        document = renderer.render_file(path)
    except LiterateError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is not None:
        try:
            renderer.handler.write(document, output)
        except OSError as e:
            console.print(
                f"[red]Error:[/red] cannot write to file "
                f"'{escape(str(output))}': {escape(str(e))}"
            )
            raise typer.Exit(1)
        if verbose:
            console.print(f"[green]Success:[/green] {escape(str(output))}")
    else:
        typer.echo(renderer.handler.encode(document))

    if verbose:
        report_summary(path, document)


if __name__ == "__main__":
    app()
