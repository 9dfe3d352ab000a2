"""hugo-literate - render annotated source files as Hugo literate documents."""

__version__ = "0.1.0"

__all__ = ["__version__"]
