"""Exception hierarchy for hugo-literate.

Kept dependency-free: every other module imports from here.
"""


class LiterateError(Exception):
    """Base exception for all hugo-literate errors."""


class ConfigurationError(LiterateError):
    """Raised when a required option is missing from both CLI and settings."""
