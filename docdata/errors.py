"""Errors raised at the edges of a docdata run.

Write and serialization failures are not wrapped; they propagate as the
underlying ``OSError`` / ``ValueError`` / ``TypeError``.
"""


class DocDataError(Exception):
    """Base class for errors the CLI reports without a traceback."""


class SourceLoadError(DocDataError):
    """The parser output could not be read as a list of records."""


class ConfigError(DocDataError):
    """The configuration file is unreadable or has invalid values."""
