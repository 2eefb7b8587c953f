"""Exception hierarchy for anchor classification runs."""

from __future__ import annotations


class AnchorLensError(Exception):
    """Base class for all errors raised by the classifier."""


class MissingInputError(AnchorLensError):
    """A required input field is absent, empty or of the wrong type."""


class InvalidCsvError(AnchorLensError):
    """The export cannot be classified at all (no rows or no Anchor column)."""


class RowParseError(AnchorLensError):
    """A single data row is malformed; the run skips it and continues."""


class ExecutionUnavailableError(AnchorLensError):
    """The worker that runs classifications could not be started or broke."""


__all__ = [
    "AnchorLensError",
    "ExecutionUnavailableError",
    "InvalidCsvError",
    "MissingInputError",
    "RowParseError",
]
