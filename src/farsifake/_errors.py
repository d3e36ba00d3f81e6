r"""
\file _errors.py
\brief Exception types raised by the generator and dictionary sources.
"""


class FarsiFakeError(Exception):
    """Base class for every farsifake failure."""


class SourceUnavailable(FarsiFakeError):
    """The dictionary source could not be opened."""


class CloseFailed(FarsiFakeError):
    """Releasing the dictionary stream failed (or it was already closed)."""


class GenerationFailed(FarsiFakeError):
    """A read error occurred while scanning for the target line."""


class InvalidCount(FarsiFakeError, ValueError):
    """A requested count, min or max is less than 1."""


class InvalidRange(FarsiFakeError, ValueError):
    """The requested max is lower than min."""
