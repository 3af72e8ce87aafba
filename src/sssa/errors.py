"""Exceptions raised by the secret sharing routines."""
from __future__ import annotations


class SSSAError(Exception):
    """Base class for every error raised by :mod:`sssa`."""


class ArgumentError(SSSAError, ValueError):
    """Raised when split/combine are called with unusable arguments."""


class DecodingError(SSSAError, ValueError):
    """Raised when a textual share cannot be turned back into bytes."""


class InvalidShareError(SSSAError, ValueError):
    """Raised when a share buffer fails structural or range checks."""


class InconsistentShareSetError(InvalidShareError):
    """Raised when shares disagree on the number of secret chunks."""


__all__ = [
    "SSSAError",
    "ArgumentError",
    "DecodingError",
    "InvalidShareError",
    "InconsistentShareSetError",
]
