"""Exceptions raised outside the validation core.

The domain layer never raises for bad values; these cover markup that
cannot be turned into a record tree at all.
"""

from __future__ import annotations


class IsovalError(Exception):
    """Base class for isoval infrastructure errors."""


class DecodeError(IsovalError):
    """Markup could not be decoded into the requested record type."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class UnknownMessageError(IsovalError):
    """No catalogued message definition matches the request or document."""
