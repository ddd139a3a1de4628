"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class TradeError(Exception):
    """Base exception for all library errors."""

    pass


class FormatError(TradeError, ValueError):
    """Raw text does not match the expected lexical form.

    Raised by the tolerant decoders for bad date strings, bad UUID strings and
    non-numeric strings where an integer was expected. Carries the name of the
    offending field and the raw value that failed.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ReferenceDataLoadError(TradeError):
    """Reference data table could not be loaded."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
