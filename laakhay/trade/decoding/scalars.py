"""Tolerant decoders for scalar fields found in exchange payloads.

Architecture:
    Each decoder works on the raw JSON text of a single value (quotes
    included) and returns an immutable wrapper that either holds a parsed
    value or nothing. Absent and truncated values are not errors; malformed
    text is.

Design Decisions:
    - Raw values shorter than ``MIN_RAW_LENGTH`` bytes decode to an empty
      wrapper without attempting a parse. ``""`` and ``null`` both fall in
      this range.
    - Date-times use the fixed "YYYY-MM-DD HH:MM:SS" layout and are returned
      as UTC-aware datetimes.
"""

from __future__ import annotations

import json
import re
import uuid as _uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from ..config import DATETIME_FORMAT, MIN_RAW_LENGTH
from ..core.exceptions import FormatError

# strptime accepts single-digit components; the wire layout does not
_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")

# Canonical 8-4-4-4-12 or bare 32-hex; urn:uuid: and braced forms wrap canonical
_UUID_CANONICAL = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_UUID_BARE = re.compile(r"[0-9a-fA-F]{32}")


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def parse_datetime(text: str, field: str = "datetime") -> datetime:
    """Parse a "YYYY-MM-DD HH:MM:SS" string into a UTC datetime.

    Args:
        text: Unquoted date-time text
        field: Field name reported on failure

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        FormatError: If the text does not match the layout or is not a valid date
    """
    if not _DATETIME_PATTERN.fullmatch(text):
        raise FormatError(f"{field}: invalid date-time {text!r}", field=field, value=text)
    try:
        parsed = datetime.strptime(text, DATETIME_FORMAT)
    except ValueError as exc:
        raise FormatError(
            f"{field}: invalid date-time {text!r}: {exc}", field=field, value=text
        ) from exc
    return parsed.replace(tzinfo=UTC)


def parse_uuid(text: str, field: str = "uuid") -> _uuid.UUID:
    """Parse UUID text (canonical, bare hex, braced or urn form)."""
    if len(text) == 45 and text[:9].lower() == "urn:uuid:":
        valid = _UUID_CANONICAL.fullmatch(text[9:])
        body = text[9:]
    elif len(text) == 38 and text[0] == "{" and text[-1] == "}":
        valid = _UUID_CANONICAL.fullmatch(text[1:-1])
        body = text[1:-1]
    else:
        valid = _UUID_CANONICAL.fullmatch(text) or _UUID_BARE.fullmatch(text)
        body = text
    if not valid:
        raise FormatError(f"{field}: invalid UUID {text!r}", field=field, value=text)
    return _uuid.UUID(body)


@dataclass(frozen=True)
class DateTime:
    """Decoded exchange date-time; ``value`` is None when absent."""

    value: datetime | None = None

    @property
    def is_set(self) -> bool:
        return self.value is not None

    @classmethod
    def decode(cls, data: bytes | str, field: str = "datetime") -> DateTime:
        """Decode a quoted "YYYY-MM-DD HH:MM:SS" JSON value.

        Args:
            data: Raw JSON text including the surrounding quotes
            field: Field name reported on failure

        Returns:
            DateTime holding the parsed value, or an empty DateTime for short input

        Raises:
            FormatError: If the unquoted text is not a valid date-time
        """
        raw = _as_bytes(data)
        if len(raw) < MIN_RAW_LENGTH:
            return cls()
        inner = raw[1:-1]
        try:
            text = inner.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(
                f"{field}: date-time is not valid UTF-8", field=field, value=inner
            ) from exc
        return cls(parse_datetime(text, field))

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return self.value.strftime(DATETIME_FORMAT)


@dataclass(frozen=True)
class UUID:
    """Decoded exchange UUID; ``value`` is None when absent."""

    value: _uuid.UUID | None = None

    @property
    def is_set(self) -> bool:
        return self.value is not None

    @classmethod
    def decode(cls, data: bytes | str, field: str = "uuid") -> UUID:
        """Decode a quoted JSON UUID string.

        Raises:
            FormatError: If the value is not a JSON string or not a UUID
        """
        raw = _as_bytes(data)
        if len(raw) < MIN_RAW_LENGTH:
            return cls()
        try:
            text = json.loads(raw)
        except ValueError as exc:
            raise FormatError(f"{field}: invalid JSON {raw!r}", field=field, value=raw) from exc
        if not isinstance(text, str):
            raise FormatError(f"{field}: expected a string, got {text!r}", field=field, value=text)
        return cls(parse_uuid(text, field))

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return str(self.value)
