"""Parse wire-format reservations into :class:`ReservationInterval` values.

Bounds arrive as ISO-8601 strings.  An explicit offset (or ``Z``) is kept
as-is; a string with no offset is read as UTC, never as the host's local
time.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from rentalops.errors import ParseError

from .base import ReservationInterval

# A date followed by "T" (or a space) and the hour.
_HAS_TIME = re.compile(r"[Tt ]\d")


def parse_instant(value: str) -> datetime:
    """Parse one ISO-8601 date-time string into an aware datetime."""
    if not isinstance(value, str):
        raise ParseError(f"Expected an ISO-8601 string, got {type(value).__name__}")
    text = value.strip()
    if not _HAS_TIME.search(text):
        raise ParseError(f"ISO-8601 date-time needs a time component: {value!r}")
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise ParseError(f"Invalid ISO-8601 date-time: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso_utc(instant: datetime) -> str:
    """Render an instant as ISO-8601 in UTC with a ``Z`` suffix."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        if name not in row:
            raise ParseError("missing")
        return row[name]
    try:
        return getattr(row, name)
    except AttributeError:
        raise ParseError("missing") from None


def parse_reservations(raw: Iterable[Any]) -> list[ReservationInterval]:
    """Parse ``{"start": ..., "end": ...}`` rows, preserving input order.

    Rows may be mappings or objects with ``start``/``end`` attributes.

    Raises:
        ParseError: on the first row with a missing or malformed bound, or
            whose start falls after its end.
    """
    intervals: list[ReservationInterval] = []
    for index, row in enumerate(raw):
        bounds = {}
        for name in ("start", "end"):
            try:
                bounds[name] = parse_instant(_field(row, name))
            except ParseError as e:
                raise ParseError(f"Reservation {index} {name}: {e}") from e
        try:
            intervals.append(ReservationInterval(**bounds))
        except ParseError as e:
            raise ParseError(f"Reservation {index}: {e}") from e
    return intervals
