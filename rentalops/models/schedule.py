"""Pydantic models for the schedule suggestion HTTP endpoint."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class WireReservation(BaseModel):
    """One booked span as sent by clients: ISO-8601 strings, unparsed."""

    start: str
    end: str


class ScheduleRequest(BaseModel):
    """Body of ``POST /api/schedule/suggest``.

    ``urgency`` stays a plain string here so an unknown tier reaches the
    scheduler and fails with a 400 rather than a generic 422.
    """

    urgency: Optional[str] = None
    reservations: list[WireReservation] = []
    now: Optional[str] = None        # ISO-8601; wall clock when omitted
    timezone: Optional[str] = None   # IANA name; settings default when omitted


class ScheduleResponse(BaseModel):
    urgency: str
    suggestions: list[str]  # ISO-8601 UTC, preferred first
