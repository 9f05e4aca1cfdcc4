"""Unit calendar types and wire-format parsing."""

from .base import ReservationInterval
from .parser import parse_instant, parse_reservations, to_iso_utc

__all__ = ["ReservationInterval", "parse_instant", "parse_reservations", "to_iso_utc"]
