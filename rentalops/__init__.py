"""Turnover scheduling for short-term-rental operations.

The core is :func:`rentalops.scheduler.suggest_schedule`, a pure function
that turns a task's urgency tier and a unit calendar into suggested slots.
"""

from rentalops.errors import InvalidUrgencyError, ParseError
from rentalops.models import UrgencyTier
from rentalops.reservations import ReservationInterval, parse_reservations
from rentalops.scheduler import suggest_schedule

__all__ = [
    "InvalidUrgencyError",
    "ParseError",
    "ReservationInterval",
    "UrgencyTier",
    "parse_reservations",
    "suggest_schedule",
]
