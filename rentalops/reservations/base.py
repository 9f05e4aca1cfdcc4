"""Reservation intervals that make up a unit calendar."""

from dataclasses import dataclass
from datetime import datetime, timezone

from rentalops.errors import ParseError


@dataclass(frozen=True)
class ReservationInterval:
    """A booked, unavailable span for one rental unit.

    Bounds are inclusive and may be equal. Naive bounds are taken as UTC.
    Overlapping intervals within a calendar are allowed; nothing here merges
    or orders them.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            bound = getattr(self, name)
            if bound.tzinfo is None:
                object.__setattr__(self, name, bound.replace(tzinfo=timezone.utc))
        if self.start > self.end:
            raise ParseError(
                f"Reservation ends before it starts: {self.start.isoformat()} > "
                f"{self.end.isoformat()}"
            )
