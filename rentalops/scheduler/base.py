"""Abstract base class for schedule suggestion strategies.

The rule-based engine is the built-in strategy. Other backends (an
LLM-assisted planner, for instance) implement the same ABC and can be
swapped in by the service layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime

from rentalops.models.task import UrgencyTier
from rentalops.reservations.base import ReservationInterval


class SuggestionStrategy(ABC):
    """Produces candidate instants for a task on one unit's calendar."""

    @abstractmethod
    def suggest(
        self,
        urgency: UrgencyTier,
        reservations: Sequence[ReservationInterval],
        now: datetime,
    ) -> list[datetime]:
        """Return suggested instants, most preferred first.

        Args:
            urgency: Tier of the task being scheduled.
            reservations: Booked spans for the unit, in any order.
            now: Reference instant; implementations must not read a clock.

        Returns:
            A non-empty list of timezone-aware datetimes.
        """
