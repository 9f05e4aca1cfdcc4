"""Task model and the urgency enumeration shared by every consumer."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from rentalops.errors import InvalidUrgencyError


class UrgencyTier(str, Enum):
    """How soon a task must be handled. Declaration order is priority order."""

    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, value: object) -> UrgencyTier:
        """Coerce a tier or its exact (case-sensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        allowed = ", ".join(tier.value for tier in cls)
        raise InvalidUrgencyError(
            f"Unknown urgency {value!r}; expected one of: {allowed}"
        )


class TeamTarget(str, Enum):
    INTERNAL = "internal"
    CLEANING = "cleaning"
    MAINTENANCE = "maintenance"
    LANDLORD = "landlord"


class TaskStatus(str, Enum):
    NEW = "new"
    SCHEDULED = "scheduled"
    WATCH = "watch"
    CLOSED = "closed"


class Task(BaseModel):
    """An inbox task for one listing.

    ``urgency`` is ``None`` when the source never classified the task;
    callers pick a default before asking the scheduler for slots.
    """

    id: Optional[int] = None
    external_id: str = ""
    listing_id: str = ""
    listing_name: str = ""
    action: str = ""
    description: str = ""
    team_target: TeamTarget = TeamTarget.INTERNAL
    urgency: Optional[UrgencyTier] = None
    status: TaskStatus = TaskStatus.NEW
    scheduled_for: Optional[datetime] = None
