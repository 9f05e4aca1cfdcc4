"""Data models for the scheduling layer."""

from .schedule import ScheduleRequest, ScheduleResponse, WireReservation
from .task import Task, TaskStatus, TeamTarget, UrgencyTier

__all__ = [
    "ScheduleRequest",
    "ScheduleResponse",
    "Task",
    "TaskStatus",
    "TeamTarget",
    "UrgencyTier",
    "WireReservation",
]
