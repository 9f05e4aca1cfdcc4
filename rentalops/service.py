"""Caller-side glue between HTTP payloads and the scheduling core.

The core never defaults anything. This layer fills in what callers leave
out (an unclassified urgency, the current time, the property timezone),
parses the unit calendar and serializes the result back to ISO-8601 UTC.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rentalops.config import settings
from rentalops.errors import ConfigurationError, ParseError
from rentalops.models.task import Task, UrgencyTier
from rentalops.reservations.parser import parse_instant, parse_reservations, to_iso_utc
from rentalops.scheduler.base import SuggestionStrategy
from rentalops.scheduler.rules import RuleBasedStrategy

log = logging.getLogger("rentalops.service")


def resolve_timezone(name: Optional[str] = None) -> ZoneInfo:
    """Look up an IANA timezone, falling back to the configured one."""
    tz_name = name or settings.calendar_timezone
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown timezone: {tz_name!r}") from e


def resolve_urgency(task_or_urgency: Task | UrgencyTier | str | None) -> UrgencyTier:
    """Return the task's tier, or the configured default when unset."""
    urgency = task_or_urgency.urgency if isinstance(task_or_urgency, Task) else task_or_urgency
    if urgency is None or urgency == "":
        urgency = settings.default_urgency
    return UrgencyTier.parse(urgency)


def suggest_for_task(
    task_or_urgency: Task | UrgencyTier | str | None,
    raw_reservations: Iterable[Any] = (),
    now: datetime | str | None = None,
    *,
    tz: Optional[str] = None,
    strategy: Optional[SuggestionStrategy] = None,
) -> list[str]:
    """Suggest slots for a task and return them as ISO-8601 UTC strings.

    Args:
        task_or_urgency: A :class:`Task`, a tier, a tier string, or ``None``.
        raw_reservations: ``{"start": str, "end": str}`` rows for the unit.
        now: Reference instant (datetime or ISO string). Wall clock when omitted.
        tz: IANA timezone of the property. Defaults to ``settings.calendar_timezone``.
        strategy: Suggestion backend. Defaults to the rule-based engine.

    Raises:
        InvalidUrgencyError, ParseError, ConfigurationError
    """
    urgency = resolve_urgency(task_or_urgency)
    zone = resolve_timezone(tz)

    if now is None:
        reference = datetime.now(tz=zone)
    else:
        reference = parse_instant(now) if isinstance(now, str) else now
        if reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)
        reference = reference.astimezone(zone)

    try:
        reservations = parse_reservations(raw_reservations)
    except ParseError as e:
        log.warning("Rejected unit calendar: %s", e)
        raise

    backend = strategy or RuleBasedStrategy()
    suggestions = backend.suggest(urgency, reservations, reference)

    log.debug(
        "Suggested %d slot(s) for %s task (%d reservations, now=%s)",
        len(suggestions), urgency.value, len(reservations), reference.isoformat(),
    )
    return [to_iso_utc(s) for s in suggestions]
