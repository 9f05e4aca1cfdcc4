"""Rule-based schedule suggestions keyed on urgency tier.

Given a task's urgency, the unit calendar and a reference instant, each tier
has one fixed rule:

  urgent   now, if before 22:00; otherwise tomorrow 08:00
  high     now if before 17:00, always followed by tomorrow 10:00
  medium   the earliest upcoming checkout day at 14:00; else tomorrow 12:00
  low      first vacant day in the next 30 days at 10:00; else now + 7 days

"Today", "tomorrow" and every calendar date are read in ``now``'s timezone.
Reservation bounds are converted into that timezone before their dates are
compared.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime, timedelta, timezone, tzinfo

from rentalops.models.task import UrgencyTier
from rentalops.reservations.base import ReservationInterval

from .base import SuggestionStrategy

URGENT_CUTOFF_HOUR = 22
URGENT_NEXT_DAY_HOUR = 8
HIGH_SAME_DAY_BEFORE_HOUR = 17
HIGH_NEXT_DAY_HOUR = 10
CHECKOUT_HOUR = 14
MEDIUM_FALLBACK_HOUR = 12
LOW_HOUR = 10
LOW_LOOKAHEAD_DAYS = 30
LOW_FALLBACK_DAYS = 7

_Rule = Callable[[list[ReservationInterval], datetime], list[datetime]]


def _at(dt: datetime, hour: int) -> datetime:
    """Pin a datetime to ``hour``:00 sharp on the same calendar day."""
    return dt.replace(hour=hour, minute=0, second=0, microsecond=0)


def _local_date(instant: datetime, tz: tzinfo) -> date:
    return instant.astimezone(tz).date()


def _next_day(now: datetime, hour: int) -> datetime:
    return _at(now + timedelta(days=1), hour)


# ── Tier rules ────────────────────────────────────────────────────


def _suggest_urgent(reservations: list[ReservationInterval], now: datetime) -> list[datetime]:
    if now < _at(now, URGENT_CUTOFF_HOUR):
        return [now]
    return [_next_day(now, URGENT_NEXT_DAY_HOUR)]


def _suggest_high(reservations: list[ReservationInterval], now: datetime) -> list[datetime]:
    suggestions = []
    if now.hour < HIGH_SAME_DAY_BEFORE_HOUR:
        suggestions.append(now)
    # Next-morning slot is always offered as a fallback.
    suggestions.append(_next_day(now, HIGH_NEXT_DAY_HOUR))
    return suggestions


def _suggest_medium(reservations: list[ReservationInterval], now: datetime) -> list[datetime]:
    upcoming = [r for r in reservations if r.end > now]
    if not upcoming:
        return [_next_day(now, MEDIUM_FALLBACK_HOUR)]
    # min() keeps the first of equal ends, so ties follow start order.
    checkout = min(upcoming, key=lambda r: r.end).end.astimezone(now.tzinfo)
    return [_at(checkout, CHECKOUT_HOUR)]


def _is_vacant(day: date, reservations: list[ReservationInterval], tz: tzinfo) -> bool:
    # Both bounds inclusive: check-in and checkout days count as occupied.
    for r in reservations:
        if _local_date(r.start, tz) <= day <= _local_date(r.end, tz):
            return False
    return True


def _suggest_low(reservations: list[ReservationInterval], now: datetime) -> list[datetime]:
    for offset in range(1, LOW_LOOKAHEAD_DAYS + 1):
        candidate = now + timedelta(days=offset)
        if _is_vacant(candidate.date(), reservations, now.tzinfo):
            return [_at(candidate, LOW_HOUR)]
    return [_at(now + timedelta(days=LOW_FALLBACK_DAYS), LOW_HOUR)]


_RULES: dict[UrgencyTier, _Rule] = {
    UrgencyTier.URGENT: _suggest_urgent,
    UrgencyTier.HIGH: _suggest_high,
    UrgencyTier.MEDIUM: _suggest_medium,
    UrgencyTier.LOW: _suggest_low,
}


# ── Public API ────────────────────────────────────────────────────


def suggest_schedule(
    urgency: UrgencyTier | str,
    reservations: Sequence[ReservationInterval],
    now: datetime,
) -> list[datetime]:
    """Suggest when to do a task, most preferred slot first.

    Args:
        urgency: A :class:`UrgencyTier` or its exact string value. No default
            is applied here; callers decide what an unset urgency means.
        reservations: The unit calendar. May be empty, unsorted or
            overlapping; it is sorted by start and never merged.
        now: Reference instant. A naive value is taken as UTC.

    Returns:
        One suggestion for urgent, medium and low; one or two for high.
        Datetimes are in ``now``'s timezone.

    Raises:
        InvalidUrgencyError: if ``urgency`` is not one of the four tiers.
    """
    tier = UrgencyTier.parse(urgency)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    ordered = sorted(reservations, key=lambda r: r.start)
    return _RULES[tier](ordered, now)


class RuleBasedStrategy(SuggestionStrategy):
    """The fixed business rules above, as a pluggable strategy."""

    def suggest(
        self,
        urgency: UrgencyTier,
        reservations: Sequence[ReservationInterval],
        now: datetime,
    ) -> list[datetime]:
        return suggest_schedule(urgency, reservations, now)
