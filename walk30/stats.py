from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

from .models.activity import Activity


@dataclass
class UserStats:
    total_minutes: int = 0
    current_streak: int = 0
    days_active: int = 0
    daily_average: int = 0


def activity_day(moment: datetime) -> date:
    """Truncate a timestamp to its UTC calendar day. Naive values are UTC."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def round_half_up(numerator: int, denominator: int) -> int:
    if denominator == 0:
        return 0
    ratio = Decimal(numerator) / Decimal(denominator)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def current_streak(days: Iterable[date], today: date) -> int:
    """
    Length of the unbroken run of active days ending today or yesterday.

    The streak is broken (0) unless the most recent day is today or
    yesterday, so a walk dated after `today` also yields 0.
    """
    ordered: List[date] = sorted(set(days), reverse=True)
    if not ordered or ordered[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    previous = ordered[0]
    for day in ordered[1:]:
        if previous - day != timedelta(days=1):
            break
        streak += 1
        previous = day

    return streak


def compute_stats(activities: Iterable[Activity], today: date) -> UserStats:
    """Derive the dashboard numbers from a user's full activity history."""
    total_minutes = 0
    days = set()
    for activity in activities:
        total_minutes += activity.minutes
        days.add(activity_day(activity.date))

    return UserStats(
        total_minutes=total_minutes,
        current_streak=current_streak(days, today),
        days_active=len(days),
        daily_average=round_half_up(total_minutes, len(days)),
    )
