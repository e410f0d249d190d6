"""
Savings KPIs derived from a user's full entry list.

Everything here is a pure function of the entries and a reference day, so
callers (and tests) decide what "today" is.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Protocol, Sequence

ZERO = Decimal("0.00")


class EntryLike(Protocol):
    amount: Decimal
    date: datetime


class GoalsLike(Protocol):
    monthly_goal: Decimal
    yearly_goal: Decimal


@dataclass
class DashboardSummary:
    total_saved: Decimal
    saved_this_month: Decimal
    saved_this_year: Decimal
    streak: int
    monthly_goal: Decimal
    yearly_goal: Decimal
    monthly_progress: float  # percent, clamped to 100
    yearly_progress: float
    entry_count: int
    series: list[Decimal] = field(default_factory=list)  # oldest day first


def _day(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def _sum(entries: Iterable[EntryLike]) -> Decimal:
    return sum((Decimal(e.amount) for e in entries), ZERO)


def total_saved(entries: Sequence[EntryLike]) -> Decimal:
    return _sum(entries)


def saved_in_month(entries: Sequence[EntryLike], today: date) -> Decimal:
    return _sum(e for e in entries if e.date.year == today.year and e.date.month == today.month)


def saved_in_year(entries: Sequence[EntryLike], today: date) -> Decimal:
    return _sum(e for e in entries if e.date.year == today.year)


def streak(entries: Sequence[EntryLike], today: date) -> int:
    """Consecutive days with at least one entry, counting back from today.

    No entry today means no streak; the first missing day ends the count.
    """
    days = {_day(e.date) for e in entries}
    count = 0
    current = today
    while current in days:
        count += 1
        current -= timedelta(days=1)
    return count


def daily_series(entries: Sequence[EntryLike], today: date, days: int = 30) -> list[Decimal]:
    start = today - timedelta(days=days - 1)
    totals = {start + timedelta(days=offset): ZERO for offset in range(days)}
    for entry in entries:
        day = _day(entry.date)
        if day in totals:
            totals[day] += Decimal(entry.amount)
    return [totals[day] for day in sorted(totals)]


def goal_progress(saved: Decimal, goal: Decimal, clamp: bool = True) -> float:
    if goal <= 0:
        return 0.0
    percent = float(saved / goal * 100)
    return min(percent, 100.0) if clamp else percent


def build_dashboard(
    entries: Sequence[EntryLike], goals: Optional[GoalsLike], today: date, days: int = 30
) -> DashboardSummary:
    monthly_goal = Decimal(goals.monthly_goal) if goals else ZERO
    yearly_goal = Decimal(goals.yearly_goal) if goals else ZERO
    this_month = saved_in_month(entries, today)
    this_year = saved_in_year(entries, today)

    return DashboardSummary(
        total_saved=total_saved(entries),
        saved_this_month=this_month,
        saved_this_year=this_year,
        streak=streak(entries, today),
        monthly_goal=monthly_goal,
        yearly_goal=yearly_goal,
        monthly_progress=round(goal_progress(this_month, monthly_goal), 1),
        yearly_progress=round(goal_progress(this_year, yearly_goal), 1),
        entry_count=len(entries),
        series=daily_series(entries, today, days),
    )
