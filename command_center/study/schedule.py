"""
Calendar-driven scheduling: derive the current day from a start date.
"""

from datetime import date
from typing import Optional, Tuple
import math

from command_center.study.schemas import StudyPlan, StudyStatus


def calendar_position(
    today: date,
    start_date: date,
    total_days: int,
    days_per_week: int = 7
) -> Tuple[int, int, int]:
    """
    Map today's date onto the plan.

    Args:
        today: Date to place on the plan
        start_date: Date of week 1, day 1
        total_days: Last absolute day of the plan (clamp upper bound)
        days_per_week: Days in each plan week

    Returns:
        (absolute_day, week, day_in_week), all 1-based
    """
    if days_per_week < 1:
        raise ValueError("days_per_week must be positive")

    days_since_start = (today - start_date).days
    absolute_day = max(1, min(max(total_days, 1), days_since_start + 1))
    week = math.ceil(absolute_day / days_per_week)
    day_in_week = ((absolute_day - 1) % days_per_week) + 1
    return absolute_day, week, day_in_week


def absolute_day_index(week_number: int, day_number: int, days_per_week: int = 7) -> int:
    return (week_number - 1) * days_per_week + day_number


def apply_calendar_schedule(
    plan: StudyPlan,
    today: date,
    start_date: date,
    days_per_week: int = 7
) -> StudyPlan:
    """
    Re-derive statuses from the calendar.

    Days before today become completed, today's day becomes current and
    later days become upcoming. Days already completed stay completed;
    when today's day is one of them, the next upcoming day becomes current.

    Returns:
        Updated copy of the plan
    """
    updated = plan.model_copy(deep=True)

    indexes = [
        absolute_day_index(week.week, day.day, days_per_week)
        for week, day in updated.iter_days()
    ]
    if not indexes:
        return updated

    calendar_day, week_number, day_number = calendar_position(
        today, start_date, max(indexes), days_per_week
    )

    has_current = False
    for week, day in updated.iter_days():
        index = absolute_day_index(week.week, day.day, days_per_week)
        if index < calendar_day:
            day.status = StudyStatus.COMPLETED
        elif day.status == StudyStatus.COMPLETED:
            continue
        elif index == calendar_day:
            day.status = StudyStatus.CURRENT
            has_current = True
        else:
            day.status = StudyStatus.UPCOMING

    updated.current_week = week_number
    updated.current_day = day_number

    # Today's day is already done (or missing): the next upcoming day takes over
    if not has_current:
        for week, day in updated.iter_days():
            if day.status == StudyStatus.UPCOMING:
                day.status = StudyStatus.CURRENT
                updated.current_week = week.week
                updated.current_day = day.day
                break
    return updated


def parse_start_date(value: Optional[str]) -> Optional[date]:
    """Parse an ISO date string; empty values yield None."""
    if not value:
        return None
    return date.fromisoformat(value.strip())
