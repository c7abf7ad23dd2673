"""
Status transitions and progress for study plans.

All functions are pure with respect to their inputs: transitions work on a
deep copy and return the updated plan.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple
import logging

from command_center.study.schemas import StudyDay, StudyPlan, StudyStatus

logger = logging.getLogger(__name__)


def find_day(plan: StudyPlan, week_number: int, day_number: int) -> Optional[StudyDay]:
    """Locate a day by its week and day numbers (not list positions)."""
    for week, day in plan.iter_days():
        if week.week == week_number and day.day == day_number:
            return day
    return None


def get_current_topic(plan: StudyPlan) -> Optional[StudyDay]:
    """Return the first CURRENT day, or None when no day is current."""
    for _, day in plan.iter_days():
        if day.status == StudyStatus.CURRENT:
            return day
    return None


def count_days(plan: StudyPlan) -> Tuple[int, int]:
    """Return (completed, total) day counts across all weeks."""
    completed = 0
    total = 0
    for _, day in plan.iter_days():
        total += 1
        if day.status == StudyStatus.COMPLETED:
            completed += 1
    return completed, total


def calculate_progress(plan: StudyPlan) -> int:
    """
    Percentage of days completed, rounded half-up.

    Returns:
        Integer in [0, 100]; 0 for a plan without days
    """
    completed, total = count_days(plan)
    if total == 0:
        return 0
    ratio = Decimal(completed * 100) / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def mark_day_completed(plan: StudyPlan, week_number: int, day_number: int) -> StudyPlan:
    """
    Complete a day and move the cursor to the next upcoming day.

    The next current day is the first UPCOMING day across the whole plan,
    not just after the completed one. Existing CURRENT markers are left as
    they are.

    Args:
        plan: Plan to transition (not modified)
        week_number: Week number of the day to complete
        day_number: Day number within that week

    Returns:
        Updated copy of the plan. An unknown week/day yields an unchanged copy.
    """
    updated = plan.model_copy(deep=True)

    target = find_day(updated, week_number, day_number)
    if target is None:
        logger.warning(f"No study day for week {week_number}, day {day_number}; nothing to complete")
        return updated

    target.status = StudyStatus.COMPLETED

    for week, day in updated.iter_days():
        if day.status == StudyStatus.UPCOMING:
            day.status = StudyStatus.CURRENT
            updated.current_week = week.week
            updated.current_day = day.day
            break

    current_count = sum(
        1 for _, day in updated.iter_days() if day.status == StudyStatus.CURRENT
    )
    if current_count > 1:
        logger.warning(f"Plan has {current_count} current days after completing week {week_number}, day {day_number}")

    return updated


def set_day_notes(plan: StudyPlan, week_number: int, day_number: int, notes: Optional[str]) -> StudyPlan:
    """Return a copy of the plan with the notes of one day replaced."""
    updated = plan.model_copy(deep=True)

    target = find_day(updated, week_number, day_number)
    if target is None:
        logger.warning(f"No study day for week {week_number}, day {day_number}; notes not saved")
        return updated

    target.notes = notes
    return updated
