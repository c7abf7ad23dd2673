"""
Study service for the dashboard.

Connects the plan source, the progress store and the engine. This is the
only place where plan loading falls back between sources, and every
failure is turned into a result dict instead of an exception.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple
import logging

from command_center.study.engine import (
    calculate_progress,
    count_days,
    find_day,
    get_current_topic,
    mark_day_completed,
    set_day_notes,
)
from command_center.study.parsers import get_default_plan
from command_center.study.plan_source import StudyPlanSource
from command_center.study.progress_store import StudyProgressStore, StudyStoreError
from command_center.study.schedule import apply_calendar_schedule
from command_center.study.schemas import StudyPlan

logger = logging.getLogger(__name__)

SOURCE_PROGRESS_STORE = "progress_store"
SOURCE_FILE = "file"
SOURCE_FALLBACK = "fallback"

ACTION_COMPLETE = "complete"
ACTION_SAVE_NOTES = "save_notes"


def load_study_plan(
    progress_store: StudyProgressStore,
    plan_source: StudyPlanSource
) -> Tuple[StudyPlan, str]:
    """
    Load the plan from the first source that has one.

    Order: progress snapshot, plan Markdown file, built-in default.

    Returns:
        (plan, source label)
    """
    try:
        plan = progress_store.load()
        if plan is not None:
            return plan, SOURCE_PROGRESS_STORE
    except StudyStoreError as e:
        logger.error(f"Ignoring study progress snapshot: {e}")

    try:
        if plan_source.exists():
            return plan_source.load_plan(), SOURCE_FILE
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read study plan file {plan_source.plan_path}: {e}")

    return get_default_plan(), SOURCE_FALLBACK


def build_overview(plan: StudyPlan, source: str) -> Dict[str, Any]:
    """Serialize a plan into the dashboard payload."""
    completed, total = count_days(plan)
    current = get_current_topic(plan)
    payload = plan.model_dump(by_alias=True, mode="json")
    return {
        "title": payload["title"],
        "targetDate": payload["targetDate"],
        "currentWeek": payload["currentWeek"],
        "currentDay": payload["currentDay"],
        "currentTopic": current.topic if current else "No topic set",
        "progress": calculate_progress(plan),
        "completed": completed,
        "total": total,
        "weeks": payload["weeks"],
        "lastUpdated": datetime.now().isoformat(),
        "source": source,
    }


def get_study_overview(
    progress_store: StudyProgressStore,
    plan_source: StudyPlanSource,
    today: Optional[date] = None,
    start_date: Optional[date] = None,
    days_per_week: int = 7
) -> Dict[str, Any]:
    """
    Build the study overview shown on the dashboard.

    Args:
        progress_store: Snapshot store checked first
        plan_source: Markdown plan file used when there is no snapshot
        today: Date used by the calendar schedule (defaults to today)
        start_date: Week 1, day 1 of the calendar schedule; None disables it
        days_per_week: Days in each plan week for the calendar schedule

    Returns:
        JSON-ready dict with plan, cursor, progress and source
    """
    plan, source = load_study_plan(progress_store, plan_source)

    if start_date is not None:
        plan = apply_calendar_schedule(plan, today or date.today(), start_date, days_per_week)

    return build_overview(plan, source)


def update_study_progress(
    progress_store: StudyProgressStore,
    plan_source: StudyPlanSource,
    week: int,
    day: int,
    action: str,
    notes: Optional[str] = None
) -> Dict[str, Any]:
    """
    Apply a dashboard action to the plan and persist the result.

    Args:
        week: Week number of the targeted day
        day: Day number of the targeted day
        action: "complete" or "save_notes"
        notes: Notes text for "save_notes"

    Returns:
        {"success": True, "currentWeek", "currentDay", "progress"} or
        {"success": False, "error": ...}
    """
    if action not in (ACTION_COMPLETE, ACTION_SAVE_NOTES):
        return {"success": False, "error": f"Unknown action: {action}"}

    plan, source = load_study_plan(progress_store, plan_source)

    if find_day(plan, week, day) is None:
        return {"success": False, "error": f"Week {week}, day {day} not found in study plan"}

    if action == ACTION_COMPLETE:
        updated = mark_day_completed(plan, week, day)
        logger.info(f"Completed week {week}, day {day} (loaded from {source})")
    else:
        updated = set_day_notes(plan, week, day, notes)
        logger.info(f"Saved notes for week {week}, day {day}")

    try:
        progress_store.save(updated)
    except OSError as e:
        logger.error(f"Error updating study progress: {e}")
        return {"success": False, "error": "Failed to update"}

    return {
        "success": True,
        "currentWeek": updated.current_week,
        "currentDay": updated.current_day,
        "progress": calculate_progress(updated),
    }
