"""
Study plan module for the Command Center dashboard.

This module provides:
- Pydantic models for study days, weeks, plans and notes
- Markdown parser for STUDY-PLAN.md files and the built-in default plan
- Status transitions, progress and calendar scheduling
- File-backed plan source, progress store and notes store
- Study service assembling the dashboard overview
"""

from command_center.study.schemas import (
    StudyStatus,
    StudyResource,
    StudyDayDetails,
    StudyDay,
    StudyWeek,
    StudyPlan,
    StudyNote
)
from command_center.study.parsers import parse_plan, get_default_plan
from command_center.study.engine import (
    get_current_topic,
    mark_day_completed,
    calculate_progress,
    count_days,
    find_day,
    set_day_notes
)
from command_center.study.schedule import apply_calendar_schedule, calendar_position
from command_center.study.plan_source import StudyPlanSource
from command_center.study.progress_store import StudyProgressStore, StudyStoreError
from command_center.study.notes_store import StudyNotesStore
from command_center.study.study_service import get_study_overview, update_study_progress

__all__ = [
    "StudyStatus",
    "StudyResource",
    "StudyDayDetails",
    "StudyDay",
    "StudyWeek",
    "StudyPlan",
    "StudyNote",
    "parse_plan",
    "get_default_plan",
    "get_current_topic",
    "mark_day_completed",
    "calculate_progress",
    "count_days",
    "find_day",
    "set_day_notes",
    "apply_calendar_schedule",
    "calendar_position",
    "StudyPlanSource",
    "StudyProgressStore",
    "StudyStoreError",
    "StudyNotesStore",
    "get_study_overview",
    "update_study_progress",
]
