"""
Markdown parsing for study plan files.

Turns a STUDY-PLAN.md style document into a StudyPlan:

    # <Title>
    ## Week <N>: <Week Title>
    - Day <M>: <Topic>
    - [x] Day <M>: <Topic>
    - [ ] Day <M>: <Topic>

Parsing is best-effort: lines that match none of the patterns are skipped.
"""

from typing import List, Optional
import logging
import re

from command_center.study.schemas import (
    DEFAULT_PLAN_TITLE,
    DEFAULT_TARGET_DATE,
    StudyDay,
    StudyPlan,
    StudyStatus,
    StudyWeek,
)

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"^#\s+(.+)")
WEEK_PATTERN = re.compile(r"^##\s+Week\s+(\d+):\s*(.+)", re.IGNORECASE)
DAY_PATTERN = re.compile(
    r"^-\s*\[?\s*([xX ])?\s*\]?\s*Day\s+(\d+):\s*(.+)", re.IGNORECASE
)

DEFAULT_WEEK_TITLE = "System Design Foundations"
DEFAULT_TOPICS = [
    "CAP Theorem & Consistency Models",
    "Scaling Strategies",
    "Load Balancing & Caching",
    "Database Selection & Sharding",
    "Message Queues",
    "Practice: URL Shortener",
    "Review",
]


def parse_day_line(line: str) -> Optional[StudyDay]:
    """
    Parse a single day item.

    Args:
        line: Raw line from the plan file

    Returns:
        StudyDay with COMPLETED or UPCOMING status, or None if the line
        is not a day item
    """
    match = DAY_PATTERN.match(line)
    if not match:
        return None

    topic = match.group(3).strip()
    day_number = int(match.group(2))
    if not topic or day_number < 1:
        return None

    checkbox = (match.group(1) or "").lower()
    status = StudyStatus.COMPLETED if checkbox == "x" else StudyStatus.UPCOMING
    return StudyDay(day=day_number, topic=topic, status=status)


def derive_current_day(plan: StudyPlan) -> StudyPlan:
    """
    Promote the first non-completed day to CURRENT and point the cursor at it.

    Leaves the cursor alone when every day is completed. Mutates and
    returns the given plan.
    """
    for week, day in plan.iter_days():
        if day.status != StudyStatus.COMPLETED:
            day.status = StudyStatus.CURRENT
            plan.current_week = week.week
            plan.current_day = day.day
            break
    return plan


def parse_plan(raw_text: str) -> StudyPlan:
    """
    Parse Markdown content into a StudyPlan.

    Args:
        raw_text: Plan document; may be empty

    Returns:
        Parsed plan with the current day derived
    """
    weeks: List[StudyWeek] = []
    open_week: Optional[StudyWeek] = None
    title = DEFAULT_PLAN_TITLE
    dropped = 0

    for line in (raw_text or "").splitlines():
        title_match = TITLE_PATTERN.match(line)
        if title_match:
            title = title_match.group(1).strip()
            continue

        week_match = WEEK_PATTERN.match(line)
        if week_match:
            if open_week is not None:
                weeks.append(open_week)
            week_number = int(week_match.group(1))
            if week_number < 1:
                open_week = None
                continue
            open_week = StudyWeek(
                week=week_number,
                title=week_match.group(2).strip(),
                days=[],
            )
            continue

        day = parse_day_line(line)
        if day is None:
            continue
        if open_week is None:
            dropped += 1
            continue
        open_week.days.append(day)

    if open_week is not None:
        weeks.append(open_week)

    if dropped:
        logger.debug(f"Dropped {dropped} day line(s) found before any week header")

    plan = StudyPlan(
        title=title,
        target_date=DEFAULT_TARGET_DATE,
        weeks=weeks,
        current_week=1,
        current_day=1,
    )
    return derive_current_day(plan)


def get_default_plan() -> StudyPlan:
    """Built-in one-week plan used when no plan content is available."""
    days = [
        StudyDay(
            day=index,
            topic=topic,
            status=StudyStatus.CURRENT if index == 1 else StudyStatus.UPCOMING,
        )
        for index, topic in enumerate(DEFAULT_TOPICS, start=1)
    ]
    return StudyPlan(
        title=DEFAULT_PLAN_TITLE,
        target_date=DEFAULT_TARGET_DATE,
        weeks=[StudyWeek(week=1, title=DEFAULT_WEEK_TITLE, days=days)],
        current_week=1,
        current_day=1,
    )
