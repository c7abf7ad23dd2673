"""
Pydantic models for study plan structures.

Provides type-safe models for days, weeks, plans and dated study notes.
Field aliases keep the camelCase names used by the dashboard JSON payloads.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PLAN_TITLE = "Staff Engineer Interview Prep"
DEFAULT_TARGET_DATE = "March 2026"


class StudyStatus(str, Enum):
    """Lifecycle of a single study day."""
    COMPLETED = "completed"
    CURRENT = "current"
    UPCOMING = "upcoming"


class StudyResource(BaseModel):
    """Reading or video attached to a study day."""
    type: str
    title: str
    url: Optional[str] = None
    chapter: Optional[str] = None


class StudyDayDetails(BaseModel):
    """Optional enrichment for a day, stored alongside progress."""
    model_config = ConfigDict(populate_by_name=True)

    key_concepts: List[str] = Field(default_factory=list, alias="keyConcepts")
    resources: List[StudyResource] = Field(default_factory=list)
    practice_problems: List[str] = Field(default_factory=list, alias="practiceProblems")
    time_estimate: str = Field(default="", alias="timeEstimate")
    learning_objectives: List[str] = Field(default_factory=list, alias="learningObjectives")


class StudyDay(BaseModel):
    """One day of the plan."""
    day: int = Field(gt=0)
    topic: str = Field(min_length=1)
    status: StudyStatus = StudyStatus.UPCOMING
    notes: Optional[str] = None
    details: Optional[StudyDayDetails] = None


class StudyWeek(BaseModel):
    """A numbered week holding its days in sequence order."""
    week: int = Field(gt=0)
    title: str
    days: List[StudyDay] = Field(default_factory=list)


class StudyPlan(BaseModel):
    """Complete study plan with the current-day cursor."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = DEFAULT_PLAN_TITLE
    target_date: str = Field(default=DEFAULT_TARGET_DATE, alias="targetDate")
    weeks: List[StudyWeek] = Field(default_factory=list)
    current_week: int = Field(default=1, alias="currentWeek")
    current_day: int = Field(default=1, alias="currentDay")

    def iter_days(self) -> Iterator[Tuple[StudyWeek, StudyDay]]:
        """Yield (week, day) pairs in stored sequence order."""
        for week in self.weeks:
            for day in week.days:
                yield week, day


class StudyNote(BaseModel):
    """Free-form notes written on a given date."""
    date: str
    topic: str
    content: str
