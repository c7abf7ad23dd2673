"""
Pytest configuration and fixtures
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from command_center.study.schemas import StudyDay, StudyPlan, StudyStatus, StudyWeek


def make_plan(*weeks, current_week=1, current_day=1):
    """
    Build a plan from (week_number, [(day, status), ...]) tuples.

    Topics are generated as "Topic <week>.<day>".
    """
    return StudyPlan(
        title="Test",
        target_date="March 2026",
        current_week=current_week,
        current_day=current_day,
        weeks=[
            StudyWeek(
                week=week_number,
                title=f"Week {week_number}",
                days=[
                    StudyDay(day=day, topic=f"Topic {week_number}.{day}", status=StudyStatus(status))
                    for day, status in days
                ],
            )
            for week_number, days in weeks
        ],
    )


@pytest.fixture
def plan_factory():
    """Expose make_plan to tests"""
    return make_plan


@pytest.fixture
def single_week_plan():
    """Week 1 with day 1 current and two upcoming days"""
    return make_plan((1, [(1, "current"), (2, "upcoming"), (3, "upcoming")]))


@pytest.fixture
def plan_markdown():
    """Two-week plan document with one completed day"""
    return """# Staff Interview Prep

## Week 1: System Design

- [x] Day 1: CAP Theorem
- [ ] Day 2: Scaling Strategies
- Day 3: Load Balancing

## Week 2: Distributed Systems

- Day 1: Consensus
- Day 2: Replication
"""
