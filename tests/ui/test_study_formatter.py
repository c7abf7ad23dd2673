"""
Tests for ui/study_formatter.py - Markdown rendering of the study overview
"""
from command_center.ui.study_formatter import (
    find_week,
    format_day_line,
    format_focus_markdown,
    format_overview_header,
    format_progress_bar,
    format_week_markdown,
)


OVERVIEW = {
    "title": "Staff Interview Prep",
    "targetDate": "March 2026",
    "currentWeek": 1,
    "currentDay": 2,
    "currentTopic": "Scaling Strategies",
    "progress": 50,
    "completed": 1,
    "total": 2,
    "weeks": [
        {
            "week": 1,
            "title": "System Design",
            "days": [
                {"day": 1, "topic": "CAP Theorem", "status": "completed", "notes": "PACELC too"},
                {"day": 2, "topic": "Scaling Strategies", "status": "current", "notes": None},
            ],
        }
    ],
}


class TestProgressBar:
    """Test format_progress_bar function"""

    def test_half(self):
        assert format_progress_bar(50, width=10) == "█████░░░░░ 50%"

    def test_bounds(self):
        """Test out of range values are clamped"""
        assert format_progress_bar(-5, width=4) == "░░░░ 0%"
        assert format_progress_bar(150, width=4) == "████ 100%"


class TestWeekFormatting:
    """Test day and week markdown"""

    def test_completed_day_with_notes(self):
        line = format_day_line(OVERVIEW["weeks"][0]["days"][0])

        assert line.startswith("- ✅ Day 1: CAP Theorem")
        assert "📝 PACELC too" in line

    def test_current_day_is_bold(self):
        line = format_day_line(OVERVIEW["weeks"][0]["days"][1])

        assert line == "- 👉 **Day 2: Scaling Strategies**"

    def test_week_header_counts(self):
        markdown = format_week_markdown(OVERVIEW["weeks"][0])

        assert markdown.startswith("### Week 1: System Design (1/2)")

    def test_empty_week(self):
        markdown = format_week_markdown({"week": 3, "title": "Empty", "days": []})

        assert "*No days planned.*" in markdown

    def test_find_week(self):
        assert find_week(OVERVIEW["weeks"], 1)["title"] == "System Design"
        assert find_week(OVERVIEW["weeks"], 2) == {}


class TestOverviewFormatting:
    """Test header and focus card"""

    def test_focus_card(self):
        markdown = format_focus_markdown(OVERVIEW)

        assert "## Scaling Strategies" in markdown
        assert "Week 1, Day 2 · System Design" in markdown

    def test_focus_without_week(self):
        """Test the focus card when the cursor week is missing"""
        markdown = format_focus_markdown({**OVERVIEW, "currentWeek": 9})

        assert markdown.endswith("Week 9, Day 2")

    def test_header(self):
        markdown = format_overview_header(OVERVIEW)

        assert "# 📚 Staff Interview Prep" in markdown
        assert "Target: March 2026" in markdown
        assert "(1/2 days)" in markdown
