"""
Utility functions for formatting the study overview for display in Gradio UI.
"""
from typing import List, Dict, Any

STATUS_ICONS = {
    "completed": "✅",
    "current": "👉",
    "upcoming": "⬜",
}

PROGRESS_BAR_WIDTH = 20


def format_progress_bar(progress: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    """
    Render a text progress bar.

    Args:
        progress: Percentage in [0, 100]
        width: Number of cells in the bar

    Returns:
        Bar such as "█████░░░░░ 50%"
    """
    progress = max(0, min(100, int(progress)))
    filled = round(width * progress / 100)
    return f"{'█' * filled}{'░' * (width - filled)} {progress}%"


def format_day_line(day: Dict[str, Any]) -> str:
    """Format a single day entry as a markdown list item."""
    icon = STATUS_ICONS.get(day.get("status", "upcoming"), "⬜")
    topic = day.get("topic", "Untitled")
    line = f"- {icon} Day {day.get('day')}: {topic}"
    if day.get("status") == "current":
        line = f"- {icon} **Day {day.get('day')}: {topic}**"
    notes = day.get("notes")
    if notes:
        line += f"\n  - 📝 {notes}"
    return line


def format_week_markdown(week: Dict[str, Any]) -> str:
    """Format a week with its days."""
    days = week.get("days", [])
    done = sum(1 for d in days if d.get("status") == "completed")
    parts = [f"### Week {week.get('week')}: {week.get('title', '')} ({done}/{len(days)})", ""]
    if not days:
        parts.append("*No days planned.*")
    for day in days:
        parts.append(format_day_line(day))
    return "\n".join(parts)


def find_week(weeks: List[Dict[str, Any]], week_number: int) -> Dict[str, Any]:
    """Look a week up by number; empty dict when absent."""
    for week in weeks:
        if week.get("week") == week_number:
            return week
    return {}


def format_focus_markdown(overview: Dict[str, Any]) -> str:
    """Format the "today's focus" card."""
    week = find_week(overview.get("weeks", []), overview.get("currentWeek"))
    lines = [
        "#### TODAY'S FOCUS",
        f"## {overview.get('currentTopic', 'No topic set')}",
        f"Week {overview.get('currentWeek')}, Day {overview.get('currentDay')}",
    ]
    if week.get("title"):
        lines[-1] += f" · {week['title']}"
    return "\n\n".join(lines)


def format_overview_header(overview: Dict[str, Any]) -> str:
    """Format the page header with title, target date and progress."""
    return (
        f"# 📚 {overview.get('title', '')}\n\n"
        f"Target: {overview.get('targetDate', '')}\n\n"
        f"**Overall Progress** `{format_progress_bar(overview.get('progress', 0))}` "
        f"({overview.get('completed', 0)}/{overview.get('total', 0)} days)"
    )
