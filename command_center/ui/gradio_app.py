import gradio as gr
from datetime import date
from command_center.config import settings as config
from command_center.study.notes_store import StudyNotesStore
from command_center.study.plan_source import StudyPlanSource
from command_center.study.progress_store import StudyProgressStore
from command_center.study.schedule import parse_start_date
from command_center.study.schemas import StudyNote
from command_center.study.study_service import get_study_overview, update_study_progress
from command_center.ui.css import custom_css
from command_center.ui.study_formatter import (
    find_week,
    format_focus_markdown,
    format_overview_header,
    format_week_markdown,
)
import logging

logger = logging.getLogger(__name__)


def configured_start_date():
    """Calendar schedule start from settings, or None when unset or invalid."""
    try:
        return parse_start_date(config.STUDY_START_DATE)
    except ValueError:
        logger.error(f"Invalid STUDY_START_DATE {config.STUDY_START_DATE!r}, calendar schedule disabled")
        return None


def week_choices(overview):
    return [f"Week {w['week']}: {w['title']}" for w in overview.get("weeks", [])]


def week_number_from_choice(choice):
    """Extract the week number from a "Week N: Title" dropdown label."""
    if not choice:
        return None
    try:
        return int(choice.split(":", 1)[0].replace("Week", "").strip())
    except ValueError:
        return None


def create_gradio_ui(progress_store=None, plan_source=None, notes_store=None):
    progress_store = progress_store or StudyProgressStore()
    plan_source = plan_source or StudyPlanSource()
    notes_store = notes_store or StudyNotesStore()
    start_date = configured_start_date()

    def load_overview():
        return get_study_overview(
            progress_store,
            plan_source,
            today=date.today(),
            start_date=start_date,
            days_per_week=config.STUDY_DAYS_PER_WEEK
        )

    def render(overview):
        choices = week_choices(overview)
        week = find_week(overview.get("weeks", []), overview.get("currentWeek"))
        selected = f"Week {week['week']}: {week['title']}" if week else None
        week_markdown = format_week_markdown(week) if week else "*No weeks in the study plan.*"
        return (
            format_overview_header(overview),
            format_focus_markdown(overview),
            gr.update(choices=choices, value=selected),
            week_markdown,
        )

    def refresh_handler():
        overview = load_overview()
        today_note = notes_store.load_note(date.today().isoformat())
        return (*render(overview), today_note.content if today_note else "")

    def week_select_handler(choice):
        overview = load_overview()
        week = find_week(overview.get("weeks", []), week_number_from_choice(choice))
        if not week:
            return "*No weeks in the study plan.*"
        return format_week_markdown(week)

    def complete_handler():
        overview = load_overview()
        if overview.get("currentTopic") == "No topic set":
            gr.Info("🎉 Every day in the plan is already completed")
            return render(overview)

        result = update_study_progress(
            progress_store,
            plan_source,
            overview["currentWeek"],
            overview["currentDay"],
            "complete"
        )
        if result.get("success"):
            gr.Info(f"✅ Completed: {overview['currentTopic']}")
        else:
            gr.Warning(f"❌ {result.get('error', 'Failed to update')}")
        return render(load_overview())

    def save_notes_handler(notes):
        overview = load_overview()
        if not notes or not notes.strip():
            gr.Warning("Nothing to save")
            return

        result = update_study_progress(
            progress_store,
            plan_source,
            overview["currentWeek"],
            overview["currentDay"],
            "save_notes",
            notes=notes.strip()
        )
        notes_store.save_note(StudyNote(
            date=date.today().isoformat(),
            topic=overview.get("currentTopic", "Unknown"),
            content=notes.strip()
        ))
        if result.get("success"):
            gr.Info("📝 Notes saved")
        else:
            gr.Warning(f"Notes saved to journal only: {result.get('error')}")

    theme = gr.themes.Base(
        primary_hue="blue",
        secondary_hue="gray",
        neutral_hue="gray",
        font=("SF Pro Display", "system-ui", "sans-serif"),
    ).set(
        body_background_fill="#0a0a0a",
        body_background_fill_dark="#0a0a0a",
        block_background_fill="#141414",
        block_background_fill_dark="#141414",
        button_primary_background_fill="#3b82f6",
        button_primary_background_fill_dark="#3b82f6",
        button_primary_text_color="white",
        button_primary_text_color_dark="white",
    )

    with gr.Blocks(title="Command Center") as demo:

        with gr.Tab("📚 Study Plan"):
            header = gr.Markdown(elem_id="study-header")
            focus = gr.Markdown(elem_id="study-focus")

            with gr.Row():
                complete_btn = gr.Button("✅ Mark Complete", variant="primary", scale=1)
                refresh_btn = gr.Button("Refresh", scale=1)

            with gr.Row():
                with gr.Column(scale=2):
                    week_dropdown = gr.Dropdown(label="Week", choices=[], interactive=True)
                    week_view = gr.Markdown(elem_id="study-weeks")

                with gr.Column(scale=1):
                    gr.Markdown("### 📝 Today's Notes")
                    notes_box = gr.Textbox(
                        placeholder="What did you learn today?",
                        show_label=False,
                        lines=10,
                    )
                    save_notes_btn = gr.Button("Save Notes", size="md")

            page_outputs = [header, focus, week_dropdown, week_view]

            demo.load(refresh_handler, None, page_outputs + [notes_box])
            refresh_btn.click(refresh_handler, None, page_outputs + [notes_box])
            complete_btn.click(complete_handler, None, page_outputs)
            week_dropdown.change(week_select_handler, [week_dropdown], week_view)
            save_notes_btn.click(save_notes_handler, [notes_box], None)

    # Attach theme and css to demo for Gradio 6.0
    demo.theme = theme
    demo.css = custom_css
    return demo
