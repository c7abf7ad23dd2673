"""
Command Center - A personal study dashboard

This package tracks a multi-week study plan written in Markdown:
- study: plan parsing, status transitions, progress, calendar schedule and
  file-backed stores
- ui: Gradio-based dashboard
- app: Main application entry point

Usage:
    # Run the Gradio UI
    python -m command_center.app.main

    # Or use the study engine directly
    from command_center.study import parse_plan, mark_day_completed
    plan = parse_plan(open("STUDY-PLAN.md").read())
    plan = mark_day_completed(plan, plan.current_week, plan.current_day)
"""

__version__ = "0.1.0"
__author__ = "Command Center Team"

__all__ = ["__version__", "__author__"]
