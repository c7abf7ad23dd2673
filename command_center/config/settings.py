"""
Configuration module for Command Center.

Values come from environment variables; a local .env file is loaded first.
"""
import os

from dotenv import load_dotenv

# This must happen before any os.getenv() calls
load_dotenv()

# --- Study Plan Files ---
STUDY_PLAN_PATH = os.getenv("STUDY_PLAN_PATH", "study/STUDY-PLAN.md")
STUDY_NOTES_DIR = os.getenv("STUDY_NOTES_DIR", "study/notes")
STUDY_PROGRESS_PATH = os.getenv("STUDY_PROGRESS_PATH", "study/progress.json")

# --- Calendar Schedule ---
# ISO date of week 1, day 1; leave unset to follow manual completion only
STUDY_START_DATE = os.getenv("STUDY_START_DATE")
STUDY_DAYS_PER_WEEK = int(os.getenv("STUDY_DAYS_PER_WEEK", "7"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Server Configuration ---
GRADIO_SERVER_NAME = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
GRADIO_SERVER_PORT = int(os.getenv("GRADIO_SERVER_PORT", "7860"))
