import logging
import re
from pathlib import Path
from typing import List, Optional

from command_center.config import settings as config
from command_center.study.schemas import StudyNote

logger = logging.getLogger(__name__)

NOTE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
NOTE_TOPIC_PATTERN = re.compile(r"# Study Notes: (.+)")
NOTE_HEADER_PATTERN = re.compile(r"# Study Notes:.+\n\nDate:.+\n\n")


class StudyNotesStore:
    """Dated study notes kept as one Markdown file per day."""
    __notes_dir: Path

    def __init__(self, notes_dir=None):
        self.__notes_dir = Path(notes_dir or config.STUDY_NOTES_DIR)

    def _note_path(self, date: str) -> Path:
        if not NOTE_DATE_PATTERN.match(date or ""):
            raise ValueError(f"Invalid note date {date!r}, expected YYYY-MM-DD")
        return self.__notes_dir / f"{date}.md"

    def save_note(self, note: StudyNote) -> Path:
        file_path = self._note_path(note.date)
        self.__notes_dir.mkdir(parents=True, exist_ok=True)
        file_path.write_text(
            f"# Study Notes: {note.topic}\n\nDate: {note.date}\n\n{note.content}",
            encoding="utf-8"
        )
        logger.info(f"Saved study notes for {note.date}")
        return file_path

    def load_note(self, date: str) -> Optional[StudyNote]:
        file_path = self._note_path(date)
        if not file_path.is_file():
            return None

        content = file_path.read_text(encoding="utf-8")
        topic_match = NOTE_TOPIC_PATTERN.search(content)
        return StudyNote(
            date=date,
            topic=topic_match.group(1).strip() if topic_match else "Unknown",
            content=NOTE_HEADER_PATTERN.sub("", content, count=1),
        )

    def list_dates(self) -> List[str]:
        if not self.__notes_dir.is_dir():
            return []
        return sorted(
            path.stem for path in self.__notes_dir.glob("*.md")
            if NOTE_DATE_PATTERN.match(path.stem)
        )
