import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from command_center.config import settings as config
from command_center.study.schemas import StudyPlan

logger = logging.getLogger(__name__)


class StudyStoreError(Exception):
    """Raised when a stored progress snapshot cannot be read back."""


class StudyProgressStore:
    """JSON snapshot of the study plan, rewritten after every transition."""
    __store_path: Path

    def __init__(self, store_path=None):
        self.__store_path = Path(store_path or config.STUDY_PROGRESS_PATH)

    @property
    def store_path(self) -> Path:
        return self.__store_path

    def exists(self) -> bool:
        return self.__store_path.is_file()

    def save(self, plan: StudyPlan) -> None:
        self.__store_path.parent.mkdir(parents=True, exist_ok=True)
        self.__store_path.write_text(
            json.dumps(plan.model_dump(by_alias=True, mode="json"), ensure_ascii=False, indent=2),
            encoding="utf-8"
        )
        logger.debug(f"Saved study progress to {self.__store_path}")

    def load(self) -> Optional[StudyPlan]:
        if not self.exists():
            return None
        try:
            data = json.loads(self.__store_path.read_text(encoding="utf-8"))
            return StudyPlan.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise StudyStoreError(f"Invalid study progress file {self.__store_path}: {e}") from e

    def clear(self) -> None:
        if self.exists():
            self.__store_path.unlink()
