import logging
from pathlib import Path

from command_center.config import settings as config
from command_center.study.parsers import get_default_plan, parse_plan
from command_center.study.schemas import StudyPlan

logger = logging.getLogger(__name__)


class StudyPlanSource:
    """Reads the study plan Markdown file and parses it."""
    __plan_path: Path

    def __init__(self, plan_path=None):
        self.__plan_path = Path(plan_path or config.STUDY_PLAN_PATH)

    @property
    def plan_path(self) -> Path:
        return self.__plan_path

    def exists(self) -> bool:
        return self.__plan_path.is_file()

    def read_text(self) -> str:
        if not self.exists():
            return ""
        return self.__plan_path.read_text(encoding="utf-8")

    def load_plan(self) -> StudyPlan:
        if not self.exists():
            logger.info(f"Study plan not found at {self.__plan_path}, using default plan")
            return get_default_plan()
        return parse_plan(self.read_text())
