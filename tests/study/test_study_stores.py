"""
Tests for the file-backed study stores - plan source, progress snapshot, notes
"""
import json

import pytest

from command_center.study.notes_store import StudyNotesStore
from command_center.study.plan_source import StudyPlanSource
from command_center.study.progress_store import StudyProgressStore, StudyStoreError
from command_center.study.schemas import (
    StudyDayDetails,
    StudyNote,
    StudyResource,
    StudyStatus,
)


class TestStudyPlanSource:
    """Test StudyPlanSource class"""

    def test_missing_file_uses_default(self, tmp_path):
        """Test the default plan when the file does not exist"""
        source = StudyPlanSource(tmp_path / "missing.md")

        assert source.exists() is False
        assert source.read_text() == ""
        plan = source.load_plan()
        assert plan.title == "Staff Engineer Interview Prep"
        assert plan.weeks[0].days[0].status == StudyStatus.CURRENT

    def test_loads_and_parses_file(self, tmp_path, plan_markdown):
        """Test reading and parsing an existing plan"""
        path = tmp_path / "STUDY-PLAN.md"
        path.write_text(plan_markdown, encoding="utf-8")

        plan = StudyPlanSource(path).load_plan()

        assert plan.title == "Staff Interview Prep"
        assert len(plan.weeks) == 2
        assert plan.current_day == 2


class TestStudyProgressStore:
    """Test StudyProgressStore class"""

    @pytest.fixture
    def store(self, tmp_path):
        """Create store in a temporary directory"""
        return StudyProgressStore(tmp_path / "nested" / "progress.json")

    def test_load_without_snapshot(self, store):
        """Test None when nothing has been saved"""
        assert store.exists() is False
        assert store.load() is None

    def test_save_and_load(self, store, plan_factory):
        """Test a plan with notes and details survives a save"""
        plan = plan_factory((1, [(1, "completed"), (2, "current")]), current_day=2)
        plan.weeks[0].days[0].notes = "Quorum reads"
        plan.weeks[0].days[1].details = StudyDayDetails(
            key_concepts=["Raft"],
            resources=[StudyResource(type="book", title="DDIA", chapter="9")],
            time_estimate="2h",
        )

        store.save(plan)
        loaded = store.load()

        assert loaded == plan
        assert loaded.weeks[0].days[1].details.resources[0].chapter == "9"

    def test_snapshot_uses_camel_case(self, store, single_week_plan):
        """Test the JSON file uses the dashboard field names"""
        store.save(single_week_plan)

        data = json.loads(store.store_path.read_text(encoding="utf-8"))

        assert data["targetDate"] == "March 2026"
        assert data["currentWeek"] == 1
        assert data["weeks"][0]["days"][0]["status"] == "current"

    def test_corrupt_snapshot(self, store):
        """Test unreadable JSON raises StudyStoreError"""
        store.store_path.parent.mkdir(parents=True)
        store.store_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StudyStoreError):
            store.load()

    def test_undecodable_snapshot(self, store):
        """Test non UTF-8 bytes raise StudyStoreError"""
        store.store_path.parent.mkdir(parents=True)
        store.store_path.write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(StudyStoreError):
            store.load()

    def test_invalid_status_rejected(self, store, single_week_plan):
        """Test an unknown status fails validation"""
        store.save(single_week_plan)
        data = json.loads(store.store_path.read_text(encoding="utf-8"))
        data["weeks"][0]["days"][0]["status"] = "skipped"
        store.store_path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(StudyStoreError):
            store.load()

    def test_clear(self, store, single_week_plan):
        """Test clearing removes the snapshot"""
        store.save(single_week_plan)
        store.clear()

        assert store.load() is None


class TestStudyNotesStore:
    """Test StudyNotesStore class"""

    @pytest.fixture
    def notes_store(self, tmp_path):
        """Create notes store in a temporary directory"""
        return StudyNotesStore(tmp_path / "notes")

    def test_save_writes_header(self, notes_store):
        """Test the saved file format"""
        path = notes_store.save_note(StudyNote(date="2026-02-03", topic="Load Balancing", content="L4 vs L7"))

        assert path.name == "2026-02-03.md"
        assert path.read_text(encoding="utf-8") == (
            "# Study Notes: Load Balancing\n\nDate: 2026-02-03\n\nL4 vs L7"
        )

    def test_save_and_load(self, notes_store):
        """Test the header is stripped on load"""
        notes_store.save_note(StudyNote(date="2026-02-03", topic="Caching", content="Write-through\n\nWrite-back"))

        note = notes_store.load_note("2026-02-03")

        assert note.topic == "Caching"
        assert note.content == "Write-through\n\nWrite-back"

    def test_load_missing(self, notes_store):
        """Test None for a date without notes"""
        assert notes_store.load_note("2026-02-04") is None

    def test_load_without_header(self, notes_store, tmp_path):
        """Test hand-written files without a header"""
        (tmp_path / "notes").mkdir()
        (tmp_path / "notes" / "2026-02-05.md").write_text("just text", encoding="utf-8")

        note = notes_store.load_note("2026-02-05")

        assert note.topic == "Unknown"
        assert note.content == "just text"

    def test_invalid_date(self, notes_store):
        """Test dates that could escape the notes directory are rejected"""
        with pytest.raises(ValueError):
            notes_store.load_note("../secrets")
        with pytest.raises(ValueError):
            notes_store.save_note(StudyNote(date="today", topic="x", content="y"))

    def test_list_dates(self, notes_store):
        """Test dates are listed in order"""
        assert notes_store.list_dates() == []

        for day in ("2026-02-05", "2026-02-01", "2026-02-03"):
            notes_store.save_note(StudyNote(date=day, topic="t", content="c"))

        assert notes_store.list_dates() == ["2026-02-01", "2026-02-03", "2026-02-05"]
