"""Tests for the analysis stores."""

import os
import tempfile

import pytest

from resume_analyzer.matching.models import AnalysisRecord
from resume_analyzer.skills.taxonomy import TAXONOMY_VERSION
from resume_analyzer.storage.database import AnalysisDatabase, sqlite_url
from resume_analyzer.storage.memory import MemoryStore


@pytest.fixture
def db_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.join(tmpdir, "nested", "test.db")


@pytest.fixture(params=["sqlite", "memory"])
def store(request, db_path):
    """Each test runs against both store implementations."""
    if request.param == "sqlite":
        database = AnalysisDatabase(sqlite_url(db_path))
    else:
        database = MemoryStore()
    yield database
    database.close()


def make_record(**kwargs) -> AnalysisRecord:
    defaults = dict(
        resume_snippet="John Smith, Python engineer",
        job_title="Software Engineer",
        company="Acme Inc",
        match_percentage=75,
        matched_skills=("python", "docker"),
        missing_skills=("aws",),
        suggestions=("Highlight experience with: aws",),
    )
    defaults.update(kwargs)
    return AnalysisRecord(**defaults)


class TestResumeDraft:
    def test_empty_store(self, store):
        assert store.get_resume_draft() is None

    def test_save_and_get(self, store):
        store.save_resume_draft("My resume")
        draft = store.get_resume_draft()
        assert draft.content == "My resume"
        assert draft.last_saved.tzinfo is not None

    def test_last_write_wins(self, store):
        store.save_resume_draft("first")
        store.save_resume_draft("second")
        assert store.get_resume_draft().content == "second"

    def test_clear(self, store):
        store.save_resume_draft("My resume")
        store.clear_resume_draft()
        assert store.get_resume_draft() is None

    def test_clear_when_empty(self, store):
        store.clear_resume_draft()
        assert store.get_resume_draft() is None


class TestJobDescription:
    def test_empty_store(self, store):
        assert store.get_job_description() is None

    def test_save_and_get(self, store):
        store.save_job_description("Engineer", "Acme", "Python role", ["python", "5+ years experience"])
        job = store.get_job_description()
        assert job.title == "Engineer"
        assert job.company == "Acme"
        assert job.description == "Python role"
        assert job.requirements == ["python", "5+ years experience"]

    def test_last_write_wins(self, store):
        store.save_job_description("First", "Acme", "desc", [])
        store.save_job_description("Second", "Other", "desc", ["go"])
        job = store.get_job_description()
        assert job.title == "Second"
        assert job.requirements == ["go"]

    def test_clear(self, store):
        store.save_job_description("Engineer", "Acme", "desc", [])
        store.clear_job_description()
        assert store.get_job_description() is None


class TestAnalysisHistory:
    def test_empty_history(self, store):
        assert store.get_analysis_history() == []

    def test_newest_first(self, store):
        first = store.save_analysis(make_record(job_title="First"))
        second = store.save_analysis(make_record(job_title="Second"))
        history = store.get_analysis_history()
        assert [r.id for r in history] == [second.id, first.id]

    def test_round_trip(self, store):
        record = make_record()
        store.save_analysis(record)
        assert store.get_analysis(record.id) == record

    def test_get_missing(self, store):
        assert store.get_analysis("does-not-exist") is None

    def test_delete(self, store):
        keep = store.save_analysis(make_record())
        drop = store.save_analysis(make_record())
        assert store.delete_analysis(drop.id) is True
        assert [r.id for r in store.get_analysis_history()] == [keep.id]

    def test_delete_missing(self, store):
        assert store.delete_analysis("does-not-exist") is False

    def test_clear(self, store):
        store.save_analysis(make_record())
        store.save_analysis(make_record())
        store.clear_analysis_history()
        assert store.get_analysis_history() == []

    def test_returned_list_is_a_copy(self, store):
        store.save_analysis(make_record())
        store.get_analysis_history().clear()
        assert len(store.get_analysis_history()) == 1


class TestAnalysisDatabase:
    def test_creates_parent_directory(self, db_path):
        with AnalysisDatabase(sqlite_url(db_path)):
            pass
        assert os.path.exists(db_path)

    def test_data_survives_reopen(self, db_path):
        record = make_record()
        with AnalysisDatabase(sqlite_url(db_path)) as db:
            db.save_resume_draft("persisted")
            db.save_analysis(record)

        with AnalysisDatabase(sqlite_url(db_path)) as db:
            assert db.get_resume_draft().content == "persisted"
            assert db.get_analysis(record.id) == record

    def test_stats_empty_db(self, db_path):
        with AnalysisDatabase(sqlite_url(db_path)) as db:
            stats = db.get_stats()
        assert stats["total_analyses"] == 0
        assert stats["has_resume_draft"] is False
        assert stats["taxonomy_version"] == TAXONOMY_VERSION
        assert "average_match" not in stats

    def test_stats(self, db_path):
        with AnalysisDatabase(sqlite_url(db_path)) as db:
            db.save_analysis(make_record(match_percentage=50))
            db.save_analysis(make_record(match_percentage=75))
            db.save_job_description("Engineer", "Acme", "desc", [])
            stats = db.get_stats()
        assert stats["total_analyses"] == 2
        assert stats["average_match"] == 62.5
        assert stats["best_match"] == 75
        assert stats["has_job_description"] is True
