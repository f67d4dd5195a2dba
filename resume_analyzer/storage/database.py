"""SQLAlchemy storage for drafts and analysis history."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.engine import make_url

from resume_analyzer.matching.models import AnalysisRecord
from resume_analyzer.models import (
    SINGLETON_KEY,
    AnalysisEntry,
    Base,
    JobDescriptionRow,
    ResumeDraftRow,
    create_db_engine,
    create_session_factory,
)
from resume_analyzer.skills.taxonomy import TAXONOMY_VERSION
from resume_analyzer.storage.base import AnalysisStore
from resume_analyzer.storage.models import JobDescription, ResumeDraft

logger = logging.getLogger("resume_analyzer.storage")


def sqlite_url(db_path: str) -> str:
    return f"sqlite:///{Path(db_path)}"


class AnalysisDatabase(AnalysisStore):
    """Database-backed store. Works with any SQLAlchemy URL; SQLite by default."""

    def __init__(self, database_url: str = "sqlite:///data/resume_analyzer.db"):
        self.database_url = database_url
        self._ensure_sqlite_dir()
        self.engine = create_db_engine(database_url)
        self.Session = create_session_factory(self.engine)
        Base.metadata.create_all(self.engine)
        logger.debug("Opened analysis database at %s", self.engine.url.render_as_string(hide_password=True))

    def _ensure_sqlite_dir(self):
        url = make_url(self.database_url)
        if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    # Resume draft

    def save_resume_draft(self, content: str) -> ResumeDraft:
        with self.Session() as session:
            row = session.merge(ResumeDraftRow(
                key=SINGLETON_KEY,
                content=content,
                last_saved=datetime.now(timezone.utc),
            ))
            session.commit()
            return row.to_draft()

    def get_resume_draft(self) -> Optional[ResumeDraft]:
        with self.Session() as session:
            row = session.get(ResumeDraftRow, SINGLETON_KEY)
            return row.to_draft() if row else None

    def clear_resume_draft(self) -> None:
        with self.Session() as session:
            session.execute(delete(ResumeDraftRow))
            session.commit()

    # Job description

    def save_job_description(
        self,
        title: str,
        company: str,
        description: str,
        requirements: list[str],
    ) -> JobDescription:
        with self.Session() as session:
            row = session.merge(JobDescriptionRow(
                key=SINGLETON_KEY,
                title=title,
                company=company,
                description=description,
                requirements=list(requirements),
                last_saved=datetime.now(timezone.utc),
            ))
            session.commit()
            return row.to_job_description()

    def get_job_description(self) -> Optional[JobDescription]:
        with self.Session() as session:
            row = session.get(JobDescriptionRow, SINGLETON_KEY)
            return row.to_job_description() if row else None

    def clear_job_description(self) -> None:
        with self.Session() as session:
            session.execute(delete(JobDescriptionRow))
            session.commit()

    # Analysis history

    def save_analysis(self, record: AnalysisRecord) -> AnalysisRecord:
        with self.Session() as session:
            session.add(AnalysisEntry.from_record(record))
            session.commit()
        logger.info("Saved analysis %s (%d%% match)", record.id, record.match_percentage)
        return record

    def get_analysis_history(self) -> list[AnalysisRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(AnalysisEntry).order_by(AnalysisEntry.seq.desc())
            ).all()
            return [row.to_record() for row in rows]

    def get_analysis(self, record_id: str) -> Optional[AnalysisRecord]:
        with self.Session() as session:
            row = session.scalars(
                select(AnalysisEntry).where(AnalysisEntry.record_id == record_id)
            ).first()
            return row.to_record() if row else None

    def delete_analysis(self, record_id: str) -> bool:
        with self.Session() as session:
            result = session.execute(
                delete(AnalysisEntry).where(AnalysisEntry.record_id == record_id)
            )
            session.commit()
            deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted analysis %s", record_id)
        return deleted

    def clear_analysis_history(self) -> None:
        with self.Session() as session:
            result = session.execute(delete(AnalysisEntry))
            session.commit()
            cleared = result.rowcount
        logger.info("Cleared %d analyses from history", cleared)

    def get_stats(self) -> dict:
        """Summary numbers for the history."""
        history = self.get_analysis_history()
        stats = {
            "total_analyses": len(history),
            "has_resume_draft": self.get_resume_draft() is not None,
            "has_job_description": self.get_job_description() is not None,
            "taxonomy_version": TAXONOMY_VERSION,
        }
        if history:
            scores = [r.match_percentage for r in history]
            stats["average_match"] = round(sum(scores) / len(scores), 1)
            stats["best_match"] = max(scores)
            stats["last_analyzed_at"] = history[0].analyzed_at.isoformat()
        return stats

    def close(self):
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
