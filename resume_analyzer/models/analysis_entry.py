"""Analysis history model - one row per saved analysis."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_analyzer.matching.models import AnalysisRecord

from .base import Base, ensure_utc


class AnalysisEntry(Base):
    __tablename__ = "analysis_history"

    # Insertion order; history is listed by seq descending.
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    record_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)

    resume_snippet: Mapped[str] = mapped_column(Text, default="")
    job_title: Mapped[str] = mapped_column(String(500), default="")
    company: Mapped[str] = mapped_column(String(255), default="")
    match_percentage: Mapped[int] = mapped_column(Integer, default=0)
    matched_skills: Mapped[list] = mapped_column(JSON, default=list)
    missing_skills: Mapped[list] = mapped_column(JSON, default=list)
    suggestions: Mapped[list] = mapped_column(JSON, default=list)
    analyzed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    @classmethod
    def from_record(cls, record: AnalysisRecord) -> "AnalysisEntry":
        return cls(
            record_id=record.id,
            resume_snippet=record.resume_snippet,
            job_title=record.job_title,
            company=record.company,
            match_percentage=record.match_percentage,
            matched_skills=list(record.matched_skills),
            missing_skills=list(record.missing_skills),
            suggestions=list(record.suggestions),
            analyzed_at=record.analyzed_at,
        )

    def to_record(self) -> AnalysisRecord:
        return AnalysisRecord(
            id=self.record_id,
            resume_snippet=self.resume_snippet or "",
            job_title=self.job_title or "",
            company=self.company or "",
            match_percentage=self.match_percentage or 0,
            matched_skills=tuple(self.matched_skills or ()),
            missing_skills=tuple(self.missing_skills or ()),
            suggestions=tuple(self.suggestions or ()),
            analyzed_at=ensure_utc(self.analyzed_at),
        )
