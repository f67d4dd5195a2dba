"""Draft models - the single saved resume and job description."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_analyzer.storage.models import JobDescription, ResumeDraft

from .base import Base, ensure_utc

# Each table holds at most one row under this key.
SINGLETON_KEY = "current"


class ResumeDraftRow(Base):
    __tablename__ = "resume_drafts"

    key: Mapped[str] = mapped_column(String(32), primary_key=True, default=SINGLETON_KEY)
    content: Mapped[str] = mapped_column(Text, default="")
    last_saved: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    def to_draft(self) -> ResumeDraft:
        return ResumeDraft(content=self.content or "", last_saved=ensure_utc(self.last_saved))


class JobDescriptionRow(Base):
    __tablename__ = "job_descriptions"

    key: Mapped[str] = mapped_column(String(32), primary_key=True, default=SINGLETON_KEY)
    title: Mapped[str] = mapped_column(String(500), default="")
    company: Mapped[str] = mapped_column(String(255), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    requirements: Mapped[list] = mapped_column(JSON, default=list)
    last_saved: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    def to_job_description(self) -> JobDescription:
        return JobDescription(
            title=self.title or "",
            company=self.company or "",
            description=self.description or "",
            requirements=list(self.requirements or []),
            last_saved=ensure_utc(self.last_saved),
        )
