"""ORM models for drafts and analysis history."""

from .analysis_entry import AnalysisEntry
from .base import Base, create_db_engine, create_session_factory
from .drafts import SINGLETON_KEY, JobDescriptionRow, ResumeDraftRow

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "AnalysisEntry",
    "JobDescriptionRow",
    "ResumeDraftRow",
    "SINGLETON_KEY",
]
