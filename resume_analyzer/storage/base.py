"""Storage interface for drafts and analysis history."""

from abc import ABC, abstractmethod
from typing import Optional

from resume_analyzer.matching.models import AnalysisRecord
from resume_analyzer.storage.models import JobDescription, ResumeDraft


class AnalysisStore(ABC):
    """Persistence for the resume draft, the job description and saved analyses.

    The draft and job description are singletons: saving replaces the previous
    value. History is kept newest first. Missing data is reported as None or
    an empty list, never as an error.
    """

    @abstractmethod
    def save_resume_draft(self, content: str) -> ResumeDraft: ...

    @abstractmethod
    def get_resume_draft(self) -> Optional[ResumeDraft]: ...

    @abstractmethod
    def clear_resume_draft(self) -> None: ...

    @abstractmethod
    def save_job_description(
        self,
        title: str,
        company: str,
        description: str,
        requirements: list[str],
    ) -> JobDescription: ...

    @abstractmethod
    def get_job_description(self) -> Optional[JobDescription]: ...

    @abstractmethod
    def clear_job_description(self) -> None: ...

    @abstractmethod
    def save_analysis(self, record: AnalysisRecord) -> AnalysisRecord:
        """Add a record at the head of the history."""

    @abstractmethod
    def get_analysis_history(self) -> list[AnalysisRecord]:
        """All saved analyses, most recently saved first."""

    @abstractmethod
    def get_analysis(self, record_id: str) -> Optional[AnalysisRecord]: ...

    @abstractmethod
    def delete_analysis(self, record_id: str) -> bool:
        """Remove one record. Returns False if no record had that id."""

    @abstractmethod
    def clear_analysis_history(self) -> None: ...

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
