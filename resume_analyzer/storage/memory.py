"""In-process store, used for one-off runs and tests."""

from typing import Optional

from resume_analyzer.matching.models import AnalysisRecord
from resume_analyzer.storage.base import AnalysisStore
from resume_analyzer.storage.models import JobDescription, ResumeDraft


class MemoryStore(AnalysisStore):
    def __init__(self):
        self._draft: Optional[ResumeDraft] = None
        self._job: Optional[JobDescription] = None
        self._history: list[AnalysisRecord] = []

    def save_resume_draft(self, content: str) -> ResumeDraft:
        self._draft = ResumeDraft(content=content)
        return self._draft

    def get_resume_draft(self) -> Optional[ResumeDraft]:
        return self._draft

    def clear_resume_draft(self) -> None:
        self._draft = None

    def save_job_description(
        self,
        title: str,
        company: str,
        description: str,
        requirements: list[str],
    ) -> JobDescription:
        self._job = JobDescription(
            title=title,
            company=company,
            description=description,
            requirements=list(requirements),
        )
        return self._job

    def get_job_description(self) -> Optional[JobDescription]:
        return self._job

    def clear_job_description(self) -> None:
        self._job = None

    def save_analysis(self, record: AnalysisRecord) -> AnalysisRecord:
        self._history.insert(0, record)
        return record

    def get_analysis_history(self) -> list[AnalysisRecord]:
        return list(self._history)

    def get_analysis(self, record_id: str) -> Optional[AnalysisRecord]:
        return next((r for r in self._history if r.id == record_id), None)

    def delete_analysis(self, record_id: str) -> bool:
        before = len(self._history)
        self._history = [r for r in self._history if r.id != record_id]
        return len(self._history) < before

    def clear_analysis_history(self) -> None:
        self._history = []
