"""Match, analysis and history record models."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from resume_analyzer.skills.models import SkillSet


# Lower bounds, highest first.
MATCH_LEVELS = (
    (80, "Excellent Match"),
    (60, "Good Match"),
    (40, "Fair Match"),
)
NEEDS_WORK = "Needs Work"


def match_level(percentage: int) -> str:
    """Qualitative label for a match percentage."""
    for threshold, label in MATCH_LEVELS:
        if percentage >= threshold:
            return label
    return NEEDS_WORK


@dataclass
class MatchResult:
    match_percentage: int = 0
    matched_skills: SkillSet = field(default_factory=SkillSet)
    missing_skills: SkillSet = field(default_factory=SkillSet)


@dataclass
class AnalysisResult:
    """Outcome of analyzing one resume against one job description."""

    match_percentage: int = 0
    matched_skills: SkillSet = field(default_factory=SkillSet)
    missing_skills: SkillSet = field(default_factory=SkillSet)
    suggestions: list[str] = field(default_factory=list)

    @property
    def match_level(self) -> str:
        return match_level(self.match_percentage)

    def to_dict(self) -> dict:
        return {
            "match_percentage": self.match_percentage,
            "match_level": self.match_level,
            "matched_skills": self.matched_skills.to_list(),
            "missing_skills": self.missing_skills.to_list(),
            "suggestions": list(self.suggestions),
        }


def new_record_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class AnalysisRecord:
    """Saved snapshot of a completed analysis. Never modified after creation."""

    resume_snippet: str
    job_title: str
    company: str
    match_percentage: int
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    id: str = field(default_factory=new_record_id)
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "resume_snippet": self.resume_snippet,
            "job_title": self.job_title,
            "company": self.company,
            "match_percentage": self.match_percentage,
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
            "suggestions": list(self.suggestions),
            "analyzed_at": self.analyzed_at.isoformat(),
        }
