"""Saved draft models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ResumeDraft:
    content: str
    last_saved: datetime = field(default_factory=_now)


@dataclass
class JobDescription:
    """The job posting currently being analyzed against."""

    title: str
    company: str
    description: str
    requirements: list[str] = field(default_factory=list)  # skills extracted from description
    last_saved: datetime = field(default_factory=_now)
