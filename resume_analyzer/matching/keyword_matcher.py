"""Skill overlap scoring between a resume and a job description."""

import logging

from resume_analyzer.matching.models import MatchResult
from resume_analyzer.skills.models import SkillSet

logger = logging.getLogger("resume_analyzer.matching.keyword")


def percentage(part: int, total: int) -> int:
    """Integer percentage of part/total, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


def match_skills(resume_skills: SkillSet, job_skills: SkillSet) -> MatchResult:
    """Compare extracted skill sets.

    Matched skills keep the resume's spelling and order; missing skills keep
    the job's order.
    """
    matched = resume_skills & job_skills
    missing = job_skills - resume_skills
    score = percentage(len(matched), len(job_skills))

    logger.debug(
        "Matched %d/%d job skills (%d%%), %d missing",
        len(matched), len(job_skills), score, len(missing),
    )

    return MatchResult(
        match_percentage=score,
        matched_skills=matched,
        missing_skills=missing,
    )
