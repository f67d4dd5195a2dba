"""Analysis facade: extraction, matching and suggestions in one call."""

import logging

from resume_analyzer.matching.keyword_matcher import match_skills
from resume_analyzer.matching.models import AnalysisRecord, AnalysisResult
from resume_analyzer.matching.suggestions import generate_suggestions
from resume_analyzer.utils.text_processing import extract_skills, snippet

logger = logging.getLogger("resume_analyzer.matching")

DEFAULT_SNIPPET_LENGTH = 200


def analyze_resume(resume_text: str, job_text: str) -> AnalysisResult:
    """Analyze a resume against a job description."""
    resume_skills = extract_skills(resume_text)
    job_skills = extract_skills(job_text)

    match = match_skills(resume_skills, job_skills)
    suggestions = generate_suggestions(
        match.matched_skills, match.missing_skills, match.match_percentage
    )

    logger.info(
        "Analysis complete: %d%% match (%d matched, %d missing, %d suggestions)",
        match.match_percentage,
        len(match.matched_skills),
        len(match.missing_skills),
        len(suggestions),
    )

    return AnalysisResult(
        match_percentage=match.match_percentage,
        matched_skills=match.matched_skills,
        missing_skills=match.missing_skills,
        suggestions=suggestions,
    )


def build_analysis_record(
    result: AnalysisResult,
    job_title: str,
    company: str,
    resume_text: str,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
) -> AnalysisRecord:
    """Shape an analysis result into a history record with a fresh id and timestamp."""
    return AnalysisRecord(
        resume_snippet=snippet(resume_text, snippet_length),
        job_title=job_title,
        company=company,
        match_percentage=result.match_percentage,
        matched_skills=tuple(result.matched_skills),
        missing_skills=tuple(result.missing_skills),
        suggestions=tuple(result.suggestions),
    )
