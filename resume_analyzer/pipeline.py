"""Workflows tying validation, analysis and storage together."""

import logging
from typing import Optional

from resume_analyzer.matching.matcher import DEFAULT_SNIPPET_LENGTH, analyze_resume, build_analysis_record
from resume_analyzer.matching.models import AnalysisRecord, AnalysisResult
from resume_analyzer.storage.base import AnalysisStore
from resume_analyzer.utils.text_processing import extract_skills
from resume_analyzer.validation.models import JobValidation, ResumeValidation
from resume_analyzer.validation.validators import RESUME_REQUIRED, validate_job_description, validate_resume

logger = logging.getLogger("resume_analyzer.pipeline")


def submit_resume(store: AnalysisStore, text: str) -> ResumeValidation:
    """Validate resume text and save it as the current draft.

    The draft is saved even when validation fails; the errors are advisory.
    """
    validation = validate_resume(text)
    store.save_resume_draft(text)

    if validation.is_valid:
        logger.info("Resume draft saved (%d characters)", len(text))
    else:
        logger.warning("Resume draft saved with %d issue(s)", len(validation.errors))
    return validation


def submit_job_description(
    store: AnalysisStore,
    title: str,
    company: str,
    description: str,
) -> JobValidation:
    """Validate a job description and, if valid, save it with its extracted requirements.

    A job is only saved once a resume draft exists to analyze it against.
    """
    validation = validate_job_description(title, company, description)
    if validation.is_valid and store.get_resume_draft() is None:
        validation.errors.append(RESUME_REQUIRED)
    if not validation.is_valid:
        logger.warning("Job description rejected: %s", "; ".join(validation.errors))
        return validation

    requirements = extract_skills(description).to_list()
    store.save_job_description(title.strip(), company.strip(), description, requirements)
    logger.info(
        "Job description saved: %s at %s (%d requirements)",
        title.strip(), company.strip(), len(requirements),
    )
    return validation


def run_analysis(store: AnalysisStore) -> Optional[AnalysisResult]:
    """Analyze the saved resume draft against the saved job description.

    Returns None when either has not been saved yet.
    """
    draft = store.get_resume_draft()
    if draft is None:
        logger.warning("No resume draft found - save a resume first")
        return None

    job = store.get_job_description()
    if job is None:
        logger.warning("No job description found - save a job description first")
        return None

    return analyze_resume(draft.content, job.description)


def save_analysis_result(
    store: AnalysisStore,
    result: AnalysisResult,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
) -> AnalysisRecord:
    """Save a completed analysis to history, labeled with the saved job and resume."""
    draft = store.get_resume_draft()
    job = store.get_job_description()

    record = build_analysis_record(
        result,
        job_title=job.title if job else "",
        company=job.company if job else "",
        resume_text=draft.content if draft else "",
        snippet_length=snippet_length,
    )
    return store.save_analysis(record)
