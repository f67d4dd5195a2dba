"""Resume, job description and contact form validation."""

import logging
import re

from resume_analyzer.validation.models import ContactValidation, JobValidation, ResumeValidation

logger = logging.getLogger("resume_analyzer.validation")

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"(\+?1[-.\s]?)?(\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}", re.ASCII)
NAME_PATTERN = re.compile(r"[a-zA-Z\s]{2,50}")

MIN_RESUME_LENGTH = 100
MIN_TITLE_LENGTH = 2
MIN_COMPANY_LENGTH = 2
MIN_DESCRIPTION_LENGTH = 50
MIN_MESSAGE_LENGTH = 10

RESUME_TOO_SHORT = "Resume content seems too short. Please include more details."
RESUME_NO_EMAIL = "No email address detected. Consider adding contact information."
RESUME_NO_PHONE = "No phone number detected. Consider adding contact information."
JOB_TITLE_REQUIRED = "Job title is required."
JOB_COMPANY_REQUIRED = "Company name is required."
JOB_DESCRIPTION_TOO_SHORT = f"Job description should be at least {MIN_DESCRIPTION_LENGTH} characters."
RESUME_REQUIRED = "Please enter your resume first before analyzing."
CONTACT_INVALID_NAME = "Please enter a valid name (2-50 letters)."
CONTACT_INVALID_EMAIL = "Please enter a valid email address."
CONTACT_MESSAGE_TOO_SHORT = f"Message should be at least {MIN_MESSAGE_LENGTH} characters."


def validate_resume(text: str) -> ResumeValidation:
    """Check resume length and look for contact details.

    Every rule is evaluated; the first email and phone found are reported.
    """
    result = ResumeValidation()

    email_match = EMAIL_PATTERN.search(text)
    if email_match:
        result.has_email = True
        result.email_match = email_match.group(0)

    phone_match = PHONE_PATTERN.search(text)
    if phone_match:
        result.has_phone = True
        result.phone_match = phone_match.group(0)

    if len(text.strip()) < MIN_RESUME_LENGTH:
        result.errors.append(RESUME_TOO_SHORT)
    if not result.has_email:
        result.errors.append(RESUME_NO_EMAIL)
    if not result.has_phone:
        result.errors.append(RESUME_NO_PHONE)

    logger.debug(
        "Resume validation: valid=%s email=%s phone=%s",
        result.is_valid, result.has_email, result.has_phone,
    )
    return result


def validate_job_description(title: str, company: str, description: str) -> JobValidation:
    result = JobValidation()

    if len(title.strip()) < MIN_TITLE_LENGTH:
        result.errors.append(JOB_TITLE_REQUIRED)
    if len(company.strip()) < MIN_COMPANY_LENGTH:
        result.errors.append(JOB_COMPANY_REQUIRED)
    if len(description.strip()) < MIN_DESCRIPTION_LENGTH:
        result.errors.append(JOB_DESCRIPTION_TOO_SHORT)

    return result


def validate_contact_form(name: str, email: str, message: str) -> ContactValidation:
    result = ContactValidation()

    if not NAME_PATTERN.fullmatch(name.strip()):
        result.field_errors["name"] = CONTACT_INVALID_NAME
    if not EMAIL_PATTERN.fullmatch(email.strip()):
        result.field_errors["email"] = CONTACT_INVALID_EMAIL
    if len(message.strip()) < MIN_MESSAGE_LENGTH:
        result.field_errors["message"] = CONTACT_MESSAGE_TOO_SHORT

    return result
