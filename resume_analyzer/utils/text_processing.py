"""Skill extraction and text utilities."""

import logging
import re

from resume_analyzer.skills.models import SkillSet
from resume_analyzer.skills.taxonomy import all_terms

logger = logging.getLogger("resume_analyzer.extraction")


def _term_pattern(term: str) -> re.Pattern:
    # A trailing boundary only applies when the term ends in a word character,
    # so "c++" and "c#" match before whitespace as well as in "c++17" or "c#10".
    trailing = r"(?!\w)" if term[-1].isalnum() else ""
    return re.compile(rf"(?<!\w){re.escape(term)}{trailing}", re.ASCII)


# Compiled once; the taxonomy never changes at run time.
SKILL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (term, _term_pattern(term)) for term in all_terms()
)

EXPERIENCE_PATTERN = re.compile(
    r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)?",
    re.IGNORECASE | re.ASCII,
)


def experience_label(years: str) -> str:
    return f"{years}+ years experience"


def extract_experience(text: str) -> list[str]:
    """Synthetic experience skills for every 'N years' phrase, in text order."""
    return [experience_label(m.group(1)) for m in EXPERIENCE_PATTERN.finditer(text)]


def extract_skills(text: str) -> SkillSet:
    """Extract recognized skills from text.

    Taxonomy terms come first, in taxonomy order, followed by
    "N+ years experience" entries in the order they appear.
    """
    text_lower = text.lower()
    found = SkillSet()

    for term, pattern in SKILL_PATTERNS:
        if pattern.search(text_lower):
            found.add(term)

    for label in extract_experience(text_lower):
        found.add(label)

    logger.debug("Extracted %d skills from %d characters", len(found), len(text))
    return found


def snippet(text: str, length: int = 200) -> str:
    """Leading excerpt of a document."""
    return text[:max(length, 0)]
