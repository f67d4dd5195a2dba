"""Improvement suggestions derived from a match result."""

from resume_analyzer.skills.models import SkillSet
from resume_analyzer.skills.taxonomy import PROGRAMMING, SOFT_SKILLS, in_category

LOW_MATCH_THRESHOLD = 50
STRONG_MATCH_THRESHOLD = 70
TOP_N = 3

TAILOR_RESUME = "Consider tailoring your resume more specifically to this job description."
ADD_PROGRAMMING_PROJECTS = (
    "Add relevant programming projects or certifications to showcase technical skills."
)
ADD_SOFT_SKILL_EXAMPLES = (
    "Include examples of leadership, teamwork, or communication in your experience section."
)
CUSTOMIZE_COVER_LETTER = (
    "Strong match! Consider customizing your cover letter to highlight your relevant experience."
)


def generate_suggestions(matched: SkillSet, missing: SkillSet, match_percentage: int) -> list[str]:
    """Return advisory messages in a fixed order.

    Each rule is checked on its own; rules that don't apply are skipped.
    """
    suggestions = []

    if match_percentage < LOW_MATCH_THRESHOLD:
        suggestions.append(TAILOR_RESUME)

    if missing:
        suggestions.append(f"Highlight experience with: {', '.join(missing.first(TOP_N))}")

    if any(in_category(skill, PROGRAMMING) for skill in missing):
        suggestions.append(ADD_PROGRAMMING_PROJECTS)

    if any(in_category(skill, SOFT_SKILLS) for skill in missing):
        suggestions.append(ADD_SOFT_SKILL_EXAMPLES)

    if matched:
        suggestions.append(
            f"Great match on: {', '.join(matched.first(TOP_N))} - ensure these are prominently featured."
        )

    if match_percentage >= STRONG_MATCH_THRESHOLD:
        suggestions.append(CUSTOMIZE_COVER_LETTER)

    return suggestions
