"""Tests for suggestion generation."""

from resume_analyzer.matching.suggestions import (
    ADD_PROGRAMMING_PROJECTS,
    ADD_SOFT_SKILL_EXAMPLES,
    CUSTOMIZE_COVER_LETTER,
    TAILOR_RESUME,
    generate_suggestions,
)
from resume_analyzer.skills.models import SkillSet


class TestGenerateSuggestions:
    def test_low_match_with_missing_docker(self):
        suggestions = generate_suggestions(SkillSet(), SkillSet(["docker"]), 30)
        assert suggestions[0] == TAILOR_RESUME
        assert suggestions[1] == "Highlight experience with: docker"
        assert suggestions == [TAILOR_RESUME, "Highlight experience with: docker"]

    def test_only_first_three_missing_named(self):
        missing = SkillSet(["sql", "aws", "redis", "docker"])
        suggestions = generate_suggestions(SkillSet(), missing, 60)
        assert suggestions == ["Highlight experience with: sql, aws, redis"]

    def test_missing_programming_skill(self):
        suggestions = generate_suggestions(SkillSet(), SkillSet(["python"]), 60)
        assert ADD_PROGRAMMING_PROJECTS in suggestions

    def test_missing_soft_skill(self):
        suggestions = generate_suggestions(SkillSet(), SkillSet(["leadership"]), 60)
        assert ADD_SOFT_SKILL_EXAMPLES in suggestions
        assert ADD_PROGRAMMING_PROJECTS not in suggestions

    def test_category_check_is_case_insensitive(self):
        suggestions = generate_suggestions(SkillSet(), SkillSet(["Python"]), 60)
        assert ADD_PROGRAMMING_PROJECTS in suggestions

    def test_experience_entries_have_no_category(self):
        suggestions = generate_suggestions(SkillSet(), SkillSet(["5+ years experience"]), 60)
        assert suggestions == ["Highlight experience with: 5+ years experience"]

    def test_strong_match(self):
        suggestions = generate_suggestions(SkillSet(["python", "aws", "sql", "redis"]), SkillSet(), 100)
        assert suggestions == [
            "Great match on: python, aws, sql - ensure these are prominently featured.",
            CUSTOMIZE_COVER_LETTER,
        ]

    def test_fixed_rule_order(self):
        suggestions = generate_suggestions(
            SkillSet(["docker"]), SkillSet(["python", "leadership"]), 33,
        )
        assert suggestions == [
            TAILOR_RESUME,
            "Highlight experience with: python, leadership",
            ADD_PROGRAMMING_PROJECTS,
            ADD_SOFT_SKILL_EXAMPLES,
            "Great match on: docker - ensure these are prominently featured.",
        ]

    def test_thresholds(self):
        assert TAILOR_RESUME in generate_suggestions(SkillSet(), SkillSet(), 49)
        assert TAILOR_RESUME not in generate_suggestions(SkillSet(), SkillSet(), 50)
        assert CUSTOMIZE_COVER_LETTER not in generate_suggestions(SkillSet(), SkillSet(), 69)
        assert CUSTOMIZE_COVER_LETTER in generate_suggestions(SkillSet(), SkillSet(), 70)

    def test_empty_inputs(self):
        assert generate_suggestions(SkillSet(), SkillSet(), 0) == [TAILOR_RESUME]
        assert generate_suggestions(SkillSet(), SkillSet(), 60) == []
