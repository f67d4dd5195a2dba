"""Tests for skill extraction."""

import pytest

from resume_analyzer.skills.taxonomy import all_terms
from resume_analyzer.utils.text_processing import extract_experience, extract_skills, snippet

ALPHABETIC_TERMS = [t for t in all_terms() if t.isalpha()]


class TestExtractSkills:
    def test_basic_skills(self):
        text = "Experience with Python, Java, and Docker in a cloud environment"
        skills = extract_skills(text)
        assert "python" in skills
        assert "java" in skills
        assert "docker" in skills

    def test_case_insensitive(self):
        text = "Worked with KUBERNETES and React.js"
        skills = extract_skills(text)
        assert "kubernetes" in skills
        assert "react" in skills

    def test_go_respects_word_boundaries(self):
        skills = extract_skills("Going forward, our algorithm team is growing")
        assert "go" not in skills

    def test_go_language(self):
        skills = extract_skills("Proficient in Go and Rust programming")
        assert "go" in skills
        assert "rust" in skills

    def test_java_not_found_inside_javascript(self):
        skills = extract_skills("JavaScript developer")
        assert "javascript" in skills
        assert "java" not in skills

    def test_symbol_terms_match_literally(self):
        skills = extract_skills("Expert in C++ and C# development, built CI/CD pipelines.")
        assert "c++" in skills
        assert "c#" in skills
        assert "ci/cd" in skills

    def test_versioned_symbol_terms(self):
        assert "c++" in extract_skills("Modern C++17 and C++20 codebases")
        assert "c#" in extract_skills("Built services in C#10 on .NET 6")

    def test_symbol_terms_need_leading_boundary(self):
        skills = extract_skills("abc++ and abc#")
        assert "c++" not in skills
        assert "c#" not in skills

    def test_hyphenated_term(self):
        assert "problem-solving" in extract_skills("Strong problem-solving skills")

    def test_canonical_lowercase_form(self):
        skills = extract_skills("PostgreSQL and MongoDB")
        assert skills.to_list() == ["postgresql", "mongodb"]

    def test_taxonomy_order(self):
        skills = extract_skills("Docker, then React, then Python")
        assert skills.to_list() == ["python", "react", "docker"]

    def test_experience_scenario(self):
        skills = extract_skills("5+ years of experience with Python and AWS")
        assert "python" in skills
        assert "aws" in skills
        assert "5+ years experience" in skills

    def test_experience_entries_follow_terms(self):
        skills = extract_skills("2 years python")
        assert skills.to_list() == ["python", "2+ years experience"]

    def test_distinct_years_each_produce_an_entry(self):
        skills = extract_skills("3 years of Java, 5 years exp in Python, 3 years of SQL")
        experience = [s for s in skills if s.endswith("years experience")]
        assert experience == ["3+ years experience", "5+ years experience"]

    def test_empty_text(self):
        assert len(extract_skills("")) == 0

    def test_no_skills(self):
        assert not extract_skills("The quick brown fox jumps over the lazy dog")

    def test_upper_case_text_gives_same_skills(self):
        text = "Senior Python/Django engineer, 7+ years of experience with AWS, Docker and CI/CD. Strong Communication."
        assert extract_skills(text) == extract_skills(text.upper())

    def test_repeated_calls_are_identical(self):
        text = "React, Node and MongoDB. 4 years experience."
        first = extract_skills(text)
        second = extract_skills(text)
        assert first == second
        assert first.to_list() == second.to_list()

    @pytest.mark.parametrize("term", ALPHABETIC_TERMS)
    def test_term_found_between_spaces(self, term):
        assert term in extract_skills(f"... {term} ...")

    @pytest.mark.parametrize("term", ALPHABETIC_TERMS)
    def test_term_not_found_inside_word(self, term):
        assert term not in extract_skills(f"prefix{term}suffix")


class TestExtractExperience:
    def test_with_plus_and_of(self):
        assert extract_experience("10+ years of experience") == ["10+ years experience"]

    def test_singular_year(self):
        assert extract_experience("1 year exp") == ["1+ years experience"]

    def test_digits_kept_verbatim(self):
        assert extract_experience("05 years") == ["05+ years experience"]

    def test_non_ascii_digits_ignored(self):
        assert extract_experience("\u0665 years of experience") == []

    def test_no_experience(self):
        assert extract_experience("Great opportunity for growth") == []


class TestSnippet:
    def test_truncates(self):
        assert snippet("abcdef", 3) == "abc"

    def test_short_text_unchanged(self):
        assert snippet("abc", 200) == "abc"
