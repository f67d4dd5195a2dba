"""Fixed skill vocabulary, grouped by category."""

from types import MappingProxyType

TAXONOMY_VERSION = "1.0"

# Category order and term order determine extraction order.
SKILL_CATEGORIES = MappingProxyType({
    "programming": (
        "javascript", "typescript", "python", "java", "c++", "c#", "ruby",
        "go", "rust", "php", "swift", "kotlin", "scala",
    ),
    "frontend": (
        "react", "angular", "vue", "svelte", "html", "css", "sass",
        "tailwind", "bootstrap", "jquery", "webpack", "vite",
    ),
    "backend": (
        "node", "express", "django", "flask", "spring", "rails", "laravel",
        "fastapi", "graphql", "rest", "api",
    ),
    "database": (
        "sql", "mysql", "postgresql", "mongodb", "redis", "elasticsearch",
        "firebase", "dynamodb", "oracle",
    ),
    "cloud": (
        "aws", "azure", "gcp", "docker", "kubernetes", "terraform",
        "jenkins", "ci/cd", "devops",
    ),
    "softSkills": (
        "communication", "leadership", "teamwork", "problem-solving",
        "analytical", "creative", "management", "agile", "scrum",
    ),
})

PROGRAMMING = "programming"
SOFT_SKILLS = "softSkills"


def all_terms() -> list[str]:
    """Every term in taxonomy order."""
    return [term for terms in SKILL_CATEGORIES.values() for term in terms]


def in_category(skill: str, category: str) -> bool:
    return skill.lower() in SKILL_CATEGORIES.get(category, ())
