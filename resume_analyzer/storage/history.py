"""Sort orders for the analysis history view."""

from resume_analyzer.matching.models import AnalysisRecord

SORT_KEYS = ("date-desc", "date-asc", "match-desc", "match-asc")


def sort_by_date(history: list[AnalysisRecord], ascending: bool = False) -> list[AnalysisRecord]:
    return sorted(history, key=lambda r: r.analyzed_at, reverse=not ascending)


def sort_by_match(history: list[AnalysisRecord], ascending: bool = False) -> list[AnalysisRecord]:
    return sorted(history, key=lambda r: r.match_percentage, reverse=not ascending)


def sort_history(history: list[AnalysisRecord], sort_key: str = "date-desc") -> list[AnalysisRecord]:
    """Return a new list ordered by one of SORT_KEYS. The input is left untouched."""
    if sort_key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_key} (expected one of: {', '.join(SORT_KEYS)})")

    field_name, direction = sort_key.split("-")
    ascending = direction == "asc"
    if field_name == "date":
        return sort_by_date(history, ascending)
    return sort_by_match(history, ascending)
