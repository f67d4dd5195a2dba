"""Command-line entry point for the resume analyzer."""

import argparse
import json
import logging
import sys

from resume_analyzer.config import AppConfig, default_config, load_config, validate_config
from resume_analyzer.documents.loader import load_document
from resume_analyzer.matching.models import AnalysisRecord, AnalysisResult
from resume_analyzer.pipeline import run_analysis, save_analysis_result, submit_job_description, submit_resume
from resume_analyzer.storage.database import AnalysisDatabase
from resume_analyzer.storage.history import SORT_KEYS, sort_history
from resume_analyzer.utils.logging_config import setup_logging
from resume_analyzer.utils.text_processing import extract_skills
from resume_analyzer.validation.validators import validate_contact_form

logger = logging.getLogger("resume_analyzer")

DEFAULT_CONFIG = "config.yaml"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resume Analyzer - match a resume against a job description",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG,
        help=f"Path to config file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print results as JSON",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    resume = sub.add_parser("resume", help="Validate a resume file and save it as the draft")
    resume.add_argument("path", help="Resume file (.pdf, .txt, .md)")

    job = sub.add_parser("job", help="Validate and save a job description")
    job.add_argument("path", help="Job description file (.pdf, .txt, .md)")
    job.add_argument("--title", required=True, help="Job title")
    job.add_argument("--company", required=True, help="Company name")

    analyze = sub.add_parser("analyze", help="Analyze the saved resume against the saved job")
    analyze.add_argument("--save", action="store_true", help="Save the result to history")

    extract = sub.add_parser("extract", help="Print the skills found in a document")
    extract.add_argument("path")

    history = sub.add_parser("history", help="List saved analyses")
    history.add_argument("--sort", choices=SORT_KEYS, default=None, help="Sort order")

    delete = sub.add_parser("delete", help="Delete one saved analysis")
    delete.add_argument("record_id")

    sub.add_parser("clear-history", help="Delete all saved analyses")
    sub.add_parser("stats", help="Print storage statistics")

    contact = sub.add_parser("contact", help="Validate a contact form submission")
    contact.add_argument("--name", required=True)
    contact.add_argument("--email", required=True)
    contact.add_argument("--message", required=True)

    return parser.parse_args(argv)


def _resolve_config(config_path: str) -> AppConfig:
    try:
        return load_config(config_path)
    except FileNotFoundError:
        if config_path != DEFAULT_CONFIG:
            raise
        return default_config()


def print_errors(errors: list[str]):
    for error in errors:
        print(f"  - {error}")


def print_analysis(result: AnalysisResult):
    print(f"\n=== Match: {result.match_percentage}% ({result.match_level}) ===")
    print(f"Matched skills: {', '.join(result.matched_skills) or 'none'}")
    print(f"Missing skills: {', '.join(result.missing_skills) or 'none'}")
    if result.suggestions:
        print("\nSuggestions:")
        for i, suggestion in enumerate(result.suggestions, 1):
            print(f"  {i}. {suggestion}")
    print()


def print_history(records: list[AnalysisRecord]):
    if not records:
        print("No saved analyses yet.")
        return
    for record in records:
        print(
            f"{record.id}  {record.analyzed_at:%Y-%m-%d %H:%M}  "
            f"[{record.match_percentage:3d}%] {record.job_title} @ {record.company}"
        )


def print_stats(db: AnalysisDatabase):
    stats = db.get_stats()
    print("\n=== Resume Analyzer Statistics ===")
    print(f"Skill taxonomy: v{stats['taxonomy_version']}")
    print(f"Saved analyses: {stats['total_analyses']}")
    print(f"Resume draft saved: {'Yes' if stats['has_resume_draft'] else 'No'}")
    print(f"Job description saved: {'Yes' if stats['has_job_description'] else 'No'}")
    if stats.get("average_match") is not None:
        print(f"Average match: {stats['average_match']}%")
        print(f"Best match: {stats['best_match']}%")
        print(f"Last analysis: {stats['last_analyzed_at']}")
    print()


def run_command(args: argparse.Namespace, config: AppConfig, db: AnalysisDatabase) -> int:
    """Execute one subcommand. Returns the process exit code."""
    if args.command == "resume":
        validation = submit_resume(db, load_document(args.path))
        if args.json:
            print(json.dumps(validation.to_dict(), indent=2))
        elif validation.is_valid:
            print(f"Resume saved. Email: {validation.email_match}  Phone: {validation.phone_match}")
        else:
            print("Resume saved with issues:")
            print_errors(validation.errors)
        return 0 if validation.is_valid else 1

    if args.command == "job":
        validation = submit_job_description(db, args.title, args.company, load_document(args.path))
        if args.json:
            print(json.dumps(validation.to_dict(), indent=2))
        elif validation.is_valid:
            job = db.get_job_description()
            print(f"Job saved. Requirements: {', '.join(job.requirements) or 'none detected'}")
        else:
            print("Job description not saved:")
            print_errors(validation.errors)
        return 0 if validation.is_valid else 1

    if args.command == "analyze":
        result = run_analysis(db)
        if result is None:
            print("Save both a resume and a job description before analyzing.", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print_analysis(result)
        if args.save:
            record = save_analysis_result(db, result, config.analysis.snippet_length)
            print(f"Saved analysis {record.id}")
        return 0

    if args.command == "extract":
        skills = extract_skills(load_document(args.path)).to_list()
        print(json.dumps(skills) if args.json else "\n".join(skills))
        return 0

    if args.command == "history":
        sort_key = args.sort or config.analysis.history_sort
        if sort_key not in SORT_KEYS:
            sort_key = "date-desc"
        records = sort_history(db.get_analysis_history(), sort_key)
        if args.json:
            print(json.dumps([r.to_dict() for r in records], indent=2))
        else:
            print_history(records)
        return 0

    if args.command == "delete":
        if db.delete_analysis(args.record_id):
            print(f"Deleted analysis {args.record_id}")
            return 0
        print(f"No analysis with id {args.record_id}", file=sys.stderr)
        return 1

    if args.command == "clear-history":
        db.clear_analysis_history()
        print("Analysis history cleared.")
        return 0

    if args.command == "stats":
        print_stats(db)
        return 0

    if args.command == "contact":
        validation = validate_contact_form(args.name, args.email, args.message)
        if args.json:
            print(json.dumps(validation.to_dict(), indent=2))
        elif validation.is_valid:
            print("Message looks good.")
        else:
            for name, error in validation.field_errors.items():
                print(f"  {name}: {error}")
        return 0 if validation.is_valid else 1

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    # Load config
    try:
        config = _resolve_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Setup logging
    setup_logging(config.log_dir, config.log_level)

    # Validate config and print warnings
    for w in validate_config(config):
        logger.warning("Config: %s", w)

    try:
        with AnalysisDatabase(config.resolved_database_url()) as db:
            code = run_command(args, config, db)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception:
        logger.exception("Command '%s' failed", args.command)
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
