"""YAML config loading and validation."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resume_analyzer.storage.history import SORT_KEYS

DATABASE_URL_ENV = "RESUME_ANALYZER_DATABASE_URL"


@dataclass
class StorageConfig:
    database_url: str = ""  # empty = SQLite file under data_dir


@dataclass
class AnalysisConfig:
    snippet_length: int = 200
    history_sort: str = "date-desc"


@dataclass
class AppConfig:
    storage: StorageConfig = field(default_factory=StorageConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    data_dir: str = "data"
    log_dir: str = "logs"
    log_level: str = "INFO"

    def resolved_database_url(self) -> str:
        """Configured database URL, or the default SQLite file in data_dir."""
        if self.storage.database_url:
            return self.storage.database_url
        return f"sqlite:///{Path(self.data_dir) / 'resume_analyzer.db'}"


def _normalize_database_url(url: str) -> str:
    # Hosted Postgres often hands out postgres:// but SQLAlchemy 2.x requires postgresql://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and adjust your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Storage (env var takes precedence)
    storage_raw = raw.get("storage", {})
    config.storage = StorageConfig(
        database_url=_normalize_database_url(
            os.environ.get(DATABASE_URL_ENV, storage_raw.get("database_url", ""))
        ),
    )

    # Analysis
    analysis_raw = raw.get("analysis", {})
    config.analysis = AnalysisConfig(
        snippet_length=analysis_raw.get("snippet_length", 200),
        history_sort=analysis_raw.get("history_sort", "date-desc"),
    )

    config.data_dir = raw.get("data_dir", "data")
    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = str(raw.get("log_level", "INFO")).upper()

    return config


def default_config() -> AppConfig:
    """Defaults, with the database URL env var still honored."""
    config = AppConfig()
    env_url = os.environ.get(DATABASE_URL_ENV, "")
    if env_url:
        config.storage.database_url = _normalize_database_url(env_url)
    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if config.analysis.snippet_length <= 0:
        warnings.append("analysis.snippet_length must be positive - saved analyses will have empty snippets")

    if config.analysis.history_sort not in SORT_KEYS:
        warnings.append(
            f"Unknown analysis.history_sort '{config.analysis.history_sort}' - falling back to date-desc"
        )

    if not isinstance(logging.getLevelName(config.log_level), int):
        warnings.append(f"Unknown log_level '{config.log_level}' - using INFO")

    return warnings
