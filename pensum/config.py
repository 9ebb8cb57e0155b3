"""
Runtime settings for Pensum.

Values come from the environment, with a project-level .env file loaded
first. Unset variables fall back to the defaults below.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from pensum.tracker import DEFAULT_PROGRESS_DB, DEFAULT_STORAGE_KEY, parse_remaining_terms
from pensum.utils import DEFAULT_CATALOG_PATH


PROJECT_ROOT = Path(__file__).parent.parent


def resolve_path(value: str | Path) -> Path:
    """Expand ~ and anchor relative paths at the project root."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else PROJECT_ROOT / path


@dataclass
class Settings:
    catalog_path: Path = DEFAULT_CATALOG_PATH
    progress_db: Path = DEFAULT_PROGRESS_DB
    storage_key: str = DEFAULT_STORAGE_KEY
    log_level: str = "INFO"
    remaining_terms: int = 1


def load_settings(env_file: Path | None = None) -> Settings:
    """
    Build Settings from PENSUM_* environment variables.

    Relative catalog and database paths are taken from the project root,
    not the current directory.

    Args:
        env_file: .env file to load first (default: PROJECT_ROOT/.env).
            Existing environment variables win over the file.
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    return Settings(
        catalog_path=resolve_path(os.environ.get("PENSUM_CATALOG_PATH") or DEFAULT_CATALOG_PATH),
        progress_db=resolve_path(os.environ.get("PENSUM_PROGRESS_DB") or DEFAULT_PROGRESS_DB),
        storage_key=os.environ.get("PENSUM_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
        log_level=os.environ.get("PENSUM_LOG_LEVEL") or "INFO",
        remaining_terms=parse_remaining_terms(os.environ.get("PENSUM_REMAINING_TERMS", 1)),
    )
