"""
Catalog loader utility for Pensum.

Loads the YAML curriculum catalog from the data/ directory.
"""

from pathlib import Path
from typing import Any
import yaml

from pensum.schemas import Catalog


# Default catalog file (relative to project root)
DEFAULT_CATALOG_PATH = Path(__file__).parent.parent.parent / "data" / "pensum.yaml"


def read_catalog_data(path: Path | None = None) -> dict[str, Any]:
    """
    Read the raw catalog YAML.

    Args:
        path: Optional catalog file (default: data/pensum.yaml)

    Returns:
        Dict with keys:
        - name: curriculum name
        - total_career_credits: credits required for the degree
        - courses: list of {id, name, level, credits, reference_document}

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = Path(path) if path else DEFAULT_CATALOG_PATH

    if not file_path.exists():
        raise FileNotFoundError(f"Catalog not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_catalog(path: Path | None = None) -> Catalog:
    """
    Load and validate the curriculum catalog.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If a course is invalid or ids repeat
    """
    return Catalog.model_validate(read_catalog_data(path))
