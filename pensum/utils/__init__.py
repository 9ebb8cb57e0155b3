"""Pensum utilities."""

from .catalog_loader import load_catalog, read_catalog_data, DEFAULT_CATALOG_PATH
from .logging_setup import configure_logging, LOG_FORMAT

__all__ = [
    "load_catalog",
    "read_catalog_data",
    "DEFAULT_CATALOG_PATH",
    "configure_logging",
    "LOG_FORMAT",
]
