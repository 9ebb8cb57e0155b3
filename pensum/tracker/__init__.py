"""
Pensum Tracker - Runtime components for tracking curriculum progress.

This module provides:
- ProgressStore: Persist course states
- compute_statistics: Derive credit totals and pacing
- CourseStateController: Apply state changes and notify observers
"""

from .store import (
    ProgressStore,
    PersistenceReadError,
    decode_record,
    encode_record,
    DEFAULT_PROGRESS_DIR,
    DEFAULT_PROGRESS_DB,
    DEFAULT_STORAGE_KEY,
)

from .statistics import (
    compute_statistics,
    parse_remaining_terms,
)

from .controller import (
    CourseStateController,
    CourseCard,
    LevelColumn,
)

__all__ = [
    # Store
    "ProgressStore",
    "PersistenceReadError",
    "decode_record",
    "encode_record",
    "DEFAULT_PROGRESS_DIR",
    "DEFAULT_PROGRESS_DB",
    "DEFAULT_STORAGE_KEY",
    # Statistics
    "compute_statistics",
    "parse_remaining_terms",
    # Controller
    "CourseStateController",
    "CourseCard",
    "LevelColumn",
]
