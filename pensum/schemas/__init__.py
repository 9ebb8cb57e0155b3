"""
Pensum Schemas - Pydantic models for the curriculum progress tracker.

This module exports all schema classes for:
- Course: course definitions and the curriculum catalog
- Progress: completion states and derived statistics
"""

# Course schemas
from .course import (
    Course,
    Catalog,
    DEFAULT_TOTAL_CAREER_CREDITS,
)

# Progress schemas
from .progress import (
    CompletionState,
    ProgressRecord,
    Statistics,
)

__all__ = [
    # Course
    'Course',
    'Catalog',
    'DEFAULT_TOTAL_CAREER_CREDITS',
    # Progress
    'CompletionState',
    'ProgressRecord',
    'Statistics',
]
