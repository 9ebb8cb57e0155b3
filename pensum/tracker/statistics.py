"""
Statistics engine - derive credit totals and pacing from catalog + progress.

Pure functions only; nothing here mutates progress.
"""

import logging
import math
import re
from typing import Optional

from pensum.schemas import Catalog, CompletionState, ProgressRecord, Statistics


logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_remaining_terms(value) -> int:
    """
    Coerce a user-supplied remaining-terms value to a positive integer.

    Strings are read by their leading integer ("3 terms" -> 3, "2.7" -> 2),
    floats are truncated. Anything non-numeric or <= 0 becomes 1.
    """
    terms = None
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        terms = value
    elif isinstance(value, float):
        terms = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        terms = int(match.group(1)) if match else None

    if terms is None or terms <= 0:
        logger.debug(f"Invalid remaining terms {value!r}, using 1")
        return 1
    return terms


def compute_statistics(
    catalog: Catalog,
    progress: ProgressRecord,
    remaining_terms=1,
    total_career_credits: Optional[int] = None,
) -> Statistics:
    """
    Compute aggregate metrics.

    Args:
        catalog: Curriculum catalog
        progress: Course id -> state; missing ids count as NOT_TAKEN,
            ids not in the catalog are ignored
        remaining_terms: Raw remaining-terms input (see parse_remaining_terms)
        total_career_credits: Override for the catalog's career total

    Returns:
        Statistics snapshot with unrounded values
    """
    total = total_career_credits if total_career_credits is not None else catalog.total_career_credits
    if total <= 0:
        raise ValueError(f"total_career_credits must be > 0, got {total}")

    approved = 0
    in_progress = 0
    for course in catalog.courses:
        state = progress.get(course.id, CompletionState.NOT_TAKEN)
        if state == CompletionState.APPROVED:
            approved += course.credits
        elif state == CompletionState.IN_PROGRESS:
            in_progress += course.credits

    terms = parse_remaining_terms(remaining_terms)
    pending = total - approved

    return Statistics(
        approved_credits=approved,
        pending_credits=pending,
        in_progress_credits=in_progress,
        progress_percent=100 * approved / total,
        average_credits_per_term=pending / terms,
        remaining_terms=terms,
        total_career_credits=total,
    )
