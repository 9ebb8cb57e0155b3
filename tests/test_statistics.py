"""
Statistics engine tests.

Covers the credit formulas, the pending-credits definition and
remaining-terms coercion.
"""

import math

import pytest

from pensum.schemas import Catalog, CompletionState, Course
from pensum.tracker import compute_statistics, parse_remaining_terms


A = CompletionState.APPROVED
P = CompletionState.IN_PROGRESS
N = CompletionState.NOT_TAKEN


class TestParseRemainingTerms:
    """Test remaining-terms coercion."""

    @pytest.mark.parametrize("value,expected", [
        (4, 4),
        ("4", 4),
        (" 3 terms", 3),
        ("2.7", 2),
        (2.9, 2),
        ("+5", 5),
    ])
    def test_valid(self, value, expected):
        assert parse_remaining_terms(value) == expected

    @pytest.mark.parametrize("value", [
        "abc", "", None, 0, "0", -3, "-2", 0.5, float("nan"), float("inf"), True, [], {},
    ])
    def test_invalid_becomes_one(self, value):
        assert parse_remaining_terms(value) == 1


class TestComputeStatistics:
    """Test aggregate metrics."""

    def test_empty_progress(self, catalog):
        stats = compute_statistics(catalog, {})
        assert stats.approved_credits == 0
        assert stats.in_progress_credits == 0
        assert stats.pending_credits == 150
        assert stats.progress_percent == 0.0
        assert stats.average_credits_per_term == 150.0

    def test_approved_course(self, catalog):
        stats = compute_statistics(catalog, {"A": A})
        assert stats.approved_credits == 3
        assert stats.pending_credits == 147
        assert stats.progress_percent == pytest.approx(2.0)

    def test_in_progress_stays_pending(self, catalog):
        stats = compute_statistics(catalog, {"A": A, "B": P})
        assert stats.in_progress_credits == 4
        assert stats.pending_credits == 147

    def test_non_numeric_terms(self, catalog):
        stats = compute_statistics(catalog, {"A": A}, remaining_terms="abc")
        assert stats.remaining_terms == 1
        assert stats.average_credits_per_term == 147.0

    def test_average_is_not_rounded(self, catalog):
        stats = compute_statistics(catalog, {"A": A}, remaining_terms=4)
        assert stats.average_credits_per_term == 147 / 4

        stats = compute_statistics(catalog, {"B": A}, remaining_terms=7)
        assert stats.progress_percent == 100 * 4 / 150
        assert stats.average_credits_per_term == 146 / 7

    def test_unknown_ids_ignored(self, catalog):
        stats = compute_statistics(catalog, {"Z": A, "A": N})
        assert stats.approved_credits == 0
        assert stats.pending_credits == 150

    def test_total_override(self, catalog):
        stats = compute_statistics(catalog, {"A": A, "B": A}, total_career_credits=7)
        assert stats.total_career_credits == 7
        assert stats.pending_credits == 0
        assert stats.progress_percent == 100.0

    def test_total_must_be_positive(self, catalog):
        with pytest.raises(ValueError):
            compute_statistics(catalog, {}, total_career_credits=0)

    def test_approved_plus_pending_is_total(self):
        catalog = Catalog(
            total_career_credits=20,
            courses=[Course(id=f"C{i}", name=f"C{i}", level=1 + i % 3, credits=1 + i % 4) for i in range(8)],
        )
        states = [N, P, A]
        for seed in range(27):
            progress = {f"C{i}": states[(seed + i * i) % 3] for i in range(8)}
            stats = compute_statistics(catalog, progress, remaining_terms=seed)
            assert stats.approved_credits + stats.pending_credits == 20
            assert math.isfinite(stats.average_credits_per_term)

    def test_progress_monotonic_with_approvals(self, catalog):
        progress = {}
        previous = compute_statistics(catalog, progress).progress_percent
        for course_id in ("A", "B"):
            progress[course_id] = P
            in_progress = compute_statistics(catalog, progress).progress_percent
            assert in_progress == previous
            progress[course_id] = A
            current = compute_statistics(catalog, progress).progress_percent
            assert current > previous
            previous = current
