"""
Progress tracking schemas for Pensum.

Defines the per-course completion state and the derived statistics:
- CompletionState with its fixed cyclic order
- ProgressRecord mapping course ids to states
- Statistics snapshot computed from catalog + progress
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class CompletionState(str, Enum):
    """Per-course status. Values are the persisted literals."""
    NOT_TAKEN = "no-cursada"
    IN_PROGRESS = "en-curso"
    APPROVED = "aprobada"

    def successor(self) -> "CompletionState":
        """Next state in the cycle NOT_TAKEN -> IN_PROGRESS -> APPROVED -> NOT_TAKEN."""
        order = list(CompletionState)
        return order[(order.index(self) + 1) % len(order)]


# course id -> state; ids missing from the mapping are NOT_TAKEN
ProgressRecord = dict[str, CompletionState]


class Statistics(BaseModel):
    """
    Aggregate metrics derived from the catalog and a progress record.

    Values are exact; rounding belongs to the display layer.
    pending_credits is total minus approved only (in-progress courses are
    still pending).
    """
    model_config = ConfigDict(frozen=True)

    approved_credits: int = Field(..., ge=0)
    pending_credits: int
    in_progress_credits: int = Field(..., ge=0)
    progress_percent: float
    average_credits_per_term: float
    remaining_terms: int = Field(default=1, ge=1)
    total_career_credits: int = Field(..., gt=0)
