"""
CourseStateController - Single entry point for course state changes.

Provides:
- Cycle / reset / set operations on course states
- An in-memory card view kept in lockstep with the persisted record
- Statistics recomputation after every change
- Observer callbacks for the rendering layer
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from pensum.schemas import Catalog, CompletionState, Course, Statistics

from .statistics import compute_statistics
from .store import ProgressStore


logger = logging.getLogger(__name__)

StateObserver = Callable[[str, CompletionState], None]
StatisticsObserver = Callable[[Statistics], None]


@dataclass(frozen=True)
class CourseCard:
    """Course with its current state, as shown on the board."""
    course: Course
    state: CompletionState

    @property
    def id(self) -> str:
        return self.course.id


@dataclass
class LevelColumn:
    """All cards for one academic level."""
    level: int
    cards: list[CourseCard]
    approved_count: int
    total_count: int

    @property
    def credits(self) -> int:
        return sum(card.course.credits for card in self.cards)


class CourseStateController:
    """
    Orchestrate course state transitions.

    Combines the Catalog (what exists) with the ProgressStore (what the
    student has done). Every mutation runs persist -> update cards ->
    recompute statistics -> notify observers, in that order, before it
    returns.
    """

    def __init__(self, catalog: Catalog, store: ProgressStore, remaining_terms=1):
        """
        Initialize controller and synchronize with persisted progress.

        Args:
            catalog: Curriculum catalog (read-only)
            store: ProgressStore used for every write
            remaining_terms: Raw remaining-terms input for pacing statistics
        """
        self.catalog = catalog
        self.store = store
        self._remaining_terms = remaining_terms
        self._cards: dict[str, CourseCard] = {}
        self._statistics: Optional[Statistics] = None
        self._state_observers: list[StateObserver] = []
        self._statistics_observers: list[StatisticsObserver] = []
        self.reload()

    # -------------------------------------------------------------------------
    # Synchronization
    # -------------------------------------------------------------------------

    def reload(self) -> Statistics:
        """Re-read persisted progress and rebuild cards and statistics."""
        self.store.load()
        self._rebuild_cards()
        self._statistics = self._compute()
        logger.info(
            f"Synchronized {len(self.catalog)} courses "
            f"({self._statistics.approved_credits} approved credits)"
        )
        return self._statistics

    def _rebuild_cards(self):
        self._cards = {
            course.id: CourseCard(course=course, state=self.store.get(course.id))
            for course in self.catalog.courses
        }

    def _compute(self) -> Statistics:
        return compute_statistics(self.catalog, self.store.record, self._remaining_terms)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def statistics(self) -> Statistics:
        """Last computed statistics snapshot."""
        return self._statistics

    @property
    def remaining_terms(self):
        """Raw remaining-terms input as last supplied."""
        return self._remaining_terms

    def state_of(self, course_id: str) -> CompletionState:
        """Current state of a course (NOT_TAKEN for unknown ids)."""
        return self.store.get(course_id)

    def card(self, course_id: str) -> Optional[CourseCard]:
        return self._cards.get(course_id)

    def cards(self) -> list[CourseCard]:
        """All cards in catalog order."""
        return [self._cards[cid] for cid in self.catalog.ids]

    def cards_for_level(self, level: int) -> list[CourseCard]:
        return [self._cards[c.id] for c in self.catalog.courses_for_level(level)]

    def get_board(self) -> list[LevelColumn]:
        """Cards grouped into one column per level, ascending."""
        board = []
        for level in self.catalog.levels():
            cards = self.cards_for_level(level)
            board.append(LevelColumn(
                level=level,
                cards=cards,
                approved_count=sum(1 for c in cards if c.state == CompletionState.APPROVED),
                total_count=len(cards),
            ))
        return board

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def on_state_change(self, callback: StateObserver) -> Callable[[], None]:
        """
        Register a callback receiving (course_id, new_state) after each change.

        Returns:
            Function that unregisters the callback
        """
        self._state_observers.append(callback)
        return lambda: self._remove(self._state_observers, callback)

    def on_statistics(self, callback: StatisticsObserver) -> Callable[[], None]:
        """
        Register a callback receiving every recomputed Statistics snapshot.

        Returns:
            Function that unregisters the callback
        """
        self._statistics_observers.append(callback)
        return lambda: self._remove(self._statistics_observers, callback)

    @staticmethod
    def _remove(observers: list, callback):
        if callback in observers:
            observers.remove(callback)

    def _emit_state(self, course_id: str, state: CompletionState):
        for callback in list(self._state_observers):
            callback(course_id, state)

    def _emit_statistics(self):
        for callback in list(self._statistics_observers):
            callback(self._statistics)

    # -------------------------------------------------------------------------
    # State Actions
    # -------------------------------------------------------------------------

    def set_state(
        self,
        course_id: str,
        new_state: Union[CompletionState, str],
    ) -> Optional[CompletionState]:
        """
        Set a course's state.

        Unknown course ids are ignored so stale references cannot break
        the caller.

        Args:
            course_id: Catalog course id
            new_state: CompletionState or its literal value

        Returns:
            The new state, or None if the id is not in the catalog

        Raises:
            ValueError: If new_state is not a valid state literal for a known course
        """
        course = self.catalog.get(course_id)
        if course is None:
            logger.debug(f"Ignoring state change for unknown course {course_id!r}")
            return None

        state = CompletionState(new_state)

        self.store.set(course_id, state)
        self._cards[course_id] = CourseCard(course=course, state=state)
        self._statistics = self._compute()
        logger.info(f"{course_id} -> {state.value}")

        self._emit_state(course_id, state)
        self._emit_statistics()
        return state

    def cycle(self, course_id: str) -> Optional[CompletionState]:
        """Advance a course to the next state in the cycle."""
        return self.set_state(course_id, self.state_of(course_id).successor())

    def reset(self, course_id: str) -> Optional[CompletionState]:
        """Return a course to NOT_TAKEN."""
        return self.set_state(course_id, CompletionState.NOT_TAKEN)

    def reset_all(self):
        """Clear all progress for this curriculum."""
        previous = {cid: card.state for cid, card in self._cards.items()}

        self.store.clear()
        self._rebuild_cards()
        self._statistics = self._compute()
        logger.info("Reset all course states")

        for course_id in self.catalog.ids:
            if previous[course_id] != CompletionState.NOT_TAKEN:
                self._emit_state(course_id, CompletionState.NOT_TAKEN)
        self._emit_statistics()

    def set_remaining_terms(self, value) -> Statistics:
        """Update the remaining-terms input and recompute statistics."""
        self._remaining_terms = value
        self._statistics = self._compute()
        self._emit_statistics()
        return self._statistics
