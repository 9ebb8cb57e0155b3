"""
ProgressStore - Persist course completion states in ~/.pensum/progress.db.

The whole progress record lives under a single key of a small key-value
table, serialized as a JSON object {course_id: state}:
- Absent key loads as an empty record
- Malformed values load as an empty record (logged, never raised)
- Every save is written and committed before it returns
"""

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from pensum.schemas import CompletionState, ProgressRecord


logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_DIR = Path.home() / ".pensum"
DEFAULT_PROGRESS_DB = DEFAULT_PROGRESS_DIR / "progress.db"
DEFAULT_STORAGE_KEY = "pensum_manager_states"


class PersistenceReadError(ValueError):
    """Persisted progress could not be decoded."""


def decode_record(raw: str) -> ProgressRecord:
    """
    Parse a serialized progress record.

    Raises:
        PersistenceReadError: If the value is not a JSON object mapping
            string ids to known state literals
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise PersistenceReadError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise PersistenceReadError(f"Expected a JSON object, got {type(data).__name__}")

    record: ProgressRecord = {}
    for course_id, value in data.items():
        try:
            record[course_id] = CompletionState(value)
        except ValueError as e:
            raise PersistenceReadError(f"Unknown state for {course_id!r}: {value!r}") from e
    return record


def encode_record(record: ProgressRecord) -> str:
    """Serialize a progress record to its JSON form."""
    return json.dumps({cid: CompletionState(state).value for cid, state in record.items()})


class ProgressStore:
    """
    Durable boundary for the progress record.

    Holds the loaded record in memory and mirrors every change to SQLite.
    No business rules live here; the controller decides what to write.
    """

    def __init__(self, db_path: Optional[Path] = None, storage_key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize progress store.

        Args:
            db_path: Path to progress.db (default: ~/.pensum/progress.db)
            storage_key: Namespace key the record is stored under
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_PROGRESS_DB
        self.storage_key = storage_key
        self._record: ProgressRecord = {}
        self._ensure_database()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT
                );
            """)
            conn.commit()
        except sqlite3.DatabaseError as e:
            # load() falls back to an empty record; writes will still raise
            logger.warning(f"Progress database {self.db_path} is unusable: {e}")
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    # -------------------------------------------------------------------------
    # Raw access
    # -------------------------------------------------------------------------

    def read_raw(self) -> Optional[str]:
        """Return the stored value for the namespace key, or None if absent."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?",
                (self.storage_key,)
            )
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def write_raw(self, value: str):
        """Store a value under the namespace key."""
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO kv_store (key, value, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                     value = excluded.value,
                     updated_at = excluded.updated_at""",
                (self.storage_key, value, now)
            )
            conn.commit()
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Record
    # -------------------------------------------------------------------------

    @property
    def record(self) -> ProgressRecord:
        """Copy of the in-memory record."""
        return dict(self._record)

    def load(self) -> ProgressRecord:
        """
        Read the persisted record into memory.

        Returns:
            The loaded record; empty if nothing is stored or the stored
            value cannot be decoded
        """
        try:
            raw = self.read_raw()
        except sqlite3.DatabaseError as e:
            logger.warning(f"Could not read progress from {self.db_path}: {e}")
            raw = None

        if raw is None:
            self._record = {}
        else:
            try:
                self._record = decode_record(raw)
            except PersistenceReadError as e:
                logger.warning(f"Ignoring malformed progress under {self.storage_key!r}: {e}")
                self._record = {}

        logger.debug(f"Loaded {len(self._record)} course states")
        return self.record

    def save(self, record: ProgressRecord):
        """
        Persist a full record, then adopt it as the in-memory record.

        A failed write raises sqlite3.Error and leaves memory untouched.
        """
        normalized = {cid: CompletionState(state) for cid, state in record.items()}
        self.write_raw(encode_record(normalized))
        self._record = normalized

    def get(self, course_id: str) -> CompletionState:
        """State for a course; NOT_TAKEN when it has no entry."""
        return self._record.get(course_id, CompletionState.NOT_TAKEN)

    def set(self, course_id: str, state: CompletionState):
        """Persist a single state change."""
        record = self.record
        record[course_id] = CompletionState(state)
        self.save(record)

    def clear(self):
        """Delete the persisted record for this namespace."""
        conn = self._get_connection()
        try:
            conn.execute(
                "DELETE FROM kv_store WHERE key = ?",
                (self.storage_key,)
            )
            conn.commit()
        finally:
            conn.close()
        self._record = {}
