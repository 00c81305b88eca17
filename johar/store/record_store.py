"""
RecordStore - Persisted Collections

Named collections of records (market_items, transactions, guides,
analytics, feedback). Each collection is loaded and saved whole; a save is
a single committed write, so readers never see a half-written collection.

Storage that is missing or corrupt reads as an empty collection. The
failure is logged, never raised to the caller.
"""

import json
import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from johar.database import get_db_context
from johar.models.database import CollectionRecord

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Model = TypeVar("Model", bound=BaseModel)


def parse_record(model: Type[Model], record: Record, collection: str) -> Optional[Model]:
    """Validate a stored record; None (logged) if it does not fit the model"""
    try:
        return model.model_validate(record)
    except ValidationError as e:
        logger.warning(f"Skipping invalid record in '{collection}': {e.error_count()} error(s)")
        return None


def parse_records(model: Type[Model], records: Iterable[Record], collection: str) -> List[Model]:
    parsed = (parse_record(model, r, collection) for r in records)
    return [p for p in parsed if p is not None]


class RecordStore:
    """Load/save mapping of collection names to ordered record sequences"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()
        logger.info("RecordStore initialized")

    def _lock_for(self, name: str) -> threading.RLock:
        with self._locks_guard:
            if name not in self._locks:
                self._locks[name] = threading.RLock()
            return self._locks[name]

    # ========== WHOLE-COLLECTION ACCESS ==========

    def load(self, name: str) -> List[Record]:
        """Return a fresh copy of the collection ([] if absent or unreadable)"""
        try:
            with get_db_context(self._session_factory) as db:
                row = db.get(CollectionRecord, name)
                payload = row.payload if row else None
        except SQLAlchemyError as e:
            logger.error(f"Storage unavailable while loading '{name}': {e}")
            return []

        if payload is None:
            return []

        try:
            records = json.loads(payload)
        except (TypeError, ValueError) as e:
            logger.warning(f"Corrupt collection '{name}', treating as empty: {e}")
            return []

        if not isinstance(records, list):
            logger.warning(f"Collection '{name}' is not a list, treating as empty")
            return []

        valid = [r for r in records if isinstance(r, dict)]
        if len(valid) != len(records):
            logger.warning(f"Dropped {len(records) - len(valid)} malformed record(s) from '{name}'")

        return valid

    def save(self, name: str, records: List[Record]) -> bool:
        """Replace the whole collection in one commit"""
        payload = json.dumps(list(records), default=str)

        try:
            with get_db_context(self._session_factory) as db:
                row = db.get(CollectionRecord, name)
                if row is None:
                    db.add(CollectionRecord(name=name, payload=payload))
                else:
                    row.payload = payload
        except SQLAlchemyError as e:
            logger.error(f"Failed to save collection '{name}': {e}")
            return False

        logger.debug(f"Saved {len(records)} records to '{name}'")
        return True

    def exists(self, name: str) -> bool:
        """Whether the collection has ever been saved"""
        try:
            with get_db_context(self._session_factory) as db:
                return db.get(CollectionRecord, name) is not None
        except SQLAlchemyError as e:
            logger.error(f"Storage unavailable while checking '{name}': {e}")
            return False

    @contextmanager
    def edit(self, name: str) -> Iterator[List[Record]]:
        """
        Load, let the caller mutate, then save, holding the collection lock.

        Nothing is saved if the block raises.
        """
        with self._lock_for(name):
            records = self.load(name)
            yield records
            self.save(name, records)

    # ========== RECORD HELPERS ==========

    def find(self, name: str, key: str, value: Any) -> Optional[Record]:
        """Find first record whose `key` equals `value`"""
        for record in self.load(name):
            if record.get(key) == value:
                return record
        return None

    def append(self, name: str, record: Record) -> Record:
        """Append a record to the end of the collection"""
        with self.edit(name) as records:
            records.append(record)
        return record

    def update(
        self,
        name: str,
        key: str,
        value: Any,
        fn: Callable[[Record], Record]
    ) -> Optional[Record]:
        """Replace the first matching record with fn(record); None if not found"""
        with self.edit(name) as records:
            for idx, record in enumerate(records):
                if record.get(key) == value:
                    records[idx] = fn(record)
                    return records[idx]

        logger.warning(f"No record with {key}={value!r} in '{name}'")
        return None
