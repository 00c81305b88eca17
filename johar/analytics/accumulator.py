"""
AnalyticsAccumulator - Best-effort usage counters

A single persisted aggregate in the `analytics` collection. Numeric event
values are added to the stored totals, anything else replaces the stored
value. Failures are logged and never reach the caller's primary operation.
"""

import logging
from numbers import Number
from typing import Any, Dict, Mapping

from johar.models.schemas import AnalyticsState
from johar.store import RecordStore

logger = logging.getLogger(__name__)

ANALYTICS = "analytics"


def is_numeric(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def merge_event(state: Dict[str, Any], event: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new state with `event` applied"""
    merged = dict(state)
    for key, value in event.items():
        if is_numeric(value):
            current = merged.get(key)
            merged[key] = (current if is_numeric(current) else 0) + value
        else:
            merged[key] = value
    return merged


def default_state() -> Dict[str, Any]:
    return AnalyticsState().model_dump()


class AnalyticsAccumulator:
    """Process-wide counters merged into persisted state on each event"""

    def __init__(self, store: RecordStore):
        self.store = store

    def _current(self, records) -> Dict[str, Any]:
        state = default_state()
        if records and isinstance(records[0], dict):
            state.update(records[0])
        return state

    def record(self, event: Mapping[str, Any]) -> None:
        """Apply an event to the persisted aggregate; never raises"""
        try:
            with self.store.edit(ANALYTICS) as records:
                state = merge_event(self._current(records), event)
                records[:] = [state]
        except Exception as e:
            logger.error(f"Analytics update failed for {dict(event)!r}: {e}")

    def snapshot(self) -> Dict[str, Any]:
        """Current aggregate with defaults filled in"""
        return self._current(self.store.load(ANALYTICS))

    def ensure_initialized(self) -> None:
        if not self.store.exists(ANALYTICS):
            self.record({})
            logger.info("📊 Analytics initialized with defaults")
