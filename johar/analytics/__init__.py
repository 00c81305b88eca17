"""
Analytics - persisted usage counters
"""

from .accumulator import AnalyticsAccumulator, merge_event, default_state

__all__ = [
    "AnalyticsAccumulator",
    "merge_event",
    "default_state",
]
