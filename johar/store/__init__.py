"""
Persistence Layer - whole-collection record storage
"""

from .record_store import RecordStore, Record, parse_record, parse_records

__all__ = [
    "RecordStore",
    "Record",
    "parse_record",
    "parse_records",
]
