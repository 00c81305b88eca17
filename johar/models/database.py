"""
SQLAlchemy database models for the Johar backend

Every logical collection (market_items, transactions, guides, analytics,
feedback) is persisted as a single row holding the whole ordered sequence
as JSON text, so a save is always one full-collection replace.
"""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class CollectionRecord(Base):
    """One named collection and its serialized records"""
    __tablename__ = "collections"

    name = Column(String(64), primary_key=True)

    # JSON array, decoded by the RecordStore (kept as text so a corrupt
    # payload is detectable instead of failing inside the driver)
    payload = Column(Text, nullable=False, default="[]")

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<CollectionRecord {self.name}>"
