"""
Database connection and initialization
"""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from johar.config import settings
from johar.models.database import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: Optional[str] = None, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across threads"""
    url = database_url or settings.DATABASE_URL

    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo,
        )

    return create_engine(
        url,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
        echo=echo,
    )


# Create engine
engine = build_engine(echo=settings.DEBUG)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Optional[Engine] = None):
    """Initialize database - create all tables"""
    target = bind or engine
    logger.info("🔧 Initializing database...")
    Base.metadata.create_all(bind=target)
    logger.info("✅ Database initialized")


@contextmanager
def get_db_context(factory: sessionmaker = SessionLocal) -> Generator[Session, None, None]:
    """Context manager for database sessions"""
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    # Direct execution for setup
    logging.basicConfig(level=logging.INFO)
    init_db()
    print(f"📍 Database URL: {settings.DATABASE_URL}")
