import pytest
from sqlalchemy.orm import sessionmaker

from johar.analytics import AnalyticsAccumulator
from johar.database import build_engine, init_db
from johar.data_sources import SeedLoader
from johar.services import build_services
from johar.store import RecordStore


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def store(session_factory):
    return RecordStore(session_factory)


@pytest.fixture
def broken_store():
    """Store whose database has no tables at all"""
    engine = build_engine("sqlite://")
    yield RecordStore(sessionmaker(bind=engine))
    engine.dispose()


@pytest.fixture
def analytics(store):
    return AnalyticsAccumulator(store)


@pytest.fixture
def seeds():
    return SeedLoader()


@pytest.fixture
def services(session_factory, seeds):
    services = build_services(session_factory, seeds)
    services.bootstrap()
    return services


@pytest.fixture
def client(services):
    from fastapi.testclient import TestClient
    from johar.main import app
    from johar.services import get_services

    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()
