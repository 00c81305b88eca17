"""
Service wiring

One RecordStore instance is opened per process and handed to every
component that persists state.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import sessionmaker

from johar.analytics import AnalyticsAccumulator
from johar.conversational import FeedbackService, IntentClassifier
from johar.data_sources import SeedLoader, get_seed_loader
from johar.marketplace import MarketService
from johar.planner import ItineraryPlanner
from johar.registry import GuideRegistry
from johar.store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    store: RecordStore
    seeds: SeedLoader
    analytics: AnalyticsAccumulator
    planner: ItineraryPlanner
    classifier: IntentClassifier
    guides: GuideRegistry
    market: MarketService
    feedback: FeedbackService

    def bootstrap(self):
        """First-start defaults: market listings and analytics state"""
        self.market.seed_defaults(self.seeds.load_market_items())
        self.analytics.ensure_initialized()


def build_services(
    session_factory: sessionmaker,
    seeds: Optional[SeedLoader] = None
) -> Services:
    store = RecordStore(session_factory)
    seeds = seeds or get_seed_loader()
    analytics = AnalyticsAccumulator(store)

    return Services(
        store=store,
        seeds=seeds,
        analytics=analytics,
        planner=ItineraryPlanner(),
        classifier=IntentClassifier(seeds.load_sites()),
        guides=GuideRegistry(store, analytics),
        market=MarketService(store, analytics),
        feedback=FeedbackService(store, analytics),
    )


# Singleton instance
_services = None

def get_services() -> Services:
    """Get singleton Services bound to the configured database"""
    global _services
    if _services is None:
        from johar.database import SessionLocal
        _services = build_services(SessionLocal)
        logger.info("Services initialized")
    return _services
