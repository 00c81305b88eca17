"""
MarketService - Local handicraft and homestay listings

Listings live in `market_items`; purchases append to the `transactions`
log. Payment is simulated: a purchase only records a transaction id.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from johar.models.schemas import MarketItem, Transaction
from johar.store import RecordStore, parse_record, parse_records
from johar.utils.ids import generate_item_id, generate_tx_id

logger = logging.getLogger(__name__)

MARKET_ITEMS = "market_items"
TRANSACTIONS = "transactions"


class MarketService:

    def __init__(self, store: RecordStore, analytics=None):
        self.store = store
        self.analytics = analytics

    def seed_defaults(self, items: Iterable[MarketItem]) -> bool:
        """Save default listings only if the collection was never saved"""
        if self.store.exists(MARKET_ITEMS):
            return False
        items = list(items)
        self.store.save(MARKET_ITEMS, [i.model_dump(mode="json") for i in items])
        logger.info(f"🛍️  Seeded {len(items)} default market items")
        return True

    def list_items(self) -> List[MarketItem]:
        return parse_records(MarketItem, self.store.load(MARKET_ITEMS), MARKET_ITEMS)

    def get_item(self, item_id: str) -> Optional[MarketItem]:
        record = self.store.find(MARKET_ITEMS, "id", item_id)
        return parse_record(MarketItem, record, MARKET_ITEMS) if record else None

    def add_item(self, title: str, price: float, seller: str) -> MarketItem:
        """Create a listing; raises ValueError for a negative price"""
        item = MarketItem(id=generate_item_id(), title=title, price=price, seller=seller)
        self.store.append(MARKET_ITEMS, item.model_dump(mode="json"))
        logger.info(f"Listed {item.id}: {title} @ {price}")
        return item

    def buy(self, item_id: str) -> Optional[Transaction]:
        """Record a simulated purchase; None when the item does not exist"""
        if self.get_item(item_id) is None:
            logger.warning(f"Purchase of unknown item {item_id}")
            return None

        tx = Transaction(
            tx_id=generate_tx_id(),
            item_id=item_id,
            timestamp=datetime.now(timezone.utc),
        )
        self.store.append(TRANSACTIONS, tx.model_dump(mode="json"))
        logger.info(f"💳 Payment simulated for {item_id}, tx {tx.tx_id}")

        if self.analytics:
            self.analytics.record({"transactions": 1})
        return tx

    def list_transactions(self) -> List[Transaction]:
        return parse_records(Transaction, self.store.load(TRANSACTIONS), TRANSACTIONS)
