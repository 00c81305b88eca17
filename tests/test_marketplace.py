import pytest

from johar.database import get_db_context
from johar.marketplace import MarketService
from johar.models.database import CollectionRecord


@pytest.fixture
def market(store, analytics):
    return MarketService(store, analytics)


def test_seed_defaults_only_on_first_start(market, seeds):
    assert market.seed_defaults(seeds.load_market_items()) is True
    assert [i.id for i in market.list_items()] == ["prod_1", "prod_2"]

    market.add_item("Dokra Horse", 900, "Bastar Crafts")
    assert market.seed_defaults(seeds.load_market_items()) is False
    assert len(market.list_items()) == 3


def test_add_item(market):
    item = market.add_item("Sohrai Painting", 1200, "Hazaribagh Art")

    assert item.id.startswith("prod_")
    assert market.get_item(item.id) == item


def test_negative_price_rejected(market):
    with pytest.raises(ValueError):
        market.add_item("Bad", -1, "Nobody")
    assert market.list_items() == []


def test_buy_records_transaction(market, analytics):
    item = market.add_item("Bamboo Basket", 150, "Khunti Weavers")

    tx = market.buy(item.id)

    assert tx.tx_id.startswith("0x")
    assert tx.item_id == item.id
    assert market.list_transactions() == [tx]
    assert analytics.snapshot()["transactions"] == 1


def test_buy_unknown_item_is_noop(market, analytics):
    assert market.buy("prod_missing") is None
    assert market.list_transactions() == []
    assert analytics.snapshot()["transactions"] == 0


def test_transaction_ids_are_unique(market):
    item = market.add_item("Tea", 80, "Garden Co-op")
    ids = {market.buy(item.id).tx_id for _ in range(10)}
    assert len(ids) == 10


def test_malformed_market_records_are_skipped(market, session_factory):
    with get_db_context(session_factory) as db:
        db.add(CollectionRecord(
            name="market_items",
            payload='[1, {"id": "prod_x", "title": "No price"}, {"id": "prod_ok", "title": "Sohrai mat", "price": 300, "seller": "Hazaribagh"}]',
        ))
        db.add(CollectionRecord(name="transactions", payload='[{"tx_id": "0xabc"}]'))

    assert [i.id for i in market.list_items()] == ["prod_ok"]
    assert market.get_item("prod_x") is None
    assert market.buy("prod_x") is None
    assert market.list_transactions() == []
