from johar.analytics import AnalyticsAccumulator, default_state, merge_event


def test_snapshot_has_defaults_when_absent(analytics):
    state = analytics.snapshot()

    assert state["visits"] == 0
    assert state["transactions"] == 0
    assert state["verifiedGuides"] == 0
    assert state["monthLabels"] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert state["market"] == [50, 30, 20, 10]


def test_numeric_fields_accumulate(analytics):
    before = analytics.snapshot()["visits"]

    analytics.record({"visits": 1})
    analytics.record({"visits": 1})

    assert analytics.snapshot()["visits"] == before + 2


def test_non_numeric_fields_replace(analytics):
    analytics.record({"market": [1, 2, 3]})
    assert analytics.snapshot()["market"] == [1, 2, 3]

    analytics.record({"market": [9]})
    assert analytics.snapshot()["market"] == [9]


def test_event_fields_are_independent(analytics):
    analytics.record({"visits": 3, "transactions": 1, "monthLabels": ["Jul"]})

    state = analytics.snapshot()
    assert state["visits"] == 3
    assert state["transactions"] == 1
    assert state["monthLabels"] == ["Jul"]
    assert state["monthVisits"] == default_state()["monthVisits"]


def test_merge_event_treats_bool_and_text_as_replacements():
    state = {"visits": 5, "label": "x"}

    assert merge_event(state, {"visits": True})["visits"] is True
    assert merge_event(state, {"label": 2})["label"] == 2
    assert state == {"visits": 5, "label": "x"}


def test_ensure_initialized_persists_defaults_once(analytics, store):
    analytics.ensure_initialized()
    assert store.exists("analytics")

    analytics.record({"visits": 4})
    analytics.ensure_initialized()

    assert analytics.snapshot()["visits"] == 4


def test_record_never_raises_on_broken_storage(broken_store):
    analytics = AnalyticsAccumulator(broken_store)

    analytics.record({"visits": 1})

    assert analytics.snapshot()["visits"] == 0


def test_record_swallows_store_errors(store, monkeypatch):
    analytics = AnalyticsAccumulator(store)

    def explode(name):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(store, "edit", explode)

    analytics.record({"visits": 1})
