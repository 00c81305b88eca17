import pytest

from johar.conversational import IntentClassifier, IntentRule
from johar.conversational.intent_classifier import FALLBACK, contains_any


@pytest.fixture
def classifier(seeds):
    return IntentClassifier(seeds.load_sites())


def test_greeting(classifier):
    match = classifier.match("hello")

    assert match.intent == "greeting"
    assert match.response.startswith("Johar!")


def test_greeting_takes_priority_over_topics(classifier):
    assert classifier.match("Namaste! Which waterfalls and food should I try?").intent == "greeting"


def test_greeting_needs_whole_word(classifier):
    # "this" contains "hi" but is not a greeting
    assert classifier.match("this is nice").intent == FALLBACK


@pytest.mark.parametrize("utterance, intent", [
    ("Best FOOD in Ranchi?", "food"),
    ("any waterfall nearby", "waterfalls"),
    ("which places to visit", "places"),
    ("can you plan my trip", "itinerary"),
    ("I need a guide", "guides"),
    ("where to buy handicraft", "marketplace"),
    ("when is the festival", "festivals"),
    ("what can you do", "help"),
])
def test_topic_rules(classifier, utterance, intent):
    assert classifier.match(utterance).intent == intent


def test_earlier_topic_wins(classifier):
    # food is checked before waterfalls
    assert classifier.match("food near the falls").intent == "food"


def test_site_lookup_by_id(classifier):
    match = classifier.match("tell me about hundru")

    assert match.intent == "site_lookup"
    assert match.site_id == "hundru"
    assert "Tall scenic waterfall near Ranchi" in match.response
    assert "23.43, 85.302" in match.response


def test_site_lookup_by_name(classifier):
    assert classifier.classify("How is Betla National Park?").startswith("Betla National Park:")


@pytest.mark.parametrize("utterance", ["", "   ", "xyzzy"])
def test_fallback_lists_topics(classifier, utterance):
    match = classifier.match(utterance)

    assert match.intent == FALLBACK
    assert "food" in match.response
    assert "festivals" in match.response
    assert match.site_id is None


def test_empty_and_unknown_share_fallback(classifier):
    assert classifier.classify("") == classifier.classify("xyzzy")


def test_custom_rule_order():
    rules = [
        IntentRule("second", contains_any("b"), "B"),
        IntentRule("first", contains_any("a"), "A"),
    ]
    classifier = IntentClassifier(rules=rules)

    assert classifier.classify("ab") == "B"
    assert classifier.classify("a") == "A"
