"""
IntentClassifier - Rule-based User Intent Classification

Free text is lower-cased and run through an ordered rule list; the first
matching rule decides the intent and the canned reply. Priority order:
greeting, then topic rules, then a site lookup, then the generic fallback.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from johar.models.schemas import Site

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


# ===========================
# PREDICATES
# ===========================

def contains_any(*phrases: str) -> Predicate:
    """Match when any phrase occurs as a substring"""
    def predicate(text: str) -> bool:
        return any(phrase in text for phrase in phrases)
    return predicate


def has_word(*words: str) -> Predicate:
    """Match when any word occurs as a whole word"""
    pattern = re.compile(r"\b(" + "|".join(re.escape(w) for w in words) + r")\b")

    def predicate(text: str) -> bool:
        return pattern.search(text) is not None
    return predicate


# ===========================
# RULES
# ===========================

@dataclass(frozen=True)
class IntentRule:
    intent: str
    predicate: Predicate
    response: str
    topic: Optional[str] = None  # advertised in the fallback reply


@dataclass(frozen=True)
class IntentMatch:
    intent: str
    response: str
    site_id: Optional[str] = None


GREETING = "greeting"
SITE_LOOKUP = "site_lookup"
FALLBACK = "fallback"


DEFAULT_RULES: Sequence[IntentRule] = (
    IntentRule(
        GREETING,
        has_word("hi", "hello", "namaste", "johar"),
        "Johar! Welcome to Johar Jharkhand. I can help with places, food, "
        "itineraries, guides and marketplace.",
    ),
    IntentRule(
        "food",
        contains_any("food"),
        "Famous Jharkhand foods include Dhuska, Rugra, Chilka Roti, and local "
        "drinks like Handia. Try them in local markets.",
        topic="food",
    ),
    IntentRule(
        "waterfalls",
        contains_any("waterfall", "falls"),
        "Check Hundru Falls, Dassam Falls and Jonha Falls near Ranchi for "
        "beautiful waterfalls.",
        topic="waterfalls",
    ),
    IntentRule(
        "places",
        contains_any("places", "visit", "tour"),
        "Top places: Netarhat (sunsets), Hundru Falls (waterfall), Betla "
        "National Park (wildlife), Deoghar (pilgrimage). I can create an "
        "itinerary for you, tell me days and interests.",
        topic="places",
    ),
    IntentRule(
        "itinerary",
        contains_any("itinerary", "plan"),
        "Tell me how many days you have and what interests (waterfalls, "
        "wildlife, culture, trekking). Example: '3 days, waterfalls and culture'.",
        topic="plan itinerary",
    ),
    IntentRule(
        "guides",
        contains_any("guide"),
        "You can register as or find local guides. Use the Guide Registry: "
        "guides can be verified and issued certificates (simulated).",
        topic="guides",
    ),
    IntentRule(
        "marketplace",
        contains_any("market", "handicraft"),
        "Visit the Marketplace to discover local tribal handicrafts, homestays "
        "and events. You can buy items with simulated payments.",
        topic="marketplace",
    ),
    IntentRule(
        "festivals",
        contains_any("festival"),
        "Important festivals: Sarhul (spring), Karma (harvest), Sohrai "
        "(festival of cattle), Tusu (regional harvest festival).",
        topic="festivals",
    ),
    IntentRule(
        "help",
        contains_any("help", "what can you do"),
        "I can generate itineraries, speak in multiple Indian languages, show "
        "places on the map, simulate payments, and analyze feedback. Ask me "
        "any question about Jharkhand!",
        topic="help",
    ),
)


def site_reply(site: Site) -> str:
    return (
        f"{site.name}: {site.description}. "
        f"Located at approx {site.latitude}, {site.longitude}."
    )


def fallback_reply(rules: Iterable[IntentRule]) -> str:
    topics = [rule.topic for rule in rules if rule.topic]
    return (
        "Sorry, I don't know exactly. Here are topics I understand: "
        + ", ".join(topics) + "."
    )


# ===========================
# CLASSIFIER
# ===========================

class IntentClassifier:
    """Ordered first-match-wins dispatch over IntentRules"""

    def __init__(
        self,
        sites: Sequence[Site] = (),
        rules: Sequence[IntentRule] = DEFAULT_RULES
    ):
        self.sites: List[Site] = list(sites)
        self.rules: List[IntentRule] = list(rules)
        self._fallback = fallback_reply(self.rules)
        logger.info(f"✅ IntentClassifier initialized with {len(self.rules)} rules, {len(self.sites)} sites")

    def match(self, utterance: str) -> IntentMatch:
        """Classify an utterance; never raises"""
        text = (utterance or "").strip().lower()

        if text:
            for rule in self.rules:
                if rule.predicate(text):
                    logger.debug(f"Matched intent: {rule.intent}")
                    return IntentMatch(rule.intent, rule.response)

            site = self.find_site(text)
            if site:
                logger.debug(f"Matched site: {site.id}")
                return IntentMatch(SITE_LOOKUP, site_reply(site), site.id)

        return IntentMatch(FALLBACK, self._fallback)

    def classify(self, utterance: str) -> str:
        return self.match(utterance).response

    def find_site(self, text: str) -> Optional[Site]:
        """First site whose name or id occurs in the (lower-cased) text"""
        for site in self.sites:
            if site.name.lower() in text or site.id.lower() in text:
                return site
        return None
