"""
ItineraryPlanner - Rule-based day-by-day plan generation

Maps a day count and an ordered list of interest tags onto day plans.
Each interest rotates through its candidate places across days using
index (day + interest_position) % len(candidates), so the same interest
lands on a different place on consecutive days.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from johar.models.schemas import Activity, DayPlan

logger = logging.getLogger(__name__)


INTEREST_PLACES: Dict[str, List[str]] = {
    "waterfalls": ["Hundru Falls", "Dassam Falls", "Jonha Falls"],
    "wildlife": ["Betla National Park", "Dalma Sanctuary"],
    "culture": ["Horo dance, tribal markets, local handicrafts"],
    "trekking": ["Netarhat trails", "Parasnath region"],
    "relax": ["Hill-view homestays and tea gardens"],
}

# Used for tags with no entry in INTEREST_PLACES
GENERIC_PLACES: List[str] = ["local attractions"]

FIRST_SLOT_HOUR = 8
SLOT_SPACING_HOURS = 3

DEFAULT_ACTIVITY = Activity(
    time="10:00",
    activity="Local sightseeing",
    tip="Explore markets and crafts",
)


def normalize_interests(interests: Iterable[str]) -> List[str]:
    """Lower-case, strip, drop blanks and repeats; keeps first-seen order"""
    seen = []
    for tag in interests:
        tag = (tag or "").strip().lower()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def slot_time(position: int) -> str:
    """Illustrative HH:MM slot; no wrap past 24h"""
    return f"{FIRST_SLOT_HOUR + position * SLOT_SPACING_HOURS:02d}:00"


def pick_place(candidates: Sequence[str], day: int, position: int) -> str:
    return candidates[(day + position) % len(candidates)]


class ItineraryPlanner:
    """Deterministic planner over a fixed interest → places table"""

    def __init__(self, interest_places: Optional[Dict[str, List[str]]] = None):
        self.interest_places = INTEREST_PLACES if interest_places is None else interest_places

    def candidates_for(self, interest: str) -> List[str]:
        return self.interest_places.get(interest) or GENERIC_PLACES

    def plan(self, days: int, interests: Iterable[str]) -> List[DayPlan]:
        """
        Build the day-by-day plan

        Args:
            days: Number of days; zero or negative yields an empty plan
            interests: Interest tags, order matters for slot assignment

        Returns:
            Exactly `days` DayPlans, each with at least one activity
        """
        tags = normalize_interests(interests)

        if days < 1:
            logger.warning(f"Non-positive day count {days}, returning empty plan")
            return []

        plan = []
        for day in range(1, days + 1):
            activities = []
            for position, tag in enumerate(tags):
                place = pick_place(self.candidates_for(tag), day, position)
                activities.append(Activity(
                    time=slot_time(position),
                    activity=f"Visit {place}",
                    tip=f"Local tip: try local food near {place}",
                ))

            if not activities:
                activities.append(DEFAULT_ACTIVITY.model_copy())

            plan.append(DayPlan(day=day, activities=activities))

        logger.info(f"📅 Planned {days} days for interests {tags or ['(none)']}")
        return plan
