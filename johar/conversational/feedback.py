"""
FeedbackService - stores visitor feedback with its sentiment
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from johar.conversational.sentiment import score_sentiment
from johar.models.schemas import SentimentResult
from johar.store import RecordStore

logger = logging.getLogger(__name__)

FEEDBACK = "feedback"


class FeedbackService:

    def __init__(self, store: RecordStore, analytics=None):
        self.store = store
        self.analytics = analytics

    def submit(self, text: str) -> Optional[SentimentResult]:
        """Score and persist feedback; None for blank text"""
        if not text or not text.strip():
            logger.warning("Ignoring blank feedback")
            return None

        result = score_sentiment(text)
        self.store.append(FEEDBACK, {
            "text": text,
            "sentiment": result.sentiment.value,
            "score": result.score,
            "at": datetime.now(timezone.utc).isoformat(),
        })
        logger.info(f"💬 Feedback stored ({result.sentiment.value}, score {result.score})")

        if self.analytics:
            self.analytics.record({"visits": 1})

        return result

    def list_feedback(self) -> List[Dict]:
        return self.store.load(FEEDBACK)
