"""
Conversational Module

Rule-based chat assistant and visitor feedback:
- Intent classification (ordered rules, first match wins)
- Sentiment scoring
- Feedback storage
"""

from .intent_classifier import IntentClassifier, IntentRule, IntentMatch, DEFAULT_RULES
from .sentiment import score_sentiment
from .feedback import FeedbackService

__all__ = [
    "IntentClassifier",
    "IntentRule",
    "IntentMatch",
    "DEFAULT_RULES",
    "score_sentiment",
    "FeedbackService",
]
