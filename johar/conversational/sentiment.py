"""
Lexicon-based sentiment scoring for visitor feedback
"""

from typing import Iterable

from johar.models.schemas import Sentiment, SentimentResult

POSITIVE_WORDS = ('good', 'great', 'amazing', 'awesome', 'love', 'beautiful', 'nice', 'enjoy')
NEGATIVE_WORDS = ('bad', 'terrible', 'hate', 'poor', 'worst', 'disappoint')


def _hits(text: str, words: Iterable[str]) -> int:
    return sum(1 for word in words if word in text)


def score_sentiment(text: str) -> SentimentResult:
    """+1 per positive word present, -1 per negative word present"""
    lowered = (text or "").lower()
    score = _hits(lowered, POSITIVE_WORDS) - _hits(lowered, NEGATIVE_WORDS)

    if score > 0:
        label = Sentiment.POSITIVE
    elif score < 0:
        label = Sentiment.NEGATIVE
    else:
        label = Sentiment.NEUTRAL

    return SentimentResult(sentiment=label, score=score)
