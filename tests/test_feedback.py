import pytest

from johar.conversational import FeedbackService, score_sentiment
from johar.models.schemas import Sentiment


@pytest.mark.parametrize("text, sentiment, score", [
    ("Beautiful falls, great food", Sentiment.POSITIVE, 2),
    ("Terrible roads and poor signage", Sentiment.NEGATIVE, -2),
    ("Good guide but bad weather", Sentiment.NEUTRAL, 0),
    ("We went on Tuesday", Sentiment.NEUTRAL, 0),
])
def test_score_sentiment(text, sentiment, score):
    result = score_sentiment(text)

    assert result.sentiment == sentiment
    assert result.score == score


def test_submit_stores_feedback(store, analytics):
    service = FeedbackService(store, analytics)

    result = service.submit("Loved it, amazing trip")

    assert result.sentiment == Sentiment.POSITIVE
    stored = service.list_feedback()
    assert len(stored) == 1
    assert stored[0]["text"] == "Loved it, amazing trip"
    assert stored[0]["sentiment"] == "positive"
    assert analytics.snapshot()["visits"] == 1


def test_blank_feedback_ignored(store):
    service = FeedbackService(store)

    assert service.submit("   ") is None
    assert service.list_feedback() == []
