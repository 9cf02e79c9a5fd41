"""Aggregation over comment collections."""

import re
from collections import Counter
from typing import Iterable, List

from .constants import FrequencyConstants
from .models import Comment, Sentiment, SentimentDistribution, WordFrequency

_TOKEN = re.compile(FrequencyConstants.TOKEN_PATTERN)


def sentiment_distribution(comments: Iterable[Comment]) -> SentimentDistribution:
    """Count comments per sentiment; unclassified comments are not counted."""
    counts = Counter(c.sentiment for c in comments if c.sentiment is not None)
    return SentimentDistribution(
        positive=counts[Sentiment.POSITIVE],
        negative=counts[Sentiment.NEGATIVE],
        neutral=counts[Sentiment.NEUTRAL],
    )


def _tokens(text: str) -> List[str]:
    return [
        word for word in _TOKEN.findall(text.lower())
        if len(word) >= FrequencyConstants.MIN_WORD_LENGTH
        and word not in FrequencyConstants.STOP_WORDS
    ]


def word_frequency(
    comments: Iterable[Comment], limit: int = FrequencyConstants.MAX_WORDS
) -> List[WordFrequency]:
    """Rank content words by how often they occur across all comments.

    Words with equal counts keep the order in which they were first seen.
    """
    counts: Counter = Counter()
    for comment in comments:
        counts.update(_tokens(comment.text))

    # sorted() is stable and Counter keeps insertion order
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [WordFrequency(word=word, frequency=n) for word, n in ranked[:limit]]


def top_keywords(
    frequencies: List[WordFrequency], n: int = FrequencyConstants.DISPLAY_WORDS
) -> List[WordFrequency]:
    """Slice of the ranked list shown beside the word cloud."""
    return frequencies[:n]
