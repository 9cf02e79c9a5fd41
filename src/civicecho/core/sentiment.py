"""Keyword-based sentiment classification."""

import random
from typing import Optional, Tuple

from .constants import LexiconConstants
from .models import Sentiment

_default_rng = random.Random()


def score_text(text: str) -> Tuple[int, int]:
    """Count positive and negative keywords contained in the text.

    Matching is by substring, so "improve" also hits "improvement". Each keyword
    counts once however often it appears.
    """
    lowered = text.lower()
    pos = sum(word in lowered for word in LexiconConstants.POSITIVE_WORDS)
    neg = sum(word in lowered for word in LexiconConstants.NEGATIVE_WORDS)
    return pos, neg


def _decided_confidence(score: int) -> float:
    confidence = LexiconConstants.BASE_CONFIDENCE + score * LexiconConstants.CONFIDENCE_STEP
    return round(min(confidence, LexiconConstants.MAX_CONFIDENCE), 2)


def _neutral_confidence(rng: random.Random) -> float:
    # Placeholder signal: a random value in [0.50, 0.80) on the 0.01 grid
    hundredths = rng.randrange(
        LexiconConstants.NEUTRAL_CONFIDENCE_MIN, LexiconConstants.NEUTRAL_CONFIDENCE_MAX
    )
    return round(hundredths / 100, 2)


def classify(text: str, rng: Optional[random.Random] = None) -> Tuple[Sentiment, float]:
    """Label text Positive, Negative or Neutral with a confidence.

    Ties, including texts without any keyword, are Neutral and get a random
    confidence from `rng` (module-level generator when omitted).
    """
    pos, neg = score_text(text)
    if pos > neg:
        return Sentiment.POSITIVE, _decided_confidence(pos)
    if neg > pos:
        return Sentiment.NEGATIVE, _decided_confidence(neg)
    return Sentiment.NEUTRAL, _neutral_confidence(rng or _default_rng)
