"""Data models for CivicEcho."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional

from .rounding import round_half_up


class Sentiment(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class Enrichment:
    """Result of classifying and summarizing one comment."""
    sentiment: Sentiment
    confidence: float
    summary: str


@dataclass(frozen=True)
class Comment:
    """A single stakeholder comment."""
    id: int
    text: str
    sentiment: Optional[Sentiment] = None
    confidence: Optional[float] = None
    summary: Optional[str] = None

    @property
    def is_enriched(self) -> bool:
        return self.sentiment is not None

    def with_enrichment(self, enrichment: Enrichment) -> "Comment":
        """Return a copy carrying the enrichment fields."""
        return replace(
            self,
            sentiment=enrichment.sentiment,
            confidence=enrichment.confidence,
            summary=enrichment.summary,
        )


@dataclass(frozen=True)
class SentimentDistribution:
    """Comment counts per sentiment label."""
    positive: int = 0
    negative: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral

    def count(self, sentiment: Sentiment) -> int:
        return self.as_dict()[sentiment.value]

    def as_dict(self) -> Dict[str, int]:
        return {
            Sentiment.POSITIVE.value: self.positive,
            Sentiment.NEGATIVE.value: self.negative,
            Sentiment.NEUTRAL.value: self.neutral,
        }

    def percentages(self) -> Dict[str, float]:
        """Share of each label in percent, one decimal place."""
        total = self.total
        if total == 0:
            return {label: 0.0 for label in self.as_dict()}
        return {label: round_half_up(n / total * 100, 1) for label, n in self.as_dict().items()}

    def dominant(self) -> Sentiment:
        """Most common label; ties go to Positive, then Negative."""
        if self.positive >= max(self.negative, self.neutral):
            return Sentiment.POSITIVE
        if self.negative >= self.neutral:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL


@dataclass(frozen=True)
class WordFrequency:
    """A word and how often it occurs across the collection."""
    word: str
    frequency: int


@dataclass
class OverallReport:
    """Narrative overview of a comment collection."""
    summary: str
    key_themes: List[str]
    total_comments: int
    average_length: int
    top_concerns: List[str]
    recommendations: List[str]
