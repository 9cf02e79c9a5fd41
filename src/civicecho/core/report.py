"""Overall report synthesis."""

from typing import List, Sequence

from .aggregate import sentiment_distribution, word_frequency
from .constants import FrequencyConstants, ReportConstants
from .models import Comment, OverallReport, SentimentDistribution
from .rounding import round_half_up


def _percentage(count: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(count / total * 100)


def build_recommendations(
    distribution: SentimentDistribution, key_themes: Sequence[str]
) -> List[str]:
    """Rule-based recommendation list, at most four entries."""
    recommendations = []

    if distribution.negative > distribution.positive * ReportConstants.NEGATIVE_TO_POSITIVE_RATIO:
        recommendations.append(ReportConstants.CLARITY_RECOMMENDATION)
    if any(theme in key_themes for theme in ReportConstants.SIMPLIFY_THEMES):
        recommendations.append(ReportConstants.SIMPLIFY_RECOMMENDATION)
    if any(theme in key_themes for theme in ReportConstants.GUIDELINES_THEMES):
        recommendations.append(ReportConstants.GUIDELINES_RECOMMENDATION)
    recommendations.append(ReportConstants.CONSULTATION_RECOMMENDATION)

    return recommendations[:ReportConstants.MAX_RECOMMENDATIONS]


def build_narrative(
    total: int, distribution: SentimentDistribution, key_themes: Sequence[str]
) -> str:
    """Templated overview paragraph."""
    positive_pct = _percentage(distribution.positive, total)
    negative_pct = _percentage(distribution.negative, total)

    summary = f"Analysis of {total} stakeholder comments reveals "
    if positive_pct > negative_pct:
        summary += f"generally positive reception ({positive_pct}% positive vs {negative_pct}% negative). "
    elif negative_pct > positive_pct:
        summary += f"mixed reception with significant concerns ({negative_pct}% negative vs {positive_pct}% positive). "
    else:
        summary += "balanced feedback with equal positive and negative sentiments. "

    themes = ", ".join(key_themes[:ReportConstants.NARRATIVE_THEMES])
    summary += f"Key themes include {themes}. "

    if distribution.negative > 0:
        summary += ReportConstants.CONCERN_SENTENCE

    summary += ReportConstants.CLOSING_SENTENCE
    return summary


def overall_report(comments: Sequence[Comment]) -> OverallReport:
    """Summarize a whole collection: themes, concerns and recommendations."""
    total = len(comments)
    average_length = round_half_up(sum(len(c.text) for c in comments) / total) if total else 0

    frequencies = word_frequency(comments)
    key_themes = [wf.word for wf in frequencies[:FrequencyConstants.KEY_THEMES]]
    distribution = sentiment_distribution(comments)

    return OverallReport(
        summary=build_narrative(total, distribution, key_themes),
        key_themes=key_themes,
        total_comments=total,
        average_length=average_length,
        # Fixed list, not derived from the comments
        top_concerns=list(ReportConstants.TOP_CONCERNS),
        recommendations=build_recommendations(distribution, key_themes),
    )
