"""Data preparation for display and export."""

import json
from typing import Any, Dict, List, Sequence, Tuple

import pandas as pd

from ..core.aggregate import sentiment_distribution
from ..core.constants import FileConstants, UIConstants
from ..core.models import Comment, OverallReport, WordFrequency


def comments_to_frame(comments: Sequence[Comment]) -> pd.DataFrame:
    """Build the table shown in the comment browser."""
    rows = []
    for c in comments:
        rows.append({
            "id": c.id,
            "comment": c.text,
            "sentiment": c.sentiment.value if c.sentiment else "",
            "confidence": f"{round(c.confidence * 100)}%" if c.confidence is not None else "",
            "summary": c.summary or "",
        })
    return pd.DataFrame(rows, columns=["id", "comment", "sentiment", "confidence", "summary"])


def word_cloud_sizes(
    frequencies: Sequence[WordFrequency],
    min_size: int = UIConstants.WORD_CLOUD_MIN_SIZE,
    max_size: int = UIConstants.WORD_CLOUD_MAX_SIZE,
) -> List[Tuple[str, float]]:
    """Font size per word, scaled linearly against the most frequent word."""
    if not frequencies:
        return []
    max_frequency = max(wf.frequency for wf in frequencies)
    return [
        (wf.word, min_size + (wf.frequency / max_frequency) * (max_size - min_size))
        for wf in frequencies
    ]


def prepare_export(comments: Sequence[Comment], report: OverallReport) -> Dict[str, Any]:
    """Prepare data for JSON export."""
    comments_data = [
        {
            "id": c.id,
            "text": c.text,
            "sentiment": c.sentiment.value if c.sentiment else None,
            "confidence": c.confidence,
            "summary": c.summary,
        }
        for c in comments
    ]

    return {
        "summary": {
            "narrative": report.summary,
            "total_comments": report.total_comments,
            "average_length": report.average_length,
            "distribution": sentiment_distribution(comments).as_dict(),
            "key_themes": report.key_themes,
            "top_concerns": report.top_concerns,
            "recommendations": report.recommendations,
        },
        "comments": comments_data,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION,
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
