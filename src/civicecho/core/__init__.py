"""Core modules for CivicEcho."""

from .models import *
from .config import settings
from .exceptions import CivicEchoError, InvalidCSVError
from .ingest import parse_csv, ingest, decode_upload
from .sentiment import classify, score_text
from .summarize import summarize
from .aggregate import sentiment_distribution, word_frequency, top_keywords
from .report import overall_report

__all__ = [
    "settings",
    "Sentiment",
    "Comment",
    "Enrichment",
    "SentimentDistribution",
    "WordFrequency",
    "OverallReport",
    "CivicEchoError",
    "InvalidCSVError",
    "parse_csv",
    "ingest",
    "decode_upload",
    "classify",
    "score_text",
    "summarize",
    "sentiment_distribution",
    "word_frequency",
    "top_keywords",
    "overall_report",
]
