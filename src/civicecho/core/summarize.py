"""Extractive lead-sentence summaries."""

import re

from .constants import SummaryConstants

_SENTENCE_SPLIT = re.compile(SummaryConstants.SENTENCE_SPLIT_PATTERN)
_FILLER_PREFIX = re.compile(
    r"^(" + "|".join(SummaryConstants.FILLER_PREFIXES) + r")", re.IGNORECASE
)
_WHITESPACE = re.compile(r"\s+")


def summarize(text: str) -> str:
    """Return the first sentence of text, lightly trimmed."""
    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]

    if not sentences:
        return text
    if len(sentences) == 1:
        return sentences[0].strip() + "."

    # Prefix match is not word-bounded: "There" loses its "The" too
    summary = _FILLER_PREFIX.sub("", sentences[0].strip(), count=1)
    summary = _WHITESPACE.sub(" ", summary).strip()

    if not summary.endswith(SummaryConstants.TERMINAL_PUNCTUATION):
        summary += "."
    return summary
