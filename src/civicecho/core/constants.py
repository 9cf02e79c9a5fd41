"""Constants and configuration values for CivicEcho."""

# Sentiment Lexicon Constants
class LexiconConstants:
    """Keyword lists and confidence rules for the sentiment classifier."""

    POSITIVE_WORDS = (
        "useful", "excellent", "good", "positive",
        "well", "improve", "transparency", "simplify",
    )
    NEGATIVE_WORDS = (
        "unclear", "confusion", "burden", "complicate",
        "redundant", "bad", "problem", "difficult",
    )

    BASE_CONFIDENCE = 0.6  # confidence of a decided label before keyword bonus
    CONFIDENCE_STEP = 0.1  # bonus per matched keyword
    MAX_CONFIDENCE = 0.95  # cap for decided labels

    # Neutral confidence is drawn in hundredths from [0.50, 0.80)
    NEUTRAL_CONFIDENCE_MIN = 50
    NEUTRAL_CONFIDENCE_MAX = 80

# Summarizer Constants
class SummaryConstants:
    """Constants for lead-sentence extraction."""

    SENTENCE_SPLIT_PATTERN = r"[.!?]+"
    FILLER_PREFIXES = ("The", "This", "It is", "Overall", "In general", "I think", "I believe")
    TERMINAL_PUNCTUATION = (".", "!", "?")

# Word Frequency Constants
class FrequencyConstants:
    """Constants for word-frequency extraction."""

    TOKEN_PATTERN = r"[a-z]+"
    MIN_WORD_LENGTH = 4  # tokens of length <= 3 are dropped
    MAX_WORDS = 50  # ranked list size
    DISPLAY_WORDS = 12  # keywords shown next to the word cloud
    KEY_THEMES = 5  # words reported as key themes

    STOP_WORDS = frozenset([
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        "is", "are", "was", "were", "be", "been", "have", "has", "had",
        "will", "would", "could", "should", "may", "might", "must", "shall", "can",
        "this", "that", "these", "those", "a", "an", "as", "it", "its",
        "they", "them", "their", "we", "our", "you", "your", "i", "my", "me",
    ])

# Report Constants
class ReportConstants:
    """Literal concerns and recommendation rules for the overall report."""

    TOP_CONCERNS = (
        "Clarity and understanding issues",
        "Implementation complexity",
        "Compliance burden concerns",
        "Missing guidelines and details",
    )

    NEGATIVE_TO_POSITIVE_RATIO = 0.3
    MAX_RECOMMENDATIONS = 4
    NARRATIVE_THEMES = 3

    CLARITY_RECOMMENDATION = "Address clarity concerns in key provisions"
    SIMPLIFY_RECOMMENDATION = "Simplify implementation procedures"
    GUIDELINES_RECOMMENDATION = "Provide detailed implementation guidelines"
    CONSULTATION_RECOMMENDATION = "Engage stakeholders for further consultation"

    SIMPLIFY_THEMES = ("burden", "complicate")
    GUIDELINES_THEMES = ("guidelines", "clarification")

    CONCERN_SENTENCE = (
        "Main concerns focus on clarity, implementation complexity, "
        "and compliance requirements. "
    )
    CLOSING_SENTENCE = (
        "Recommendations include addressing stakeholder concerns "
        "and providing clearer implementation guidance."
    )

# Mock Data Constants
class MockDataConstants:
    """Sample comments loaded by the "use sample data" action."""

    SAMPLE_COMMENTS = (
        (1, "The proposed amendment is very useful and will simplify compliance."),
        (2, "This draft legislation is unclear and creates confusion for stakeholders."),
        (3, "Overall it is fine, but some clauses need more clarification."),
        (4, "The amendment will increase unnecessary burden on small businesses."),
        (5, "Excellent step towards improving transparency."),
        (6, "The draft should consider global best practices before finalisation."),
        (7, "This will complicate the filing process further, not a good idea."),
        (8, "Very well drafted and covers all necessary aspects."),
        (9, "Some provisions are redundant and must be removed."),
        (10, "Positive move, but implementation guidelines are missing."),
    )

# UI Constants
class UIConstants:
    """Constants for the dashboard views."""

    WORD_CLOUD_MIN_SIZE = 12  # px
    WORD_CLOUD_MAX_SIZE = 36  # px
    WORD_CLOUD_COLORS = (
        "#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6",
        "#06b6d4", "#84cc16", "#f97316", "#ec4899", "#6366f1",
    )
    SENTIMENT_COLORS = {
        "Positive": "#22c55e",
        "Negative": "#ef4444",
        "Neutral": "#6b7280",
    }
    UPLOAD_ERROR_MESSAGE = "Error processing file. Please check the CSV format."

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    CSV_ENCODING = "utf-8-sig"  # drops a leading BOM
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "0.1.0"
