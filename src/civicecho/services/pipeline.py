"""Dashboard controller: owns the comment collection and drives the pipeline."""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from ..core.aggregate import sentiment_distribution, top_keywords, word_frequency
from ..core.config import settings
from ..core.constants import MockDataConstants, UIConstants
from ..core.exceptions import InvalidCSVError
from ..core.ingest import decode_upload, ingest
from ..core.models import Comment, Enrichment, OverallReport, SentimentDistribution, WordFrequency
from ..core.report import overall_report
from ..core.sentiment import classify
from ..core.summarize import summarize

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class Tab(Enum):
    UPLOAD = "upload"
    SENTIMENT = "sentiment"
    SUMMARIES = "summaries"
    WORDCLOUD = "wordcloud"


def sample_comments() -> List[Comment]:
    """The fixed set of demo comments, unclassified."""
    return [Comment(id=cid, text=text) for cid, text in MockDataConstants.SAMPLE_COMMENTS]


def enrich(comment: Comment, rng: Optional[random.Random] = None) -> Enrichment:
    """Classify and summarize a single comment."""
    sentiment, confidence = classify(comment.text, rng=rng)
    return Enrichment(sentiment=sentiment, confidence=confidence, summary=summarize(comment.text))


def iter_enrichments(
    comments: Sequence[Comment],
    rng: Optional[random.Random] = None,
    delay: Optional[Callable[[float], None]] = None,
    step: Optional[float] = None,
) -> Iterator[Tuple[Comment, Enrichment]]:
    """Yield each comment with its enrichment, pausing `step` seconds first.

    The pause is purely cosmetic; `delay` is usually `time.sleep`.
    """
    step = settings.processing_step if step is None else step
    for comment in comments:
        if delay is not None and step > 0:
            delay(step)
        yield comment, enrich(comment, rng=rng)


def enrich_comments(
    comments: Sequence[Comment],
    rng: Optional[random.Random] = None,
    delay: Optional[Callable[[float], None]] = None,
    step: Optional[float] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> List[Comment]:
    """Enrich a batch synchronously, returning new comment records."""
    enriched = []
    for comment, enrichment in iter_enrichments(comments, rng=rng, delay=delay, step=step):
        enriched.append(comment.with_enrichment(enrichment))
        if on_progress is not None:
            on_progress(len(enriched), len(comments))
    return enriched


@dataclass
class DashboardState:
    """Everything the views need to render."""
    comments: Tuple[Comment, ...] = ()
    active_tab: Tab = Tab.UPLOAD
    is_processing: bool = False
    has_uploaded_file: bool = False
    generation: int = 0
    last_error: Optional[str] = None


class DashboardController:
    """Single owner of dashboard state.

    Each new batch gets a fresh generation id. Enrichment results tagged with
    an older generation are dropped, so a second upload always wins over a
    batch still being processed.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay: Optional[Callable[[float], None]] = None,
        step: Optional[float] = None,
    ):
        self.state = DashboardState(comments=tuple(sample_comments()))
        self.rng = rng or random.Random(settings.random_seed)
        # Cosmetic pause between comments; never affects results
        self.delay = delay
        self.step = settings.processing_step if step is None else step

    @property
    def comments(self) -> Tuple[Comment, ...]:
        return self.state.comments

    # --- intents -----------------------------------------------------------

    def upload(self, data: Union[bytes, str], on_progress: Optional[ProgressCallback] = None) -> int:
        """Replace the collection with an uploaded CSV and process it."""
        self.state.is_processing = True
        try:
            comments = ingest(decode_upload(data))
        except InvalidCSVError as e:
            logger.error(f"Error processing file: {e}")
            self.state.is_processing = False
            self.state.last_error = UIConstants.UPLOAD_ERROR_MESSAGE
            raise

        generation = self.start_batch(comments, uploaded=True)
        self.process(generation, on_progress=on_progress)
        self.state.active_tab = Tab.SENTIMENT
        return len(comments)

    def use_sample_data(self, on_progress: Optional[ProgressCallback] = None) -> int:
        """Replace the collection with the demo comments and process them."""
        comments = sample_comments()
        generation = self.start_batch(comments, uploaded=False)
        self.process(generation, on_progress=on_progress)
        self.state.active_tab = Tab.SENTIMENT
        return len(comments)

    def set_tab(self, tab: Union[Tab, str]) -> None:
        self.state.active_tab = Tab(tab)

    # --- batch processing --------------------------------------------------

    def start_batch(self, comments: Sequence[Comment], uploaded: bool) -> int:
        """Swap in a new collection and return its generation id."""
        self.state.generation += 1
        self.state.comments = tuple(comments)
        self.state.has_uploaded_file = uploaded
        self.state.is_processing = True
        self.state.last_error = None
        logger.info(f"Batch {self.state.generation}: {len(comments)} comments queued")
        return self.state.generation

    def process(self, generation: int, on_progress: Optional[ProgressCallback] = None) -> None:
        """Enrich every comment of the given batch, one at a time."""
        batch = self.state.comments
        total = len(batch)
        enrichments = iter_enrichments(batch, rng=self.rng, delay=self.delay, step=self.step)
        for done, (comment, enrichment) in enumerate(enrichments, start=1):
            if not self.apply_enrichment(generation, comment.id, enrichment):
                return
            if on_progress is not None:
                on_progress(done, total)

        if generation == self.state.generation:
            self.state.is_processing = False
            logger.info(f"Batch {generation}: processing complete")

    def apply_enrichment(self, generation: int, comment_id: int, enrichment: Enrichment) -> bool:
        """Write an enrichment back to every comment with the given id.

        Returns False and changes nothing when the batch is stale.
        """
        if generation != self.state.generation:
            logger.warning(
                f"Discarding enrichment for comment {comment_id} from stale batch "
                f"{generation} (current {self.state.generation})"
            )
            return False
        self.state.comments = tuple(
            c.with_enrichment(enrichment) if c.id == comment_id else c
            for c in self.state.comments
        )
        return True

    # --- read-only views ---------------------------------------------------

    def distribution(self) -> SentimentDistribution:
        return sentiment_distribution(self.state.comments)

    def word_frequency(self) -> List[WordFrequency]:
        return word_frequency(self.state.comments)

    def top_keywords(self) -> List[WordFrequency]:
        return top_keywords(self.word_frequency())

    def report(self) -> OverallReport:
        return overall_report(self.state.comments)

    def preview(self, rows: Optional[int] = None) -> Tuple[Comment, ...]:
        if rows is None:
            rows = settings.preview_rows
        return self.state.comments[:rows]
