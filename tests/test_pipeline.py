"""Tests for the dashboard controller and enrichment."""

import random

import pytest
from civicecho.core.exceptions import InvalidCSVError
from civicecho.core.models import Comment, Enrichment, Sentiment, SentimentDistribution
from civicecho.core.report import overall_report
from civicecho.services.pipeline import (
    DashboardController,
    Tab,
    enrich,
    enrich_comments,
    sample_comments,
)


@pytest.fixture
def controller():
    return DashboardController(rng=random.Random(0), step=0.0)


def test_enrich_sets_all_fields():
    enrichment = enrich(Comment(id=1, text="Very useful. Thanks."))
    assert enrichment == Enrichment(sentiment=Sentiment.POSITIVE, confidence=0.7, summary="Very useful.")


def test_enrich_comments_returns_new_records():
    comments = [Comment(id=1, text="unclear rules"), Comment(id=2, text="good rules")]
    enriched = enrich_comments(comments)
    assert [c.sentiment for c in enriched] == [Sentiment.NEGATIVE, Sentiment.POSITIVE]
    assert all(c.sentiment is None for c in comments)


def test_enrich_comments_pauses_and_reports_progress():
    pauses, progress = [], []
    enriched = enrich_comments(
        sample_comments(),
        rng=random.Random(1),
        delay=pauses.append,
        step=0.25,
        on_progress=lambda done, total: progress.append((done, total)),
    )
    assert pauses == [0.25] * 10
    assert progress == [(i, 10) for i in range(1, 11)]
    assert all(c.is_enriched for c in enriched)
    assert enriched == enrich_comments(sample_comments(), rng=random.Random(1))


def test_enrich_comments_without_progress_callback():
    pauses = []
    enriched = enrich_comments(sample_comments(), delay=pauses.append, on_progress=None)
    assert len(pauses) == 10
    assert len(enriched) == 10


def test_enrich_comments_zero_step_never_pauses():
    pauses = []
    enrich_comments(sample_comments(), delay=pauses.append, step=0)
    assert pauses == []


def test_sample_comments_fixture():
    comments = sample_comments()
    assert [c.id for c in comments] == list(range(1, 11))
    assert not any(c.is_enriched for c in comments)


class TestDashboardController:
    """Test intents, state transitions and read-only views."""

    def test_initial_state(self, controller):
        assert len(controller.comments) == 10
        assert controller.state.active_tab == Tab.UPLOAD
        assert not controller.state.is_processing
        assert controller.distribution().total == 0

    def test_use_sample_data(self, controller):
        count = controller.use_sample_data()
        assert count == 10
        assert all(c.is_enriched and c.summary for c in controller.comments)
        assert controller.distribution() == SentimentDistribution(positive=4, negative=3, neutral=3)
        assert controller.distribution().dominant() == Sentiment.POSITIVE
        assert controller.state.active_tab == Tab.SENTIMENT
        assert not controller.state.is_processing
        assert not controller.state.has_uploaded_file

    def test_sample_report(self, controller):
        controller.use_sample_data()
        report = controller.report()
        assert report.total_comments == 10
        assert report.key_themes == ["amendment", "very", "draft", "some", "proposed"]
        assert report.recommendations == [
            "Address clarity concerns in key provisions",
            "Engage stakeholders for further consultation",
        ]
        assert "generally positive reception (40% positive vs 30% negative)" in report.summary
        assert report == overall_report(controller.comments)

    def test_upload_replaces_collection(self, controller):
        data = b"Comment_ID,Comment\n1,This is unclear. Needs work.\n2,Excellent draft\n"
        count = controller.upload(data)
        assert count == 2
        assert [c.id for c in controller.comments] == [1, 2]
        assert controller.comments[0].summary == "is unclear."
        assert controller.comments[0].sentiment == Sentiment.NEGATIVE
        assert controller.state.has_uploaded_file
        assert controller.state.generation == 1
        assert controller.state.active_tab == Tab.SENTIMENT
        assert not controller.state.is_processing

    def test_failed_upload_resets_processing(self, controller):
        before = controller.comments
        with pytest.raises(InvalidCSVError):
            controller.upload(b"header only\n")
        assert not controller.state.is_processing
        assert controller.state.last_error == "Error processing file. Please check the CSV format."
        assert controller.comments == before
        assert controller.state.active_tab == Tab.UPLOAD

    def test_successful_upload_clears_error(self, controller):
        with pytest.raises(InvalidCSVError):
            controller.upload("nothing")
        controller.upload("id,text\n1,fine")
        assert controller.state.last_error is None

    def test_stale_enrichment_is_discarded(self, controller):
        old = controller.start_batch([Comment(id=1, text="old")], uploaded=True)
        new = controller.start_batch([Comment(id=1, text="new")], uploaded=True)
        enrichment = Enrichment(Sentiment.POSITIVE, 0.7, "old.")

        assert not controller.apply_enrichment(old, 1, enrichment)
        assert controller.comments == (Comment(id=1, text="new"),)
        assert controller.apply_enrichment(new, 1, enrichment)
        assert controller.comments[0].sentiment == Sentiment.POSITIVE

    def test_new_batch_mid_processing_wins(self, controller):
        def interrupt(done, total):
            if done == 1:
                controller.start_batch([Comment(id=99, text="fresh upload")], uploaded=True)

        controller.use_sample_data(on_progress=interrupt)
        assert controller.comments == (Comment(id=99, text="fresh upload"),)
        assert controller.state.is_processing

    def test_duplicate_ids_last_write_wins(self, controller):
        generation = controller.start_batch(
            [Comment(id=1, text="useful"), Comment(id=1, text="unclear")], uploaded=True
        )
        controller.process(generation)
        assert [c.text for c in controller.comments] == ["useful", "unclear"]
        assert [c.sentiment for c in controller.comments] == [Sentiment.NEGATIVE, Sentiment.NEGATIVE]

    def test_delay_hook_does_not_change_results(self):
        pauses = []
        animated = DashboardController(rng=random.Random(3), delay=pauses.append, step=0.25)
        plain = DashboardController(rng=random.Random(3), step=0.0)
        animated.use_sample_data()
        plain.use_sample_data()
        assert pauses == [0.25] * 10
        assert animated.comments == plain.comments

    def test_progress_callback(self, controller):
        progress = []
        controller.use_sample_data(on_progress=lambda done, total: progress.append((done, total)))
        assert progress == [(i, 10) for i in range(1, 11)]

    def test_set_tab(self, controller):
        controller.set_tab("wordcloud")
        assert controller.state.active_tab == Tab.WORDCLOUD
        controller.set_tab(Tab.SUMMARIES)
        assert controller.state.active_tab == Tab.SUMMARIES
        with pytest.raises(ValueError):
            controller.set_tab("settings")

    def test_preview(self, controller):
        assert len(controller.preview()) == 5
        assert len(controller.preview(rows=2)) == 2
        assert controller.preview(rows=0) == ()

    def test_views_are_recomputed(self, controller):
        controller.use_sample_data()
        first = controller.word_frequency()
        assert controller.word_frequency() == first
        assert controller.top_keywords() == first[:12]
        controller.upload("id,comment\n1,entirely different words")
        assert [wf.word for wf in controller.word_frequency()] == ["entirely", "different", "words"]
