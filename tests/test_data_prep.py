"""Tests for display and export helpers."""

import json

import pytest
from civicecho.core.models import Comment, Sentiment, WordFrequency
from civicecho.core.report import overall_report
from civicecho.utils.data_prep import comments_to_frame, export_to_json, prepare_export, word_cloud_sizes


@pytest.fixture
def comments():
    return [
        Comment(id=1, text="Useful draft.", sentiment=Sentiment.POSITIVE, confidence=0.7, summary="Useful draft."),
        Comment(id=2, text="Not yet processed"),
    ]


def test_comments_to_frame(comments):
    df = comments_to_frame(comments)
    assert list(df.columns) == ["id", "comment", "sentiment", "confidence", "summary"]
    assert df.iloc[0].to_dict() == {
        "id": 1,
        "comment": "Useful draft.",
        "sentiment": "Positive",
        "confidence": "70%",
        "summary": "Useful draft.",
    }
    assert df.iloc[1]["sentiment"] == ""
    assert df.iloc[1]["confidence"] == ""


def test_comments_to_frame_empty():
    df = comments_to_frame([])
    assert df.empty
    assert list(df.columns) == ["id", "comment", "sentiment", "confidence", "summary"]


def test_word_cloud_sizes():
    sizes = word_cloud_sizes([WordFrequency("policy", 4), WordFrequency("draft", 2)])
    assert sizes == [("policy", 36.0), ("draft", 24.0)]
    assert word_cloud_sizes([]) == []


def test_export_to_json(tmp_path, comments):
    data = prepare_export(comments, overall_report(comments))
    out = tmp_path / "report.json"
    export_to_json(data, str(out))

    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert loaded["metadata"]["export_timestamp"] is not None
    assert loaded["summary"]["total_comments"] == 2
    assert loaded["summary"]["distribution"] == {"Positive": 1, "Negative": 0, "Neutral": 0}
    assert loaded["comments"][0]["sentiment"] == "Positive"
    assert loaded["comments"][1]["sentiment"] is None
