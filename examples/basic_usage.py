"""Basic usage examples for CivicEcho."""

from pathlib import Path

from civicecho import DashboardController
from civicecho.core import ingest, overall_report, word_frequency
from civicecho.services import enrich_comments


def example_sample_data():
    """Example: analyze the built-in sample comments."""
    print("🔍 Analyzing sample comments")

    controller = DashboardController(step=0.0)
    controller.use_sample_data()

    distribution = controller.distribution()
    print(f"📊 Distribution: {distribution.as_dict()}")
    print(f"🏆 Most common: {distribution.dominant().value}")
    for wf in controller.top_keywords():
        print(f"  {wf.word}: {wf.frequency}")


def example_csv_file():
    """Example: run the pipeline stages by hand over a CSV file."""
    csv_path = Path(__file__).parent / "sample_comments.csv"
    print(f"\n🔍 Analyzing {csv_path.name}")

    comments = enrich_comments(ingest(csv_path.read_text(encoding="utf-8")))
    for c in comments:
        print(f"  #{c.id} {c.sentiment.value} ({c.confidence:.2f}): {c.summary}")

    print(f"☁️ Top words: {[wf.word for wf in word_frequency(comments)[:5]]}")
    print(f"📝 {overall_report(comments).summary}")


if __name__ == "__main__":
    example_sample_data()
    example_csv_file()
