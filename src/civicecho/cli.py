"""Command-line interface for CivicEcho."""

import argparse
import logging
import random
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .core.exceptions import InvalidCSVError
from .services.pipeline import DashboardController
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _make_controller(args) -> DashboardController:
    seed = args.seed if args.seed is not None else settings.random_seed
    # No animation on the command line
    return DashboardController(rng=random.Random(seed), step=0.0)


def _print_results(controller: DashboardController, out: str = None) -> None:
    report = controller.report()
    distribution = controller.distribution()

    print(f"\nAnalysis of {report.total_comments} comments")
    for label, count in distribution.as_dict().items():
        print(f"  {label}: {count}")
    print(f"Most common sentiment: {distribution.dominant().value}")
    print(f"Average length: {report.average_length} characters")
    print(f"Key themes: {', '.join(report.key_themes)}")

    print("\nSummary:")
    print(f"  {report.summary}")

    print("\nRecommendations:")
    for i, rec in enumerate(report.recommendations, 1):
        print(f"  {i}. {rec}")

    print("\nComments:")
    for c in controller.comments:
        print(f"  #{c.id} [{c.sentiment.value} {c.confidence:.2f}] {c.summary}")

    if out:
        export_to_json(prepare_export(controller.comments, report), out)
        print(f"\nResults exported to {out}")


def cmd_analyze(args):
    """Analyze a CSV file of comments."""
    path = Path(args.file)
    controller = _make_controller(args)
    count = controller.upload(path.read_bytes())
    print(f"Loaded {count} comments from {path.name}")
    _print_results(controller, args.out)


def cmd_sample(args):
    """Analyze the built-in sample comments."""
    controller = _make_controller(args)
    controller.use_sample_data()
    _print_results(controller, args.out)


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching CivicEcho UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CivicEcho - Stakeholder Comment Analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze a CSV file of comments')
    analyze_parser.add_argument('file', help='CSV file with id,comment rows')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--seed', type=int, help='Seed for neutral confidence values')

    # Sample command
    sample_parser = subparsers.add_parser('sample', help='Analyze the built-in sample comments')
    sample_parser.add_argument('--out', help='Output JSON file')
    sample_parser.add_argument('--seed', type=int, help='Seed for neutral confidence values')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'sample':
            cmd_sample(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except (InvalidCSVError, OSError) as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
