#!/usr/bin/env python3
"""
SENTIPREP CLI Application

Command-line interface for the review preprocessing pipeline.
"""

import argparse
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from sentiprep import get_logger

logger = get_logger(__name__)


def run_pipeline(args) -> int:
    """Run the full pipeline from an input CSV to a labeled CSV."""
    from sentiprep.core.config import Config
    from sentiprep.ingestion import read_reviews, write_reviews
    from sentiprep.preprocessing import PreprocessingPipeline, PipelineConfig

    # Command-line flags override the environment for this run only
    config = Config()
    if args.parts is not None:
        config.PART_COUNT = args.parts
    if args.seed is not None:
        config.RANDOM_SEED = args.seed
    if args.dictionary:
        config.DICTIONARY_PATH = args.dictionary
    if args.checkpoint_dir:
        config.CHECKPOINT_DIR = args.checkpoint_dir
    if args.no_spelling:
        config.ENABLE_SPELLING = False

    errors = config.validate()
    if errors:
        print("❌ Invalid configuration:")
        for error in errors:
            print(f"   - {error}")
        return 1

    pipeline_config = PipelineConfig.from_config(config)

    print(f"📥 Reading {args.input}")
    records = read_reviews(args.input)

    result = PreprocessingPipeline(pipeline_config).run(records)

    for stage in result.stages:
        print(f"   {stage.name:<11} {stage.input_count:>7} -> {stage.output_count:<7} "
              f"({stage.duration_seconds:.2f}s)")

    if result.degenerate:
        print("❌ Pipeline produced an empty dataset, check the input ratings and texts")
        return 1

    write_reviews(result.records, args.output)
    print(f"✅ Wrote {len(result.records)} labeled reviews to {args.output}")
    return 0


def report_issues(args) -> int:
    """Print data quality issues of an input CSV."""
    from sentiprep.ingestion import read_reviews
    from sentiprep.preprocessing import report_data_issues

    report = report_data_issues(read_reviews(args.input))

    print(f"🔍 {report.total_records} records in {args.input}")
    print(f"   Empty texts at positions: {report.empty_text_positions or 'none'}")
    for position, rating in report.invalid_ratings:
        print(f"   Invalid rating ({rating}) at position {position}")
    for group in report.duplicate_groups:
        print(f"   Duplicate \"{group.text[:60]}\" rating {group.rating}: "
              f"positions {group.positions} (count {group.count})")

    return 1 if report.has_issues else 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="SENTIPREP - Sentiment dataset preparation")
    parser.add_argument("--version", action="version", version="SENTIPREP 0.1.0")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Run the full preprocessing pipeline")
    run_parser.add_argument("input", help="Input CSV with ReviewText,Rating[,Sentiment]")
    run_parser.add_argument("output", help="Output CSV for labeled reviews")
    run_parser.add_argument("--parts", type=int, help="Number of rating bands")
    run_parser.add_argument("--seed", type=int, help="Random seed for balancing")
    run_parser.add_argument("--dictionary", help="Hunspell dictionary path without extension")
    run_parser.add_argument("--checkpoint-dir", help="Directory for per-stage CSV snapshots")
    run_parser.add_argument("--no-spelling", action="store_true",
                            help="Skip spelling correction")

    # Report command
    report_parser = subparsers.add_parser("report", help="Report data quality issues")
    report_parser.add_argument("input", help="Input CSV to inspect")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "run":
            return run_pipeline(args)
        elif args.command == "report":
            return report_issues(args)
    except KeyboardInterrupt:
        print("\n❌ Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Command failed: {e}")
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
