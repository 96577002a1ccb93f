#!/usr/bin/env python3
"""Generate the synthetic savings dataset and print descriptive statistics.

Reference sources come from the environment (see ``SavingsGenConfig.from_env``);
``--offline`` builds them with Faker instead.
"""

import argparse
import logging
import sys
from pathlib import Path

from savings_gen.analysis import (
    correlation_matrix,
    frequency_table,
    grouped_summary,
    missing_summary,
)
from savings_gen.config import SavingsGenConfig
from savings_gen.exceptions import SavingsGenError
from savings_gen.logging import setup_logging
from savings_gen.references import build_sample_references
from savings_gen.scenarios import SavingsScenario
from savings_gen.sinks import ConsoleSink, CsvFileSink, JsonFileSink

logger = logging.getLogger("savings_gen.scripts.generate_dataset")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Build reference tables with Faker instead of reading sources",
    )
    parser.add_argument("--seed-offset", type=int, default=None, help="Shift every stage seed")
    parser.add_argument("--num-customers", type=int, default=None)
    parser.add_argument("--output-dir", type=Path, default=None)
    parser.add_argument("--format", choices=["csv", "json"], default=None)
    parser.add_argument("--preview", action="store_true", help="Print table previews")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", choices=["standard", "json"], default="standard")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SavingsGenConfig:
    """Environment config with command-line overrides applied."""
    config = SavingsGenConfig.from_env()
    if args.seed_offset is not None:
        config.seeds = config.seeds.shifted(args.seed_offset)
    if args.num_customers is not None:
        config.generation.num_customers = args.num_customers
    if args.output_dir is not None:
        config.output.output_dir = args.output_dir
    if args.format is not None:
        config.output.format = args.format
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def print_report(scenario: SavingsScenario) -> None:
    """Print the summary and descriptive statistics."""
    merged = scenario.dataset.merged

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for key, value in scenario.get_summary().items():
        print(f"{key + ':':28}{value}")

    print("\nMissing values")
    print(missing_summary(merged).to_string())
    print("\nEducation")
    print(frequency_table(merged, "education").to_string())
    print("\nMonthly salary by education")
    print(grouped_summary(merged, "education", "monthly_salary").round(1).to_string())
    print("\nAge by education")
    print(grouped_summary(merged, "education", "age").round(1).to_string())
    print("\nCorrelation")
    print(correlation_matrix(merged).to_string())


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline, print the report and export the tables."""
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(level=config.log_level, format_type=args.log_format)

    references = build_sample_references() if args.offline else None

    try:
        scenario = SavingsScenario(config=config, references=references)
        scenario.generate()
    except SavingsGenError:
        logger.exception("Dataset generation failed")
        return 1

    print_report(scenario)

    if config.output.format == "json":
        sink = JsonFileSink(config.output.output_dir, pretty=config.output.pretty_json)
    else:
        sink = CsvFileSink(config.output.output_dir)
    sinks = [sink, ConsoleSink()] if args.preview else [sink]

    try:
        scenario.export(sinks)
    except SavingsGenError:
        logger.exception("Export failed")
        return 1
    finally:
        for open_sink in sinks:
            open_sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
