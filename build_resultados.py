#!/usr/bin/env python3
"""
Results Build CLI

Builds assets/data/resultados.json from the OPL-format CSV exports in
assets/resultados csv/. Paths come from build_config.json when present.

Usage:
    python build_resultados.py
    python build_resultados.py --layout single
    python build_resultados.py --csv-dir exports/ --output site/data/resultados.json
"""

import argparse
import sys
from pathlib import Path

from oplbuild import BuildError, build_resultados, get_config
from oplbuild.config import get_csv_dir, get_output_path, resolve_path
from oplbuild.logging_config import setup_logging, verbosity_to_levels


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the competition results JSON from OPL CSV exports")
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to build_config.json (defaults to the project's build_config.json)",
    )
    parser.add_argument(
        "--csv-dir", "-i",
        default=None,
        help="Directory of .csv / .opl.csv exports (overrides config)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for the results JSON (overrides config)",
    )
    parser.add_argument(
        "--layout",
        choices=["partitioned", "single"],
        default=None,
        help="Output layout: male/female buckets ranked by points, or one list ranked by total",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log skipped files (-v) and skipped rows too (-vv)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level, row_level = verbosity_to_levels(args.verbose, args.quiet)

    try:
        config = get_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        setup_logging(level=level, row_level=row_level).error(f'Invalid configuration: {e}')
        return 1

    log_dir = resolve_path(config.log_dir) if config.log_dir else None
    logger = setup_logging(
        log_dir=log_dir, level=level, row_level=row_level, log_to_file=log_dir is not None
    )

    csv_dir = Path(args.csv_dir) if args.csv_dir else get_csv_dir(config)
    output_path = Path(args.output) if args.output else get_output_path(config)
    layout = args.layout or config.output_layout

    try:
        build_resultados(csv_dir, output_path, layout=layout, indent=config.indent)
    except BuildError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
