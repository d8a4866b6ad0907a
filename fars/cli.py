"""
Command line entry point: ``fars summarize`` and ``fars map``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import InvalidStateError
from .pipeline import fars_summarize_years
from .plotting import fars_map_state

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "Summarize and map FARS fatal accident files named "
            "accident_<year>.csv.bz2."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    summarize = sub.add_parser(
        "summarize", help="Count accidents per month for one or more years."
    )
    summarize.add_argument("years", nargs="+", type=int, help="Census years.")
    summarize.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the accident files (default: working directory).",
    )
    summarize.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Also write the summary table to this CSV file.",
    )

    map_ = sub.add_parser("map", help="Map the accidents of one state in one year.")
    map_.add_argument("state", type=int, help="FARS state code, e.g. 1 for Alabama.")
    map_.add_argument("year", type=int, help="Census year.")
    map_.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the accident files (default: working directory).",
    )
    map_.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Write the map to this HTML file instead of opening a viewer.",
    )
    return parser.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_summarize(args: argparse.Namespace) -> int:
    summary = fars_summarize_years(args.years, data_dir=args.data_dir)
    print(summary.to_string(index=False))
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.output, index=False)
        logger.info("Saved summary to %s", args.output)
    return 0


def run_map(args: argparse.Namespace) -> int:
    fig = fars_map_state(
        args.state, args.year, data_dir=args.data_dir, show=args.html is None
    )
    if fig is not None and args.html is not None:
        args.html.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(args.html)
        logger.info("Saved map to %s", args.html)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args)

    try:
        if args.command == "summarize":
            return run_summarize(args)
        return run_map(args)
    except (FileNotFoundError, InvalidStateError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
