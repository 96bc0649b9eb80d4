"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]   Monthly accident counts per year
    fars map --state 6 --year 2013 [...]     Map one state's accident locations

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .utils.logging import configure_logging


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month-by-year accident counts.

    Years that cannot be loaded are reported as warnings and left out of
    the table.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data.summary import summarize_years

    try:
        table = summarize_years(
            args.years, data_dir=args.data_dir, output_dir=args.output,
            long=args.long,
        )
    except Exception as exc:
        _die(f"Summary failed: {exc}")

    if table.empty:
        print("No data loaded for the requested years.")
        return
    print(table.to_string(index=False))


def handle_map(args: argparse.Namespace) -> None:
    """Render one state's accident map to HTML or the default viewer.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import NO_DATA_MESSAGE, map_state

    try:
        fig = map_state(
            args.state, args.year,
            data_dir=args.data_dir, output_path=args.output,
        )
    except Exception as exc:
        _die(str(exc))

    if fig is None:
        print(NO_DATA_MESSAGE)
    elif args.output:
        print(f"✅  Map written to {args.output}")
    else:
        fig.show()


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System tools\n"
            "Summarize and map yearly accident_<year>.csv.bz2 census files."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        metavar="LEVEL",
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YEAR",
        help="One or more census years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 (default: cwd).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="DIR",
        help="Also write the summary table as CSV into this directory.",
    )
    p_sum.add_argument(
        "--long",
        action="store_true",
        default=False,
        help=(
            "Print one row per year/month pair (year, MONTH, n) instead of "
            "the month-by-year table."
        ),
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot accident locations for one state and year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="N",
        help="STATE code, e.g. 6 for California.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YEAR",
        help="Census year.",
    )
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 (default: cwd).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map to this HTML file instead of opening a viewer.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.json_logs)
    args.func(args)


if __name__ == "__main__":
    main()
