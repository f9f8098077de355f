"""
Command-line interface: read the MLS class offering table and export the
weekly schedule layout.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .export import export
from .fields import DAYS, clock_label, day_string
from .layout import layout_day
from .offering_fetch import fetch_offering_html
from .offering_html import parse_offering_html


def _print_classes(records) -> None:
    print("Section  | Days   | Time          | Room")
    print("-" * 50)
    for r in records:
        for i, e in enumerate(r.schedule):
            section = r.section if i == 0 else ""
            time_range = f"{clock_label(e.start_minute)}-{clock_label(e.end_minute)}"
            print(f"{section:<8} | {day_string(e.days):<6} | {time_range:<13} | {e.room}")


def _print_day(records, day: str) -> None:
    blocks = layout_day(records, day)
    if not blocks:
        print(f"No classes on {day}.")
        return
    for b in blocks:
        print(
            f"{clock_label(b.start_label)}-{clock_label(b.end_label)}  "
            f"top={b.top:.2f}% height={b.height:.2f}%  {', '.join(b.members)}"
        )


def main() -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Lay out MLS class offerings as a weekly schedule (JSON / CSV).\n"
            "- Read a saved class offering page, or fetch it in a browser."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-o",
        "--output",
        default="mls_schedule",
        help="Output path (without extension). Default: mls_schedule",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Export format. Default: json",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--html",
        metavar="HTML_PATH",
        help="Saved class offering page.",
    )
    mode.add_argument(
        "--fetch",
        metavar="URL",
        help="Open the class offering page in Chrome; search there, then press Enter in the terminal.",
    )
    parser.add_argument(
        "--list-classes",
        action="store_true",
        help="List parsed sections with their meetings, then exit.",
    )
    parser.add_argument(
        "--day",
        choices=list(DAYS),
        help="Print the layout blocks for one day (M T W H F S) instead of exporting.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.fetch:
        try:
            print("Opening class offering page...")
            html = fetch_offering_html(args.fetch)
        except Exception as e:
            print(f"Error fetching class offerings: {e}", file=sys.stderr)
            return 1
        source = {"html_content": html}
    elif args.html:
        source = {"html_path": args.html}
    else:
        print(
            "No mode specified. Use --html for a saved class offering page "
            "or --fetch to open it in a browser.",
            file=sys.stderr,
        )
        return 1

    try:
        records = parse_offering_html(**source)
    except Exception as e:
        print(f"Error parsing class offering HTML: {e}", file=sys.stderr)
        return 1

    if not records:
        print("No valid class rows found in the class offering table.", file=sys.stderr)
        return 1

    if args.list_classes:
        _print_classes(records)
        return 0
    if args.day:
        _print_day(records, args.day)
        return 0

    ext = {"json": ".json", "csv": ".csv"}[args.format]
    out_path = Path(args.output).with_suffix(ext) if Path(args.output).suffix else Path(args.output + ext)
    export(records, out_path, args.format)
    print(f"Exported {len(records)} class(es) to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
