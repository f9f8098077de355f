"""
Export parsed classes and their weekly layout to JSON and CSV.
"""
from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Sequence

from .fields import clock_label, day_string
from .layout import Block, layout_week
from .parser import ClassRecord

CSV_FIELDS = ["section", "days", "room", "start_minute", "end_minute", "start", "end"]


def record_to_dict(record: ClassRecord) -> dict:
    return {
        "section": record.section,
        "professor": record.professor,
        "queryString": record.query_string,
        "schedule": [
            {
                "days": day_string(e.days),
                "room": e.room,
                "startMinute": e.start_minute,
                "endMinute": e.end_minute,
                "start": clock_label(e.start_minute),
                "end": clock_label(e.end_minute),
            }
            for e in record.schedule
        ],
    }


def block_to_dict(block: Block) -> dict:
    return {
        "top": block.top,
        "height": block.height,
        "startLabel": block.start_label,
        "endLabel": block.end_label,
        "start": clock_label(block.start_label),
        "end": clock_label(block.end_label),
        "members": list(block.members),
    }


def export_json(records: Sequence[ClassRecord], out_path: str | Path) -> None:
    """Records plus per-day blocks, for a renderer."""
    payload = {
        "records": [record_to_dict(r) for r in records],
        "days": {
            day: [block_to_dict(b) for b in blocks]
            for day, blocks in layout_week(records).items()
        },
    }
    Path(out_path).write_text(
        json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
    )


def export_csv(records: Sequence[ClassRecord], out_path: str | Path) -> None:
    """One row per meeting."""
    if not records:
        Path(out_path).write_text("", encoding="utf-8")
        return
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in records:
            for e in r.schedule:
                w.writerow({
                    "section": r.section,
                    "days": day_string(e.days),
                    "room": e.room,
                    "start_minute": e.start_minute,
                    "end_minute": e.end_minute,
                    "start": clock_label(e.start_minute),
                    "end": clock_label(e.end_minute),
                })


def export(records: Sequence[ClassRecord], out_path: str | Path, fmt: str) -> None:
    """Export to the given format: json or csv."""
    fmt = fmt.lower()
    if fmt == "json":
        export_json(records, out_path)
    elif fmt == "csv":
        export_csv(records, out_path)
    else:
        raise ValueError(f"Unsupported format: {fmt}. Use json or csv.")
