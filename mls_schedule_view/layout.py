"""
Per-day timeline layout for parsed class records.

For each weekday the meetings are bucketed by identical (start, end) window,
so concurrent sections stack in one block, and each block is placed by its
minute offsets as a percentage of TOTAL_SPAN. Values outside 0-100 are left
alone; clamping belongs to whatever draws the blocks.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .fields import DAYS, TOTAL_SPAN
from .parser import ClassRecord, ScheduleEntry

_WINDOW_KEY = re.compile(r"^(-?\d+)-(-?\d+)$")


@dataclass(frozen=True)
class Block:
    top: float
    height: float
    start_label: int
    end_label: int
    members: Tuple[str, ...]


def normalize(minutes: float) -> float:
    return minutes / TOTAL_SPAN * 100


# ──────────────────────────────────────────────────────────────────
#  Day index
# ──────────────────────────────────────────────────────────────────

def entries_for_day(
    records: Sequence[ClassRecord], day: str
) -> List[Tuple[ClassRecord, ScheduleEntry]]:
    """
    Pair each record meeting on ``day`` with its meeting for that day.

    When several entries of one record fall on the same day, the last one
    wins.
    """
    pairs: List[Tuple[ClassRecord, ScheduleEntry]] = []
    for record in records:
        chosen = None
        for entry in record.schedule:
            if day in entry.days:
                chosen = entry
        if chosen is not None:
            pairs.append((record, chosen))
    return pairs


# ──────────────────────────────────────────────────────────────────
#  Overlap grouping
# ──────────────────────────────────────────────────────────────────

def window_key(start: int, end: int) -> str:
    return f"{start}-{end}"


def split_window_key(key: str) -> tuple[int, int]:
    """'90-180' -> (90, 180); handles negative offsets like '-30--10'."""
    m = _WINDOW_KEY.match(key)
    if not m:
        raise ValueError(f"Not a window key: {key!r}")
    return int(m.group(1)), int(m.group(2))


def group_by_window(
    pairs: Sequence[Tuple[ClassRecord, ScheduleEntry]]
) -> Dict[str, List[ClassRecord]]:
    groups: Dict[str, List[ClassRecord]] = {}
    for record, entry in pairs:
        groups.setdefault(window_key(entry.start_minute, entry.end_minute), []).append(record)
    return groups


def sorted_windows(
    groups: Dict[str, List[ClassRecord]]
) -> List[Tuple[str, List[ClassRecord]]]:
    """Buckets ordered by numeric start; equal starts keep insertion order."""
    return sorted(groups.items(), key=lambda item: split_window_key(item[0])[0])


# ──────────────────────────────────────────────────────────────────
#  Layout
# ──────────────────────────────────────────────────────────────────

def layout_day(records: Sequence[ClassRecord], day: str) -> List[Block]:
    blocks: List[Block] = []
    for key, members in sorted_windows(group_by_window(entries_for_day(records, day))):
        start, end = split_window_key(key)
        blocks.append(Block(
            top=normalize(start),
            height=normalize(end - start),
            start_label=start,
            end_label=end,
            members=tuple(r.section for r in members),
        ))
    return blocks


def layout_week(records: Sequence[ClassRecord]) -> Dict[str, List[Block]]:
    """
    Blocks for every day in DAYS order. No records means no layout: an empty
    dict is returned.
    """
    if not records:
        return {}
    return {day: layout_day(records, day) for day in DAYS}
