"""
Field codecs for the MLS class offering grid: day codes and "HHMM - HHMM"
time ranges.

All times are minute offsets from the daily anchor (07:30), the zero point
of the schedule view.
"""
from __future__ import annotations

import re
from typing import FrozenSet, Tuple


# ──────────────────────────────────────────────────────────────────
#  Shared constants
# ──────────────────────────────────────────────────────────────────

# Monday .. Saturday, calendar order. "H" is Thursday; Sunday has no code.
DAYS: Tuple[str, ...] = ("M", "T", "W", "H", "F", "S")

# 07:30 in minutes since midnight
ANCHOR_OFFSET = 450

# Minutes covered by the displayed day (07:30 - 21:15)
TOTAL_SPAN = 825

# Cells in a schedule-bearing row of the offering table
ROW_WIDTH = 9

TIME_RANGE_DELIMITER = " - "

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class InvalidDayField(ValueError):
    """Day-code text is empty or contains a character outside DAYS."""


# ──────────────────────────────────────────────────────────────────
#  Day codes
# ──────────────────────────────────────────────────────────────────

def decode_days(text: str) -> FrozenSet[str]:
    """
    Decode a day-code cell such as 'MWF' or 'TH' into a set of day symbols.

    Every character must be one of DAYS; the trimmed text must be non-empty.
    """
    text = (text or "").strip()
    if not text:
        raise InvalidDayField("empty day field")
    unknown = [ch for ch in text if ch not in DAYS]
    if unknown:
        raise InvalidDayField(f"unknown day code(s) {''.join(unknown)!r} in {text!r}")
    return frozenset(text)


def day_string(days) -> str:
    """Render a day set in calendar order, e.g. {'W', 'M'} -> 'MW'."""
    return "".join(d for d in DAYS if d in days)


# ──────────────────────────────────────────────────────────────────
#  Time ranges
# ──────────────────────────────────────────────────────────────────

def _leading_int(text: str) -> int | None:
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


def _token_minutes(token: str) -> int:
    """'0930' -> 120. Unparseable tokens decode to 0 instead of failing."""
    hour = _leading_int(token[0:2])
    minute = _leading_int(token[2:4])
    if hour is None or minute is None:
        return 0
    return hour * 60 + minute - ANCHOR_OFFSET


def decode_time_range(text: str) -> tuple[int, int]:
    """
    Decode '0900 - 1030' into (start, end) minute offsets from the anchor.

    Parsing is lenient: hour/minute ranges are not checked, a malformed token
    becomes 0, and a missing end token (no ' - ' delimiter) becomes 0.
    """
    tokens = (text or "").strip().split(TIME_RANGE_DELIMITER)
    start = _token_minutes(tokens[0])
    end = _token_minutes(tokens[1]) if len(tokens) > 1 else 0
    return start, end


def clock_label(offset: int) -> str:
    """Minute offset back to 24-hour 'HH:MM' (90 -> '09:00')."""
    total = offset + ANCHOR_OFFSET
    sign = "-" if total < 0 else ""
    hours, minutes = divmod(abs(total), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
