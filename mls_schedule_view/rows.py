"""
Row classification for the offering grid.
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

from .fields import ROW_WIDTH


class RowKind(Enum):
    IGNORABLE = "ignorable"        # not a schedule row (e.g. professor-name line)
    NEW_RECORD = "new_record"      # leading class-number cell is filled
    CONTINUATION = "continuation"  # blank leading cell: extra meeting for the previous class


def classify_row(cells: Sequence[str]) -> RowKind:
    """Classify one row of cell texts. Pure; never raises."""
    if len(cells) != ROW_WIDTH:
        return RowKind.IGNORABLE
    if (cells[0] or "").strip():
        return RowKind.NEW_RECORD
    return RowKind.CONTINUATION
