"""
Rebuild class records from the rows of the MLS class offering table.

A class starts on a row whose first cell (class number) is filled. Extra
meetings of the same class follow on rows with a blank first cell, each
carrying its own day codes, time and room:

    | 1234 | CCPROG1 | S11 | MW | 0915 - 1045 | GK210 | 45 | 40 | |
    |      |         |     | F  | 1300 - 1430 | GK304 |    |    | |

A class whose day field is not a valid day code (e.g. "TBA") is skipped
together with its continuation rows, and parsing resumes at the next class.

Continuation rows are held to the same day-code check. One whose day cell is
blank or not a valid code (e.g. "TBA") adds no meeting, even if it has a time
and room; the class stays open for the rows after it. A meeting therefore
always has at least one day.

The scan is a pure step function over an explicit state:

- Idle: no class open yet
- Building: a class is open and collecting meetings
- Skipping: dropping rows of a rejected class
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from .fields import InvalidDayField, decode_days, decode_time_range
from .rows import RowKind, classify_row

logger = logging.getLogger(__name__)

# Column positions in a 9-cell schedule row
COL_CLASS_NBR = 0
COL_COURSE = 1
COL_SECTION = 2
COL_DAYS = 3
COL_TIME = 4
COL_ROOM = 5


@dataclass(frozen=True)
class ScheduleEntry:
    """One meeting window shared by every day in ``days``."""

    days: FrozenSet[str]
    room: str
    start_minute: int
    end_minute: int


@dataclass(frozen=True)
class ClassRecord:
    section: str
    schedule: Tuple[ScheduleEntry, ...] = ()
    # Not filled from the offering grid; kept for callers that enrich records.
    professor: str = ""
    query_string: str = ""


# ──────────────────────────────────────────────────────────────────
#  Parser states
# ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Building:
    record: ClassRecord
    day_buffer: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Skipping:
    pass


ParseState = Union[Idle, Building, Skipping]


def _cell(cells: Sequence[str], idx: int) -> str:
    return (cells[idx] or "").strip()


def _append_meeting(state: Building, cells: Sequence[str]) -> Building:
    """Decode the time cell, bind it to the staged days and clear the buffer."""
    start, end = decode_time_range(_cell(cells, COL_TIME))
    entry = ScheduleEntry(
        days=state.day_buffer,
        room=_cell(cells, COL_ROOM),
        start_minute=start,
        end_minute=end,
    )
    record = replace(state.record, schedule=state.record.schedule + (entry,))
    return Building(record=record)


def _start_record(cells: Sequence[str]) -> ParseState:
    try:
        days = decode_days(_cell(cells, COL_DAYS))
    except InvalidDayField as e:
        logger.debug(
            "Skipping class %s %s: %s",
            _cell(cells, COL_COURSE), _cell(cells, COL_SECTION), e,
        )
        return Skipping()
    building = Building(record=ClassRecord(section=_cell(cells, COL_SECTION)), day_buffer=days)
    return _append_meeting(building, cells)


def _continue_record(state: ParseState, cells: Sequence[str]) -> ParseState:
    if isinstance(state, Skipping):
        return state
    if isinstance(state, Idle):
        logger.debug("Ignoring continuation row before any class: %r", list(cells))
        return state
    try:
        days = decode_days(_cell(cells, COL_DAYS))
    except InvalidDayField:
        # blank or padded rows carry no meeting
        logger.debug("Continuation row without meeting for %s", state.record.section)
        return state
    return _append_meeting(replace(state, day_buffer=days), cells)


def step(state: ParseState, cells: Sequence[str]) -> tuple[ParseState, Optional[ClassRecord]]:
    """
    Feed one row. Returns the next state and the class record completed by
    this row, if any (a record completes when the next class row begins).
    """
    kind = classify_row(cells)
    if kind is RowKind.IGNORABLE:
        return state, None
    if kind is RowKind.NEW_RECORD:
        finished = state.record if isinstance(state, Building) else None
        return _start_record(cells), finished
    return _continue_record(state, cells), None


def finish(state: ParseState) -> Optional[ClassRecord]:
    """Flush the record still open at the end of the rows."""
    return state.record if isinstance(state, Building) else None


def parse_rows(rows: Iterable[Sequence[str]], skip_header: bool = True) -> List[ClassRecord]:
    """
    Parse rows of cell texts into class records, in table order.

    The first row is the table header and is dropped unless ``skip_header``
    is False. Malformed rows never abort the parse.
    """
    it = iter(rows)
    if skip_header:
        next(it, None)

    records: List[ClassRecord] = []
    state: ParseState = Idle()
    seen = 0
    for cells in it:
        seen += 1
        state, done = step(state, cells)
        if done is not None:
            records.append(done)
    last = finish(state)
    if last is not None:
        records.append(last)

    logger.info("Parsed %d class record(s) from %d row(s)", len(records), seen)
    return records
