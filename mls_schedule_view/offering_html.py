"""
Read the MLS class offering table from a saved (or fetched) page and turn it
into class records.

Usage pattern:
- Open the class offering search in the browser and search for a course.
- Save the result page ("Save As -> Webpage, Complete" keeps the tbody
  elements the fixed selector expects).
- This module locates the offering table, pulls out each row's cell texts
  and hands them to the parser.

Offering table columns:
    Class Nbr | Course | Section | Days | Time | Room | Enrl Cap | Enrolled | Remarks
"""
from __future__ import annotations

from pathlib import Path
from typing import List

from bs4 import BeautifulSoup, Tag  # type: ignore[import]

from .fields import ROW_WIDTH
from .parser import ClassRecord, parse_rows

# Where the offering table sits on the MLS page
OFFERING_TABLE_SELECTOR = (
    "body > table:nth-child(5) > tbody > tr > td > table > tbody > "
    "tr:nth-child(3) > td > table > tbody > tr > td:nth-child(2) > form > table"
)

_HEADER_WORDS = {
    "class", "course", "section", "day", "days", "time",
    "room", "enrl", "cap", "enrolled", "remarks",
}


def _has_schedule_rows(table: Tag) -> bool:
    return any(len(tr.find_all("td")) == ROW_WIDTH for tr in table.find_all("tr"))


def _header_score(table: Tag) -> int:
    """Offering column names found in the table's own first row."""
    for tr in table.find_all("tr"):
        if tr.find_parent("table") is not table:
            continue
        words = set()
        for c in tr.find_all(["th", "td"], recursive=False):
            # layout wrappers hold the real table inside a cell
            if c.find("table") is None:
                words.update(c.get_text(" ", strip=True).lower().split())
        return len(_HEADER_WORDS.intersection(words))
    return 0


def find_offering_table(soup: BeautifulSoup) -> Tag | None:
    """
    Pick the offering table: the fixed MLS location first, else the table
    whose header names the most offering columns and that has 9-cell rows.
    """
    fixed = soup.select_one(OFFERING_TABLE_SELECTOR)
    if fixed is not None:
        return fixed

    candidates = []
    for table in soup.find_all("table"):
        if not _has_schedule_rows(table):
            continue
        score = _header_score(table)
        # at least two offering column names in the header
        if score >= 2:
            candidates.append((score, table))

    if not candidates:
        return None
    # prefer the innermost table on ties: it is the one listed last
    candidates.sort(key=lambda x: x[0])
    return candidates[-1][1]


def extract_rows(table: Tag) -> List[List[str]]:
    """Every <tr> (nested ones included) as a list of its trimmed <td> texts."""
    return [
        [td.get_text().strip() for td in tr.find_all("td")]
        for tr in table.find_all("tr")
    ]


def parse_offering_html(
    html_path: str | Path | None = None,
    html_content: str | None = None,
) -> List[ClassRecord]:
    """
    Parse a saved offering page or an HTML string.

    :param html_path: Path to HTML file saved from browser. Omit if html_content is provided.
    :param html_content: Raw HTML string (e.g. from fetch). Used when html_path is not provided.
    :returns: Class records in table order; empty if no row holds a valid class.
    """
    if html_content is not None:
        html = html_content
    elif html_path is not None:
        html = Path(html_path).read_text(encoding="utf-8", errors="ignore")
    else:
        raise ValueError("Provide either html_path or html_content.")
    soup = BeautifulSoup(html, "html.parser")

    table = find_offering_table(soup)
    if table is None:
        raise ValueError("Could not find the class offering table in HTML. Please check the file.")

    return parse_rows(extract_rows(table))
