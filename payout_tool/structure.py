#!/usr/bin/env python3
"""
Payout structure builder.

Sheet layout (first sheet of the workbook):

  +---------------+-----+-----+
  | Range \\ Ranks |  1  |  2  |   <- row 0: winner rank ranges
  +---------------+-----+-----+
  |       2       | 1.0 |     |   <- entry range, then payout fraction per rank
  +---------------+-----+-----+
  |      3-10     | 0.7 | 0.3 |
  +---------------+-----+-----+

produces

  {"pointPrizeRanges":[
    {"minEntries":2,"maxEntries":2,"prizes":[{"minRank":1,"maxRank":1,"prizePercent":100.00}]},
    {"minEntries":3,"maxEntries":10,"prizes":[{"minRank":1,"maxRank":1,"prizePercent":70.00},
                                              {"minRank":2,"maxRank":2,"prizePercent":30.00}]}
  ]}

Rows and header are scanned left to right and the scan stops at the first
blank cell; anything to the right of a blank is never read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .common import fraction_to_percent, normalize_cell
from .ranges import Interval, NumberFormatError, RangeFormatError, parse_range


log = logging.getLogger("payout_tool")

RANK_ROW_INDEX = 0   # row holding winner ranks
RANGE_COL_INDEX = 0  # column holding entry ranges

RankLookup = Dict[int, Interval]


class RowParseError(ValueError):
    """A single sheet row could not be parsed; the cause is chained."""

    def __init__(self, row_index: Optional[int], message: str):
        super().__init__(f"row {row_index}: {message}")
        self.row_index = row_index


@dataclass
class PayoutEntry:
    rank_range: Interval
    prize_percent: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minRank": self.rank_range.min,
            "maxRank": self.rank_range.max,
            "prizePercent": self.prize_percent,
        }


@dataclass
class PayoutRow:
    entry_range: Interval
    entries: List[PayoutEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minEntries": self.entry_range.min,
            "maxEntries": self.entry_range.max,
            "prizes": [e.to_dict() for e in self.entries],
        }


@dataclass
class PayoutModel:
    rows: List[PayoutRow] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"pointPrizeRanges": [r.to_dict() for r in self.rows]}


def _populated(row: Sequence[Any]):
    """Yield (column, text) until the first blank cell."""
    for c, cell in enumerate(row):
        try:
            text = normalize_cell(cell)
        except NumberFormatError as e:
            raise NumberFormatError(f"column {c}: {e}") from e
        if text is None:
            return
        yield c, text


def build_rank_lookup(header_row: Sequence[Any], row_index: int = RANK_ROW_INDEX) -> RankLookup:
    ranks: RankLookup = {}
    try:
        for c, text in _populated(header_row):
            if c != RANGE_COL_INDEX:
                ranks[c] = parse_range(text)
    except (RangeFormatError, NumberFormatError) as e:
        raise RowParseError(row_index, str(e)) from e
    return ranks


def build_row(
    data_row: Sequence[Any],
    rank_lookup: RankLookup,
    row_index: Optional[int] = None,
) -> Optional[PayoutRow]:
    """
    Parse one data row against the header's rank lookup.

    Returns None when the row yields no prizes (blank key, label-only row,
    or only cells without a matching header column).
    """
    entry_range: Optional[Interval] = None
    entries: List[PayoutEntry] = []

    try:
        for c, text in _populated(data_row):
            if c == RANGE_COL_INDEX:
                entry_range = parse_range(text)
                continue

            rank = rank_lookup.get(c)
            if rank is None:
                log.debug("row %s: column %d has no rank header, skipping cell", row_index, c)
                continue
            entries.append(PayoutEntry(rank, fraction_to_percent(text)))
    except (RangeFormatError, NumberFormatError) as e:
        raise RowParseError(row_index, str(e)) from e

    if entry_range is None or not entries:
        return None
    return PayoutRow(entry_range, entries)


def assemble(rows: Iterable[Optional[PayoutRow]]) -> PayoutModel:
    return PayoutModel([r for r in rows if r is not None and r.entries])


def build_payout_model(rows: Iterable[Sequence[Any]]) -> PayoutModel:
    """
    Run the whole sheet: row 0 -> rank lookup, every later row -> PayoutRow.

    A row that fails to parse is logged and skipped; the run never fails
    because of sheet content.
    """
    ranks: RankLookup = {}
    built: List[Optional[PayoutRow]] = []

    for r, row in enumerate(rows):
        try:
            if r == RANK_ROW_INDEX:
                ranks = build_rank_lookup(row, r)
            else:
                built.append(build_row(row, ranks, r))
        except RowParseError as e:
            log.warning("Failed to parse row %d: %s", r, e.__cause__ or e)

    return assemble(built)
