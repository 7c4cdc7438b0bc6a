#!/usr/bin/env python3
"""
payout_tool.ranges

Range notation used on both axes of a payout sheet:

  "3"     -> min=3,  max=3
  "3-10"  -> min=3,  max=10
  "10+"   -> min=10, max=None (no upper limit)

Numbers are read the way a lenient spreadsheet/locale parser reads them:
grouping commas are accepted ("1,000"), the leading numeric token wins and
anything after it is ignored ("10+" -> 10), fractions are truncated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


class NumberFormatError(ValueError):
    pass


class RangeFormatError(ValueError):
    pass


_NUMBER_RE = re.compile(r"\s*([+-]?\d[\d,]*(?:\.\d*)?)")


@dataclass(frozen=True)
class Interval:
    min: int
    max: Optional[int]  # None => unbounded

    @property
    def unbounded(self) -> bool:
        return self.max is None


def parse_number(text: str) -> int:
    """Read the leading number of `text` and truncate it to an int."""
    m = _NUMBER_RE.match(text or "")
    if not m:
        raise NumberFormatError(f"Unparseable number: {text!r}")
    return int(Decimal(m.group(1).replace(",", "")))


def parse_range(text: str) -> Interval:
    try:
        # index > 0 so a leading minus sign is not taken as a separator
        sep = text.find("-")
        if sep > 0:
            lo = parse_number(text[:sep])
            hi = parse_number(text[sep + 1:])
        elif text.find("+") > 0:
            lo, hi = parse_number(text), None
        else:
            lo = hi = parse_number(text)
    except NumberFormatError as e:
        raise RangeFormatError(f"Invalid range {text!r}: {e}") from e

    if hi is not None and lo > hi:
        raise RangeFormatError(f"Invalid range {text!r}: min {lo} > max {hi}")
    return Interval(lo, hi)
