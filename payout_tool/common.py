#!/usr/bin/env python3
"""
Common cell helpers for the payout sheet converter.

Key design goal: every cell reaches the parsers as text, the same way
whether it sits in the header or in a data row.
- Numeric cells (and formulas, read through their cached value) are
  formatted like the "0.####" pattern so float noise never leaks through
  (0.30000000000000004 -> "0.3").
- Payout fractions become percentages truncated to 2 decimals, so a
  column never sums to more than 100% through rounding.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any, Optional

from .ranges import NumberFormatError


FOUR_PLACES = Decimal("0.0001")
CENTS = Decimal("0.01")
HUNDRED = Decimal(100)


def format_number(value: Any) -> Optional[str]:
    """
    Format a number with at most 4 fractional digits (half-even), trimming
    trailing zeros. Returns None for NaN/inf.

    Raises NumberFormatError when the value has too many digits to be
    held at 4 decimal places (from about 1e25).
    """
    d = Decimal(value)
    if not d.is_finite():
        return None

    try:
        q = d.quantize(FOUR_PLACES, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as e:
        raise NumberFormatError(f"Number out of range: {value!r}") from e

    s = format(q, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def normalize_cell(cell: Any) -> Optional[str]:
    """
    Reduce an openpyxl cell (or a raw cell value) to text.

    None means "no more populated cells": blank, boolean, error and date
    cells all end the scan of a row. Numbers too large to format raise
    NumberFormatError.
    """
    if hasattr(cell, "data_type"):
        if cell.data_type == "e":
            return None
        value = cell.value
    else:
        value = cell

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)
    if isinstance(value, str):
        return value if value.strip() else None
    return None


def fraction_to_percent(text: str) -> Decimal:
    """
    '0.7035' -> Decimal('70.35'); never rounds up.

    Parsing is strict: surrounding whitespace, digit separators ("_", ",")
    and percent signs are rejected.
    """
    if text != text.strip() or "_" in text:
        raise NumberFormatError(f"Unparseable payout fraction: {text!r}")
    try:
        d = Decimal(text)
    except InvalidOperation as e:
        raise NumberFormatError(f"Unparseable payout fraction: {text!r}") from e
    if not d.is_finite():
        raise NumberFormatError(f"Unparseable payout fraction: {text!r}")
    try:
        return (d * HUNDRED).quantize(CENTS, rounding=ROUND_DOWN)
    except InvalidOperation as e:
        raise NumberFormatError(f"Payout fraction out of range: {text!r}") from e
