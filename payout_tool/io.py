#!/usr/bin/env python3
"""payout_tool.io

Workbook in, JSON out.

Reading:
- First sheet only, opened read-only with cached formula values
  (data_only=True), so a formula cell looks like the number Excel last
  computed for it.
- The workbook is closed when the `with` block exits, whatever happens
  inside it.

Writing:
- simplejson with use_decimal=True, so prizePercent keeps its two
  decimals on the wire (100.00, not 100.0).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

import simplejson
from openpyxl import load_workbook

from .structure import PayoutModel


log = logging.getLogger("payout_tool")


@dataclass
class PayoutSheet:
    title: str
    rows: Iterator[Sequence[Any]]


@contextmanager
def open_payout_sheet(path: str | Path) -> Iterator[PayoutSheet]:
    wb = load_workbook(Path(path), read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        log.info('"%s" has %s row(s)', ws.title, ws.max_row if ws.max_row is not None else "?")
        yield PayoutSheet(ws.title, ws.iter_rows(min_row=1, min_col=1))
    finally:
        wb.close()


def dumps_payout(model: PayoutModel, indent: Optional[int] = None) -> str:
    if indent is None:
        return simplejson.dumps(model.to_dict(), use_decimal=True, separators=(",", ":"))
    return simplejson.dumps(model.to_dict(), use_decimal=True, indent=indent)


def write_payout_json(model: PayoutModel, out_path: str | Path, indent: Optional[int] = None) -> None:
    # serialize before opening: a failure must not leave a truncated file
    text = dumps_payout(model, indent) + "\n"
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)
