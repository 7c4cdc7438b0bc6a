#!/usr/bin/env python3
"""
Print what the payout parser sees: the normalized text of every cell on
the first sheet, scanned the same way the converter scans it.

Usage:
  python -m scripts.dump_payout_sheet --wb payouts.xlsx
  python -m scripts.dump_payout_sheet --wb payouts.xlsx --out outputs/payouts_cells.json
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Iterable, Optional, Sequence

from payout_tool.common import normalize_cell
from payout_tool.io import open_payout_sheet
from payout_tool.ranges import NumberFormatError


def _cell_text(cell: Any) -> Optional[str]:
    try:
        return normalize_cell(cell)
    except NumberFormatError as e:
        return f"<{e}>"


def dump_rows(rows: Iterable[Sequence[Any]]) -> list[list[Optional[str]]]:
    return [[_cell_text(c) for c in row] for row in rows]


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--wb", required=True, help="Path to the payout workbook")
    ap.add_argument("--out", default=None, help="Optional JSON file to write instead of printing")
    args = ap.parse_args()

    with open_payout_sheet(args.wb) as sheet:
        title = sheet.title
        data = dump_rows(sheet.rows)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump({"workbook": args.wb, "sheet": title, "values": data}, f, indent=2)
        print(f"Wrote {len(data)} row(s) to: {args.out}")
        return

    print(f"Sheet: {title}")
    for r, row in enumerate(data):
        print(f"{r:4d}  {row!r}")


if __name__ == "__main__":
    main()
