#!/usr/bin/env python3
"""
Payout sheet -> JSON exporter.

Examples:
  python -m payout_tool.main payouts.xlsx payouts.json
  payout-tool payouts.xlsx out/payouts.json

Environment (a .env file in the working directory is honoured):
  PAYOUT_TOOL_LOG_LEVEL    logging level, default INFO
  PAYOUT_TOOL_JSON_INDENT  pretty-print indent; unset/empty => compact JSON

Notes:
- Rows that fail to parse are logged and skipped; the JSON always holds
  every row that did parse.
- A missing/unreadable workbook or an unwritable output path is fatal.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .io import open_payout_sheet, write_payout_json
from .structure import PayoutModel, build_payout_model


log = logging.getLogger("payout_tool")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    json_indent: Optional[int] = None


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def load_settings() -> Settings:
    indent = _env("PAYOUT_TOOL_JSON_INDENT")
    if indent and not indent.isdigit():
        raise ValueError(f"PAYOUT_TOOL_JSON_INDENT must be a non-negative integer, got {indent!r}")
    return Settings(
        log_level=_env("PAYOUT_TOOL_LOG_LEVEL", "INFO").upper() or "INFO",
        json_indent=int(indent) if indent else None,
    )


def convert(in_path: str | Path, out_path: str | Path, settings: Optional[Settings] = None) -> PayoutModel:
    settings = settings or Settings()

    with open_payout_sheet(in_path) as sheet:
        model = build_payout_model(sheet.rows)

    write_payout_json(model, out_path, indent=settings.json_indent)
    log.info("Wrote %d entry range(s) to %s", len(model.rows), out_path)
    return model


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="payout-tool",
        description="Export the first sheet of a payout workbook (.xlsx) to pointPrizeRanges JSON.",
    )
    ap.add_argument("input", help="Path to the payout workbook (.xlsx)")
    ap.add_argument("output", help="Path to the JSON file to write")
    args = ap.parse_args(argv)

    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

    convert(args.input, args.output, settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
