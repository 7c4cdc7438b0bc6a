from pathlib import Path

import pytest
from openpyxl import Workbook


@pytest.fixture
def make_workbook(tmp_path: Path):
    """Write rows to the first sheet of a fresh .xlsx and return its path."""

    def _make(rows, name: str = "payouts.xlsx", title: str = "Payouts") -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = title
        for row in rows:
            ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _make
