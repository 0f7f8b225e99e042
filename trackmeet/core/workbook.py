"""Workbook model handed to the parser by the presentation layer.

A workbook is an ordered list of sheet names plus a grid of cells per sheet.
Row 0 of every sheet is the header row. Cells can be `Cell` objects, dicts
with a "v" key (the shape spreadsheet libraries emit) or plain values.
"""

import json
from dataclasses import dataclass, field


# Sheets that carry instructions or meet info rather than results
NON_DATA_SHEETS = ('Instructions', 'Info', 'Meet Info', 'README', 'Template')


@dataclass
class Cell:
    value: object = ''


@dataclass
class Workbook:
    sheet_names: list = field(default_factory=list)
    sheets: dict = field(default_factory=dict)   # sheet name -> list of rows

    def sheet(self, name: str) -> list:
        return self.sheets.get(name, [])


def cell_text(cell) -> str:
    """Return the text of a cell. Whole floats print without '.0'."""
    if isinstance(cell, Cell):
        cell = cell.value
    elif isinstance(cell, dict):
        cell = cell.get('v', '')
    if cell is None:
        return ''
    if isinstance(cell, bool):
        return str(cell).upper()
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def row_text(row) -> list[str]:
    return [cell_text(c) for c in row or []]


def exclude_sheets(workbook: Workbook, names=NON_DATA_SHEETS) -> Workbook:
    """Return a copy of the workbook without the named sheets (case-insensitive)."""
    skip = {n.strip().lower() for n in names}
    kept = [n for n in workbook.sheet_names if n.strip().lower() not in skip]
    return Workbook(sheet_names=kept,
                    sheets={n: workbook.sheets[n] for n in kept if n in workbook.sheets})


def workbook_from_dict(data: dict) -> Workbook:
    """Build a Workbook from decoded JSON.

    Accepts either the spreadsheet-library shape
    {"SheetNames": [...], "Sheets": {name: rows}} or a plain {name: rows}
    object (sheet order = key order).
    """
    if not isinstance(data, dict):
        raise ValueError("Workbook JSON must be an object")

    if 'Sheets' in data:
        sheets = data['Sheets']
        if not isinstance(sheets, dict):
            raise ValueError("Workbook 'Sheets' must be an object keyed by sheet name")
        names = data.get('SheetNames') or list(sheets)
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError("Workbook 'SheetNames' must be a list of names")
    else:
        sheets = data
        names = list(sheets)

    for name in names:
        grid = sheets.get(name)
        if not isinstance(grid, list) or not all(isinstance(r, list) for r in grid):
            raise ValueError(f"Sheet '{name}' must be a list of rows")
    return Workbook(sheet_names=list(names), sheets={n: sheets[n] for n in names})


def load_workbook_json(data_path: str) -> Workbook:
    """Load a workbook saved as JSON (optionally double-encoded)."""
    with open(data_path, 'r', encoding='utf-8') as f:
        content = f.read().strip()

    try:
        data = json.loads(content)
        # Auto-saved JS exports are sometimes JSON-encoded twice
        if isinstance(data, str):
            data = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid workbook JSON in {data_path}: {e}") from e

    return workbook_from_dict(data)
