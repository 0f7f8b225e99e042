"""Resolve a sheet's header row into canonical result field columns.

Each sheet config maps a ResultField to the header texts it may appear
under. Header text is matched exactly after trimming and lowercasing.
"""

from .models import ResultField
from .workbook import cell_text


# Placeholder spreadsheet libraries give unlabeled header cells
EMPTY_COL = '__EMPTY'


def _norm(text: str) -> str:
    return text.strip().lower()


def resolve_columns(cols: dict, header_row: list) -> dict:
    """Map each configured field to the index of its column.

    The first header cell matching any alias wins. Fields with no aliases
    (e.g. athlete names on relay sheets) and fields missing from the header
    are left out of the result.
    """
    headers = [_norm(cell_text(c)) for c in header_row or []]
    col_map = {}
    for field, aliases in cols.items():
        wanted = {_norm(a) for a in aliases}
        if not wanted:
            continue
        for idx, header in enumerate(headers):
            if header in wanted:
                col_map[field] = idx
                break
    return col_map


class ColumnLookup:
    """Reads field values out of data rows using a resolved header."""

    def __init__(self, cols: dict, header_row: list):
        self.header_row = list(header_row or [])
        self.col_map = resolve_columns(cols, header_row)

    def index(self, field: ResultField) -> int | None:
        return self.col_map.get(field)

    def get(self, row: list, field: ResultField) -> str | None:
        """Cell text for `field`, None if the field has no column.

        Rows shorter than the header read as empty strings.
        """
        idx = self.col_map.get(field)
        if idx is None:
            return None
        return cell_text(row[idx]) if idx < len(row) else ''

    def first_blank_header(self) -> int | None:
        """Index of the first unlabeled header cell, where marks often hide."""
        for idx, cell in enumerate(self.header_row):
            text = cell_text(cell).strip()
            if not text or text.startswith(EMPTY_COL):
                return idx
        return None
