"""Adapter for results workbooks: one tab per event, one row per athlete or team.

Column headers vary from meet to meet, so each tab is read through its
SheetConfig aliases. Rows that can't be read are skipped and logged; a tab
that isn't configured, or a row missing a field its event requires, stops
the whole workbook.
"""

import json

from ..core.column_resolver import ColumnLookup
from ..core.models import RELAY_LEG_FIELDS, ResultField, ResultValidationError
from ..core.results import build_result
from ..core.sheet_config import SHEET_CONFIGS
from ..core.workbook import Workbook, row_text
from .base import BaseAdapter, ParseOutput


NO_NAME = 'No name'

# Copied into the result when the tab has a column for them
OPTIONAL_FIELDS = (
    ResultField.AGE, ResultField.HEAT, ResultField.LANE,
    ResultField.SEED, ResultField.ROUND,
) + RELAY_LEG_FIELDS


def _is_hurdles(norm: str) -> bool:
    return 'hurdles' in norm


def _is_joggers_mile(norm: str) -> bool:
    return 'jogger' in norm and 'mile' in norm


def _is_throw(norm: str) -> bool:
    return (('shot' in norm and 'put' in norm) or 'discus' in norm
            or 'javelin' in norm or 'hammer' in norm)


class WorkbookAdapter(BaseAdapter):
    """Parse a results Workbook into Result records.

    Args:
        sheet_configs: Sheet name -> SheetConfig table. Defaults to the
                       built-in SHEET_CONFIGS.
    """

    def __init__(self, sheet_configs: dict | None = None):
        self.sheet_configs = sheet_configs if sheet_configs is not None else SHEET_CONFIGS

    def parse(self, data: Workbook) -> ParseOutput:
        """Parse every tab in workbook order. The first tab error aborts."""
        results = []
        log = []
        for sheet_name in data.sheet_names:
            out = self.parse_sheet(sheet_name, data.sheet(sheet_name))
            log.extend(out.log)
            if out.error:
                return ParseOutput(results=[], error=out.error, log=log)
            results.extend(out.results)
        return ParseOutput(results=results, error=None, log=log)

    def parse_sheet(self, sheet_name: str, sheet: list) -> ParseOutput:
        """Parse one tab. Row 0 is the header."""
        config = self.sheet_configs.get(sheet_name)
        if config is None:
            return ParseOutput(error=f"Missing config for sheet name '{sheet_name}'")
        if len(sheet) <= 1:
            return ParseOutput()

        lookup = ColumnLookup(config.cols, sheet[0])
        mark_fallback = None
        if lookup.index(ResultField.MARK) is None:
            mark_fallback = lookup.first_blank_header()

        norm = sheet_name.strip().lower()
        results = []
        log = []
        for row_num, row in enumerate(sheet[1:], start=2):
            row = row or []
            mark = lookup.get(row, ResultField.MARK)
            if mark is None:
                if mark_fallback is None:
                    log.append(f"In the '{sheet_name}' tab, ignoring row: "
                               f"{json.dumps(row_text(row))}")
                    continue
                mark = row_text(row)[mark_fallback] if mark_fallback < len(row) else ''

            fields = self._row_fields(lookup, row, mark, norm)

            event = config.get_event(fields)
            if event is None:
                log.append(f"In the '{sheet_name}' tab, couldn't determine the event "
                           f"for row: {json.dumps(row_text(row))}")
                continue

            try:
                results.append(build_result(event, fields))
            except ResultValidationError as e:
                return ParseOutput(
                    error=f"In the '{sheet_name}' tab, row {row_num}: {e}", log=log)

        return ParseOutput(results=results, log=log)

    @staticmethod
    def _row_fields(lookup: ColumnLookup, row: list, mark: str, norm: str) -> dict:
        """Collect the ResultField values for one data row."""
        def get(field, default=''):
            value = lookup.get(row, field)
            return default if value is None else value

        fields = {
            ResultField.FIRST_NAME: get(ResultField.FIRST_NAME, NO_NAME),
            ResultField.LAST_NAME: get(ResultField.LAST_NAME, NO_NAME),
            ResultField.MARK: mark,
            ResultField.GENDER: get(ResultField.GENDER),
            ResultField.TEAM: get(ResultField.TEAM),
            ResultField.WIND: get(ResultField.WIND),
        }
        for field in OPTIONAL_FIELDS:
            value = lookup.get(row, field)
            if value is not None:
                fields[field] = value

        # Event-specific columns only count on the tabs they belong to
        if _is_hurdles(norm):
            fields[ResultField.HURDLE_HEIGHT] = get(ResultField.HURDLE_HEIGHT)
        elif _is_joggers_mile(norm):
            fields[ResultField.PREDICTED_TIME_MINS] = get(ResultField.PREDICTED_TIME_MINS)
            fields[ResultField.PREDICTED_TIME_SECS] = get(ResultField.PREDICTED_TIME_SECS)
        elif _is_throw(norm):
            fields[ResultField.IMPLEMENT_WEIGHT] = get(ResultField.IMPLEMENT_WEIGHT)
            fields[ResultField.IMPLEMENT_WEIGHT_UNIT] = get(ResultField.IMPLEMENT_WEIGHT_UNIT)
        return fields
