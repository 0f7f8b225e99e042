"""Per-sheet configuration: which event a tab holds and how its columns are named.

SHEET_CONFIGS is plain data keyed by exact sheet name. Meets that label
their tabs or columns differently can override entries from a JSON file
(see `load_sheet_configs`) without touching the parser.
"""

import json
import os
from collections.abc import Callable
from dataclasses import dataclass

from .models import Event, ResultField, RELAY_LEG_FIELDS


@dataclass(frozen=True)
class SheetConfig:
    """How to read one results tab."""
    get_event: Callable    # fields -> Event | None
    cols: dict             # ResultField -> list of header aliases


def constant_event(event: Event) -> Callable:
    """Event resolver for tabs that hold a single event."""
    def get_event(fields: dict) -> Event:
        return event
    return get_event


# Checked in order against the hurdle height text
_HURDLE_HEIGHTS = (
    ('100m', Event.E100_HURDLES),
    ('110HH', Event.E110_HURDLES),
    ('80m', Event.E80_HURDLES),
    ('300m', Event.E300_HURDLES),
    ('400m', Event.E400_HURDLES),
)


def hurdles_event(fields: dict) -> Event | None:
    """Hurdles tabs mix races; the hurdle height column says which one."""
    height = fields.get(ResultField.HURDLE_HEIGHT)
    if not height:
        return None
    for pattern, event in _HURDLE_HEIGHTS:
        if pattern in height:
            return event
    return None


_COMMON_COLS = {
    ResultField.AGE: ['Age'],
    ResultField.FIRST_NAME: ['First Name'],
    ResultField.LAST_NAME: ['Last Name'],
    ResultField.TEAM: ['Club/Team'],
    ResultField.GENDER: ['Gender'],
    ResultField.HEAT: ['Heat'],
    ResultField.LANE: ['Lane'],
    ResultField.SEED: ['Seed', 'Seed Time'],
    ResultField.ROUND: ['Round'],
}

DEFAULT_COLS = {
    **_COMMON_COLS,
    ResultField.WIND: ['Wind', 'Wind speed', 'Windspeed'],
    ResultField.MARK: ['Results', 'Result'],
    # Usually one "4kg" cell feeding both fields
    ResultField.IMPLEMENT_WEIGHT: ['Implement Weight', 'Implement Size', 'Implement'],
    ResultField.IMPLEMENT_WEIGHT_UNIT: ['Implement Unit', 'Implement Size', 'Implement'],
}

HURDLES_COLS = {
    **_COMMON_COLS,
    ResultField.WIND: ['Wind', 'Wind speed', 'Windspeed'],
    ResultField.MARK: ['Results', 'Result'],
    ResultField.HURDLE_HEIGHT: ['Hurdle Height: Inches', 'Event Hurdle Height: Inches',
                                'Hurdle Height'],
}

JOGGERS_MILE_COLS = {
    **_COMMON_COLS,
    ResultField.PREDICTED_TIME_MINS: ['Predicted Time: Minutes', 'Time: Minutes'],
    ResultField.PREDICTED_TIME_SECS: ['Predicted Time: Seconds', 'Time: Seconds'],
    ResultField.MARK: ['Time', 'Results', 'Result'],
}

RELAY_COLS = {
    # Relay rows are teams, not athletes
    ResultField.AGE: [],
    ResultField.FIRST_NAME: [],
    ResultField.LAST_NAME: [],
    ResultField.GENDER: ['Gender'],
    ResultField.TEAM: ['Team Name', 'Club/Team'],
    ResultField.HEAT: ['Heat'],
    ResultField.LANE: ['Lane'],
    ResultField.SEED: ['Seed', 'Seed Time'],
    ResultField.ROUND: ['Round'],
    ResultField.MARK: ['Results', 'Result'],
    **{f: [f'Leg {i}', f'Runner {i}', f'Athlete {i}']
       for i, f in enumerate(RELAY_LEG_FIELDS, start=1)},
}

COLUMN_SETS = {
    'default': DEFAULT_COLS,
    'hurdles': HURDLES_COLS,
    'joggers_mile': JOGGERS_MILE_COLS,
    'relay': RELAY_COLS,
}


SHEET_CONFIGS = {
    '100m': SheetConfig(constant_event(Event.E100), DEFAULT_COLS),
    '200m': SheetConfig(constant_event(Event.E200), DEFAULT_COLS),
    '400m': SheetConfig(constant_event(Event.E400), DEFAULT_COLS),
    '800m': SheetConfig(constant_event(Event.E800), DEFAULT_COLS),
    '1500m': SheetConfig(constant_event(Event.E1500), DEFAULT_COLS),
    'Mile': SheetConfig(constant_event(Event.E_MILE), DEFAULT_COLS),
    'Joggers Mile': SheetConfig(constant_event(Event.E_JOGGERS_MILE), JOGGERS_MILE_COLS),
    '3000': SheetConfig(constant_event(Event.E3000), DEFAULT_COLS),
    '2 Mile': SheetConfig(constant_event(Event.E_2MILE), DEFAULT_COLS),
    '5000m': SheetConfig(constant_event(Event.E5000), DEFAULT_COLS),
    '10000m': SheetConfig(constant_event(Event.E10000), DEFAULT_COLS),
    'Race Walk': SheetConfig(constant_event(Event.E_RACE_WALK), DEFAULT_COLS),
    'Triple Jump': SheetConfig(constant_event(Event.E_TRIPLE_JUMP), DEFAULT_COLS),
    'Long Jump': SheetConfig(constant_event(Event.E_LONG_JUMP), DEFAULT_COLS),
    'High Jump': SheetConfig(constant_event(Event.E_HIGH_JUMP), DEFAULT_COLS),
    'Pole Vault': SheetConfig(constant_event(Event.E_POLE_VAULT), DEFAULT_COLS),
    'Javelin': SheetConfig(constant_event(Event.E_JAVELIN), DEFAULT_COLS),
    'Shot Put': SheetConfig(constant_event(Event.E_SHOT_PUT), DEFAULT_COLS),
    'Discus': SheetConfig(constant_event(Event.E_DISCUS), DEFAULT_COLS),
    'Hurdles': SheetConfig(hurdles_event, HURDLES_COLS),
    '4x100m': SheetConfig(constant_event(Event.E4X100), RELAY_COLS),
    '4x200m': SheetConfig(constant_event(Event.E4X200), RELAY_COLS),
    '4x400m': SheetConfig(constant_event(Event.E4X400), RELAY_COLS),
    'DMR': SheetConfig(constant_event(Event.E_DMR), RELAY_COLS),
    'SMR': SheetConfig(constant_event(Event.E_SMR), RELAY_COLS),
}


def _config_from_json(sheet_name: str, entry: dict) -> SheetConfig:
    """Build a SheetConfig from one JSON override entry.

    Entry shape: {"event": "<Event value> | hurdles",
                  "columns": "<column set name>" | {"FIELD_NAME": [aliases]}}
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Sheet '{sheet_name}': entry must be an object")
    event_name = entry.get('event', '')
    if not isinstance(event_name, str):
        raise ValueError(f"Sheet '{sheet_name}': event must be a string")
    if event_name.lower() == 'hurdles':
        get_event = hurdles_event
    else:
        try:
            get_event = constant_event(Event(event_name))
        except ValueError:
            raise ValueError(f"Sheet '{sheet_name}': unknown event {event_name!r}") from None

    columns = entry.get('columns', 'default')
    if isinstance(columns, str):
        if columns not in COLUMN_SETS:
            raise ValueError(f"Sheet '{sheet_name}': unknown column set {columns!r}")
        cols = COLUMN_SETS[columns]
    elif isinstance(columns, dict):
        cols = {}
        for field_name, aliases in columns.items():
            if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
                raise ValueError(
                    f"Sheet '{sheet_name}': aliases for {field_name!r} must be a list of strings")
            try:
                cols[ResultField[field_name.upper()]] = list(aliases)
            except KeyError:
                raise ValueError(f"Sheet '{sheet_name}': unknown field {field_name!r}") from None
    else:
        raise ValueError(f"Sheet '{sheet_name}': columns must be a set name or an object")
    return SheetConfig(get_event, cols)


def load_sheet_configs(config_path: str | None = None) -> dict:
    """Return the sheet table, with overrides from a JSON file merged in.

    JSON file structure: {"100 Meters": {"event": "100m", "columns": "default"}, ...}
    The built-in table is never modified.
    """
    configs = dict(SHEET_CONFIGS)
    if not config_path:
        return configs
    if not os.path.exists(config_path):
        raise ValueError(f"Sheet config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            overrides = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in sheet config file: {e}") from e

    if not isinstance(overrides, dict):
        raise ValueError("Sheet config file must hold an object keyed by sheet name")
    for sheet_name, entry in overrides.items():
        configs[sheet_name] = _config_from_json(sheet_name, entry)
    return configs
