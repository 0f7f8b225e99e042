"""Result records and the factory that builds them from parsed sheet rows.

Every result is a `Result` tagged with its EventCategory. The category
decides which extra fields are required, how the mark is scored and how the
division is derived. Raw input fields are read-only after construction;
derived values (team, rank) change only through `set_team` and `set_rank`.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import (
    EVENT_CATEGORIES, RELAY_LEG_FIELDS, Event, EventCategory, Gender,
    ResultField, ResultValidationError, WeightUnit, parse_gender,
    parse_implement_weight, parse_weight_unit,
)
from .scores import SCORABLES, Scorable


OPEN_DIVISION = 'Open'

REQUIRED_FIELDS = (
    ResultField.FIRST_NAME,
    ResultField.LAST_NAME,
    ResultField.MARK,
    ResultField.TEAM,
    ResultField.GENDER,
)


@dataclass(eq=False)
class Result:
    event: Event
    category: EventCategory
    raw_fields: Mapping
    scorable: Scorable
    gender: Gender | None
    team: str
    division: str = OPEN_DIVISION
    hurdle_height: str | None = None
    implement_weight: float | None = None
    implement_unit: WeightUnit | None = None
    legs: tuple = ()
    rank: int | None = None

    @property
    def first_name(self) -> str:
        return self.raw_fields[ResultField.FIRST_NAME]

    @property
    def last_name(self) -> str:
        return self.raw_fields[ResultField.LAST_NAME]

    @property
    def mark(self) -> str:
        return self.raw_fields[ResultField.MARK]

    @property
    def wind(self) -> str | None:
        wind = self.raw_fields.get(ResultField.WIND, '').strip()
        return wind or None

    @property
    def fields(self) -> dict:
        """All fields: raw input overlaid with the derived values."""
        merged = dict(self.raw_fields)
        merged[ResultField.EVENT] = self.event.value
        merged[ResultField.TEAM] = self.team
        merged[ResultField.DIVISION] = self.division
        if self.gender is not None:
            merged[ResultField.GENDER] = self.gender.label
        if self.implement_weight is not None:
            merged[ResultField.IMPLEMENT_WEIGHT] = f'{self.implement_weight:g}'
        if self.implement_unit is not None:
            merged[ResultField.IMPLEMENT_WEIGHT_UNIT] = self.implement_unit.value
        if self.rank is not None:
            merged[ResultField.RANK] = str(self.rank)
        return merged

    def key(self) -> str:
        # TODO: two athletes with the same name in one event collide here;
        # needs a bib number or row id once sheets carry one.
        return f'{self.event.value}-{self.last_name}-{self.first_name}'

    def score(self) -> float | None:
        return self.scorable.score(self.mark, self.fields)

    def formatted_mark(self) -> str:
        """Mark as shown in result listings."""
        if self.category == EventCategory.JUMP:
            score = self.score()
            if score is not None:
                return f'{score:.2f}m'
        return self.mark.strip()

    def set_rank(self, rank: int | None):
        """Pipeline mutator: rank within (event, gender, division)."""
        self.rank = rank

    def set_team(self, team: str):
        """Pipeline mutator: normalized team name."""
        self.team = team


def _require(fields: Mapping, *required: ResultField):
    missing = [f.name for f in required if fields.get(f) is None]
    if missing:
        raise ResultValidationError(f"Missing required field(s): {', '.join(missing)}")


def _base_kwargs(event: Event, fields: Mapping, scorable: Scorable | None) -> dict:
    _require(fields, *REQUIRED_FIELDS)
    category = EVENT_CATEGORIES[event]
    return {
        'event': event,
        'category': category,
        'raw_fields': MappingProxyType(dict(fields)),
        'scorable': scorable or SCORABLES[category],
        'gender': parse_gender(fields[ResultField.GENDER]),
        'team': fields[ResultField.TEAM].strip(),
    }


def _build_open(event, fields, scorable):
    return Result(**_base_kwargs(event, fields, scorable))


def _build_hurdles(event, fields, scorable):
    _require(fields, ResultField.HURDLE_HEIGHT)
    height = fields[ResultField.HURDLE_HEIGHT]
    return Result(**_base_kwargs(event, fields, scorable),
                  division=height, hurdle_height=height)


def _build_relay(event, fields, scorable):
    legs = tuple(fields.get(f, '').strip() for f in RELAY_LEG_FIELDS)
    while legs and not legs[-1]:
        legs = legs[:-1]
    return Result(**_base_kwargs(event, fields, scorable), legs=legs)


def _build_throw(event, fields, scorable):
    _require(fields, ResultField.IMPLEMENT_WEIGHT, ResultField.IMPLEMENT_WEIGHT_UNIT)
    weight = parse_implement_weight(fields[ResultField.IMPLEMENT_WEIGHT])
    unit = parse_weight_unit(fields[ResultField.IMPLEMENT_WEIGHT_UNIT])
    return Result(**_base_kwargs(event, fields, scorable),
                  division=f'{weight:g} {unit.value}',
                  implement_weight=weight, implement_unit=unit)


def _build_handicap_mile(event, fields, scorable):
    _require(fields, ResultField.PREDICTED_TIME_MINS, ResultField.PREDICTED_TIME_SECS)
    return Result(**_base_kwargs(event, fields, scorable))


_BUILDERS = {
    EventCategory.TRACK: _build_open,
    EventCategory.HURDLES: _build_hurdles,
    EventCategory.RELAY: _build_relay,
    EventCategory.JUMP: _build_open,
    EventCategory.THROW: _build_throw,
    EventCategory.POLE_VAULT: _build_open,
    EventCategory.HANDICAP_MILE: _build_handicap_mile,
}


def build_result(event: Event, fields: Mapping, scorable: Scorable | None = None) -> Result:
    """Construct and validate the result for one parsed row.

    Args:
        event: Event the row was classified into.
        fields: ResultField -> cell text for the row.
        scorable: Override for the category's default scoring strategy.

    Raises:
        ResultValidationError: a required field is missing, or the implement
            weight/unit can't be parsed.
    """
    return _BUILDERS[EVENT_CATEGORIES[event]](event, fields, scorable)
