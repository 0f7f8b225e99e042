"""Data models for the track meet results system."""

import re
from enum import Enum


class ResultValidationError(ValueError):
    """A result row is missing a field its event requires, or holds a bad value."""


class Event(Enum):
    # Track
    E100 = '100m'
    E200 = '200m'
    E400 = '400m'
    E800 = '800m'
    E1500 = '1500m'
    E_MILE = 'Mile'
    E_JOGGERS_MILE = 'Joggers Mile'
    E3000 = '3000m'
    E_2MILE = '2 Mile'
    E5000 = '5000m'
    E10000 = '10000m'
    E_RACE_WALK = 'Race Walk'
    # Hurdles
    E80_HURDLES = '80m Hurdles'
    E100_HURDLES = '100m Hurdles'
    E110_HURDLES = '110m Hurdles'
    E300_HURDLES = '300m Hurdles'
    E400_HURDLES = '400m Hurdles'
    # Relays
    E4X100 = '4x100m'
    E4X200 = '4x200m'
    E4X400 = '4x400m'
    E_DMR = 'DMR'
    E_SMR = 'SMR'
    # Field
    E_POLE_VAULT = 'Pole Vault'
    E_LONG_JUMP = 'Long Jump'
    E_HIGH_JUMP = 'High Jump'
    E_TRIPLE_JUMP = 'Triple Jump'
    E_SHOT_PUT = 'Shot Put'
    E_JAVELIN = 'Javelin'
    E_DISCUS = 'Discus'


class EventCategory(Enum):
    TRACK = 'track'
    HURDLES = 'hurdles'
    RELAY = 'relay'
    JUMP = 'jump'
    THROW = 'throw'
    POLE_VAULT = 'pole_vault'
    HANDICAP_MILE = 'handicap_mile'


EVENT_CATEGORIES = {
    Event.E100: EventCategory.TRACK,
    Event.E200: EventCategory.TRACK,
    Event.E400: EventCategory.TRACK,
    Event.E800: EventCategory.TRACK,
    Event.E1500: EventCategory.TRACK,
    Event.E_MILE: EventCategory.TRACK,
    Event.E3000: EventCategory.TRACK,
    Event.E_2MILE: EventCategory.TRACK,
    Event.E5000: EventCategory.TRACK,
    Event.E10000: EventCategory.TRACK,
    Event.E_RACE_WALK: EventCategory.TRACK,
    Event.E80_HURDLES: EventCategory.HURDLES,
    Event.E100_HURDLES: EventCategory.HURDLES,
    Event.E110_HURDLES: EventCategory.HURDLES,
    Event.E300_HURDLES: EventCategory.HURDLES,
    Event.E400_HURDLES: EventCategory.HURDLES,
    Event.E4X100: EventCategory.RELAY,
    Event.E4X200: EventCategory.RELAY,
    Event.E4X400: EventCategory.RELAY,
    Event.E_DMR: EventCategory.RELAY,
    Event.E_SMR: EventCategory.RELAY,
    Event.E_LONG_JUMP: EventCategory.JUMP,
    Event.E_HIGH_JUMP: EventCategory.JUMP,
    Event.E_TRIPLE_JUMP: EventCategory.JUMP,
    Event.E_SHOT_PUT: EventCategory.THROW,
    Event.E_JAVELIN: EventCategory.THROW,
    Event.E_DISCUS: EventCategory.THROW,
    Event.E_POLE_VAULT: EventCategory.POLE_VAULT,
    Event.E_JOGGERS_MILE: EventCategory.HANDICAP_MILE,
}


def events_in(*categories: EventCategory) -> frozenset:
    """All events belonging to any of the given categories."""
    return frozenset(e for e, c in EVENT_CATEGORIES.items() if c in categories)


class ResultField(Enum):
    GENDER = 'gender'
    FIRST_NAME = 'first_name'
    LAST_NAME = 'last_name'
    AGE = 'age'
    TEAM = 'team'
    HEAT = 'heat'
    LANE = 'lane'
    MARK = 'mark'
    WIND = 'wind'
    PREDICTED_TIME_MINS = 'predicted_time_mins'
    PREDICTED_TIME_SECS = 'predicted_time_secs'
    HURDLE_HEIGHT = 'hurdle_height'
    IMPLEMENT_WEIGHT = 'implement_weight'
    IMPLEMENT_WEIGHT_UNIT = 'implement_weight_unit'
    DIVISION = 'division'
    RANK = 'rank'
    EVENT = 'event'
    SEED = 'seed'
    ROUND = 'round'
    LEG_1 = 'leg_1'
    LEG_2 = 'leg_2'
    LEG_3 = 'leg_3'
    LEG_4 = 'leg_4'
    LEG_5 = 'leg_5'
    LEG_6 = 'leg_6'
    LEG_7 = 'leg_7'
    LEG_8 = 'leg_8'


RELAY_LEG_FIELDS = (
    ResultField.LEG_1, ResultField.LEG_2, ResultField.LEG_3, ResultField.LEG_4,
    ResultField.LEG_5, ResultField.LEG_6, ResultField.LEG_7, ResultField.LEG_8,
)


class SortDirection(Enum):
    ASCENDING = 'ascending'
    DESCENDING = 'descending'


class Gender(Enum):
    MALE = 'Male'
    FEMALE = 'Female'
    NON_BINARY = 'Non-binary'

    @property
    def label(self) -> str:
        return self.value


# Checked in order: "women" contains "men" and "female" contains "male"
_GENDER_KEYWORDS = (
    (Gender.FEMALE, ('girl', 'women', 'woman', 'female')),
    (Gender.NON_BINARY, ('non-binary', 'nonbinary', 'non binary', 'enby')),
    (Gender.MALE, ('boy', 'men', 'man', 'male')),
)
# Too short to match inside other words
_GENDER_WORDS = {Gender.NON_BINARY: {'nb'}}
_GENDER_LETTERS = {'f': Gender.FEMALE, 'w': Gender.FEMALE,
                   'm': Gender.MALE, 'x': Gender.NON_BINARY}


def parse_gender(text: str | None) -> Gender | None:
    """Normalize free-text gender. Returns None (unknown) when nothing matches."""
    norm = (text or '').strip().lower()
    if not norm:
        return None
    if norm in _GENDER_LETTERS:
        return _GENDER_LETTERS[norm]
    words = set(re.split(r'\W+', norm))
    for gender, keywords in _GENDER_KEYWORDS:
        if any(k in norm for k in keywords) or words & _GENDER_WORDS.get(gender, set()):
            return gender
    return None


class WeightUnit(Enum):
    G = 'g'
    KG = 'kg'
    LB = 'lb'


_WEIGHT_UNIT_ALIASES = {
    'G': WeightUnit.G, 'GR': WeightUnit.G, 'GRAM': WeightUnit.G, 'GRAMS': WeightUnit.G,
    'K': WeightUnit.KG, 'KG': WeightUnit.KG, 'KGS': WeightUnit.KG,
    'KILO': WeightUnit.KG, 'KILOS': WeightUnit.KG,
    'KILOGRAM': WeightUnit.KG, 'KILOGRAMS': WeightUnit.KG,
    'L': WeightUnit.LB, 'B': WeightUnit.LB, 'LB': WeightUnit.LB, 'LBS': WeightUnit.LB,
    'POUND': WeightUnit.LB, 'POUNDS': WeightUnit.LB,
}


def parse_weight_unit(text: str | None) -> WeightUnit:
    """Parse implement weight unit text like 'KG', 'lbs.', or '4kg'.

    Any leading number is ignored so a combined "Implement Size" cell
    can feed both the weight and the unit field.
    """
    raw = (text or '').strip()
    norm = re.sub(r'^[\d.\s]*', '', raw).rstrip('.').strip().upper()
    if norm in _WEIGHT_UNIT_ALIASES:
        return _WEIGHT_UNIT_ALIASES[norm]
    raise ResultValidationError(f"Invalid implement weight unit: {raw!r}")


def parse_implement_weight(text: str | None) -> float:
    """Parse the numeric part of an implement weight such as '4', '7.26kg'."""
    raw = (text or '').strip()
    match = re.match(r'^(\d+(?:\.\d*)?|\.\d+)', raw)
    if not match:
        raise ResultValidationError(f"Invalid implement weight: {raw!r}")
    return float(match.group(1))
