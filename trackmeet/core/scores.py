"""Scorable strategies: turn a free-text mark into a comparable number.

A score of None means "no mark" (DNF, DNS, NH, NM, blank, garbage). It is a
normal outcome and the ranker always places it last.
"""

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping

from .models import EventCategory, ResultField


# Plain non-negative number: "12", "12.", "12.34", ".5"
_NUMBER = re.compile(r'^\s*(\d+(?:\.\d*)?|\.\d+)\s*$')

_IMPERIAL = re.compile(
    r'''^\s*
        (?:(?P<feet>\d+(?:\.\d+)?)\s*['’](?!')\s*)?
        (?:(?P<inches>\d+(?:\.\d+)?)\s*(?P<quote>"|”|'')?)?
    ''',
    re.VERBOSE,
)


def parse_number(text: str | None) -> float | None:
    """Parse a plain number, or None if the text is anything else."""
    if text is None:
        return None
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else None


class Scorable(ABC):
    @abstractmethod
    def score(self, mark: str, fields: Mapping[ResultField, str]) -> float | None:
        """Return the numeric score for a mark, or None when it has none."""


class DistanceScorable(Scorable):
    """Marks measured in metres: '5.62', '12'."""

    def score(self, mark, fields=None):
        return parse_number(mark)


class TimeScorable(Scorable):
    """Elapsed times as [[h:]m:]s.ff, scored in seconds."""

    def score(self, mark, fields=None):
        parts = (mark or '').split(':')
        if len(parts) > 3:
            return None
        total = 0.0
        for multiplier, part in zip((1, 60, 3600), reversed(parts)):
            value = parse_number(part)
            if value is None:
                return None
            total += value * multiplier
        return total


class ImperialLengthScorable(Scorable):
    """Heights in feet and inches (10'4", 10', 6") scored in inches.

    A bare number is rejected because feet and inches can't be told apart.
    """

    def score(self, mark, fields=None):
        match = _IMPERIAL.match(mark or '')
        feet, inches, quote = match.group('feet', 'inches', 'quote')
        if feet is None and (inches is None or quote is None):
            return None
        return 12 * float(feet or 0) + float(inches or 0)


class JoggersMileScorable(Scorable):
    """Handicap mile: seconds off the runner's own predicted time.

    Both times are rounded up to whole seconds, so 6:00.01 against a 6:00
    prediction scores 1.
    """

    def score(self, mark, fields):
        mark = (mark or '').strip()
        if mark.count(':') != 1:
            return None
        mins, secs = (parse_number(p) for p in mark.split(':'))
        if mins is None or secs is None:
            return None

        fields = fields or {}
        predicted_mins = parse_number(fields.get(ResultField.PREDICTED_TIME_MINS))
        predicted_secs = parse_number(fields.get(ResultField.PREDICTED_TIME_SECS))
        if predicted_mins is None or predicted_secs is None:
            return None

        actual = math.ceil(mins * 60 + secs)
        predicted = predicted_mins * 60 + math.ceil(predicted_secs)
        return float(actual - predicted)


class NullScorable(Scorable):
    """Placeholder for events that aren't scored."""

    def score(self, mark, fields=None):
        return None


DISTANCE = DistanceScorable()
TIME = TimeScorable()
IMPERIAL_LENGTH = ImperialLengthScorable()
JOGGERS_MILE = JoggersMileScorable()
NULL = NullScorable()

SCORABLES = {
    EventCategory.TRACK: TIME,
    EventCategory.HURDLES: TIME,
    EventCategory.RELAY: TIME,
    EventCategory.JUMP: DISTANCE,
    EventCategory.THROW: DISTANCE,
    EventCategory.POLE_VAULT: IMPERIAL_LENGTH,
    EventCategory.HANDICAP_MILE: JOGGERS_MILE,
}
