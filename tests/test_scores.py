"""Tests for mark scoring and the enum parsers in core.models."""

import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from trackmeet.core.models import (
    Gender, ResultField, ResultValidationError, WeightUnit,
    parse_gender, parse_implement_weight, parse_weight_unit,
)
from trackmeet.core.scores import (
    DistanceScorable, ImperialLengthScorable, JoggersMileScorable,
    NullScorable, TimeScorable,
)


EMPTY = {}
JOGGERS = {
    ResultField.PREDICTED_TIME_MINS: '6',
    ResultField.PREDICTED_TIME_SECS: '0',
}

NO_SCORE_MARKS = ['', 'DNF', 'DNS', 'NM', 'NH', ' ', ':', '.', '-', 'foo']


@pytest.mark.parametrize('scorable', [
    TimeScorable(), DistanceScorable(), ImperialLengthScorable(),
    JoggersMileScorable(), NullScorable(),
])
@pytest.mark.parametrize('mark', NO_SCORE_MARKS)
def test_non_marks_score_none(scorable, mark):
    assert scorable.score(mark, JOGGERS) is None


class TestTimeScorable:
    @pytest.mark.parametrize('mark, expected', [
        ('11.34', 11.34),
        ('12', 12.0),
        ('12.0', 12.0),
        ('1:05.3', 65.3),
        (' 1:05.3      ', 65.3),
        ('10:36.36', 636.36),
        ('10:00', 600.0),
        ('10:00.01', 600.01),
        ('1:01:54.32', 3714.32),
        ('0:50.60', 50.6),
        ('0:0:50.60', 50.6),
    ])
    def test_scores(self, mark, expected):
        assert TimeScorable().score(mark, EMPTY) == pytest.approx(expected)

    def test_components_add_up(self):
        s = TimeScorable()
        assert s.score('2:03:04.5', EMPTY) == pytest.approx(2 * 3600 + 3 * 60 + 4.5)
        assert s.score('0:0:50.60', EMPTY) == pytest.approx(s.score('50.60', EMPTY))

    def test_too_many_colons(self):
        assert TimeScorable().score('1:00:00:00', EMPTY) is None

    def test_bad_component(self):
        assert TimeScorable().score('1:x5.3', EMPTY) is None
        assert TimeScorable().score('1::05', EMPTY) is None


class TestDistanceScorable:
    @pytest.mark.parametrize('mark, expected', [
        ('11.34', 11.34),
        ('12', 12.0),
        ('0', 0.0),
        ('0.1', 0.1),
        ('12.0000', 12.0),
        ('  12.0    ', 12.0),
    ])
    def test_scores(self, mark, expected):
        assert DistanceScorable().score(mark, EMPTY) == pytest.approx(expected)

    def test_rejects_mixed_text(self):
        assert DistanceScorable().score('5.62m', EMPTY) is None
        assert DistanceScorable().score('-5', EMPTY) is None


class TestImperialLengthScorable:
    @pytest.mark.parametrize('mark, expected', [
        ('10\'4"', 124),
        ("10'4", 124),
        ('10\' 4"', 124),
        ("10' 4", 124),
        ("10'", 120),
        ('6"', 6),
        ("6''", 6),
        ('10\' 4" foo', 124),
        ('   10\' 4"    ', 124),
        ('12\'6.5"', 150.5),
    ])
    def test_scores(self, mark, expected):
        assert ImperialLengthScorable().score(mark, EMPTY) == pytest.approx(expected)

    def test_bare_number_is_ambiguous(self):
        assert ImperialLengthScorable().score('6', EMPTY) is None


class TestJoggersMileScorable:
    @pytest.mark.parametrize('mark, expected', [
        ('6:00', 0),
        ('6:00.0', 0),
        ('6:00.01', 1),
        ('6:01', 1),
        ('5:59', -1),
        ('5:59.01', 0),
    ])
    def test_scores(self, mark, expected):
        assert JoggersMileScorable().score(mark, JOGGERS) == expected

    def test_rounds_predicted_seconds_up(self):
        fields = {ResultField.PREDICTED_TIME_MINS: '5',
                  ResultField.PREDICTED_TIME_SECS: '59.2'}
        assert JoggersMileScorable().score('6:00', fields) == 0

    def test_needs_prediction(self):
        s = JoggersMileScorable()
        assert s.score('6:00', EMPTY) is None
        assert s.score('6:00', {ResultField.PREDICTED_TIME_MINS: '6',
                                ResultField.PREDICTED_TIME_SECS: ''}) is None
        assert s.score('6:00', {ResultField.PREDICTED_TIME_MINS: 'six',
                                ResultField.PREDICTED_TIME_SECS: '0'}) is None

    @pytest.mark.parametrize('mark', ['6', ':5', '5:', '1:06:00'])
    def test_needs_exactly_one_colon(self, mark):
        assert JoggersMileScorable().score(mark, JOGGERS) is None


class TestGender:
    @pytest.mark.parametrize('text, expected', [
        ('Female', Gender.FEMALE),
        ('Girls', Gender.FEMALE),
        ('Women', Gender.FEMALE),
        ('F', Gender.FEMALE),
        ('Boys', Gender.MALE),
        ('Men', Gender.MALE),
        ('male', Gender.MALE),
        ('M', Gender.MALE),
        ('NB', Gender.NON_BINARY),
        ('Non-binary', Gender.NON_BINARY),
        ('NB - Open', Gender.NON_BINARY),
    ])
    def test_parse(self, text, expected):
        assert parse_gender(text) == expected

    @pytest.mark.parametrize('text', ['', None, 'Open', '?', 'Unbeaten', 'Nbr'])
    def test_unknown_is_none(self, text):
        assert parse_gender(text) is None


class TestWeightUnit:
    @pytest.mark.parametrize('text, expected', [
        ('KG', WeightUnit.KG),
        ('k', WeightUnit.KG),
        ('KGS', WeightUnit.KG),
        ('4kg', WeightUnit.KG),
        ('7.26 kg', WeightUnit.KG),
        ('L', WeightUnit.LB),
        ('B', WeightUnit.LB),
        ('lbs.', WeightUnit.LB),
        ('g', WeightUnit.G),
        ('600 grams', WeightUnit.G),
    ])
    def test_parse(self, text, expected):
        assert parse_weight_unit(text) == expected

    @pytest.mark.parametrize('text', ['', 'stone', '4'])
    def test_invalid_unit_raises(self, text):
        with pytest.raises(ResultValidationError):
            parse_weight_unit(text)

    def test_implement_weight(self):
        assert parse_implement_weight('4') == 4.0
        assert parse_implement_weight('7.26kg') == pytest.approx(7.26)
        with pytest.raises(ResultValidationError):
            parse_implement_weight('KG')
