"""Tests for csscalc.core.units: px/rem/em normalization and expansion."""

import pytest

from csscalc.core import config as c
from csscalc.core.errors import UnsupportedUnit
from csscalc.core.units import convert_length, from_rem, to_rem


class TestToRem:
    def test_sixteen_px_is_one_rem(self):
        assert to_rem(16, 'px') == 1.0

    def test_rem_and_em_are_identity(self):
        assert to_rem(2.5, 'rem') == 2.5
        assert to_rem(2.5, 'em') == 2.5

    def test_unit_is_case_insensitive(self):
        assert to_rem(8, 'PX') == 0.5

    def test_unsupported_unit(self):
        with pytest.raises(UnsupportedUnit, match="'pt'"):
            to_rem(16, 'pt')

    def test_missing_unit(self):
        with pytest.raises(UnsupportedUnit):
            to_rem(16, None)
        with pytest.raises(UnsupportedUnit):
            to_rem(16, '')


class TestFromRem:
    def test_one_rem(self):
        assert from_rem(1) == {'px': 16.0, 'rem': 1.0, 'em': 1.0}

    def test_keeps_table_order(self):
        assert list(from_rem(0.5)) == ['px', 'rem', 'em']

    def test_ratio_table_is_read_only(self):
        with pytest.raises(TypeError):
            c.UNIT_RATIOS['pt'] = 12.0


class TestRoundTrip:
    @pytest.mark.parametrize('unit', ['px', 'rem', 'em'])
    @pytest.mark.parametrize('value', [0, 1, -4.5, 13.37, 0.001, 1e6])
    def test_value_survives_round_trip(self, value, unit):
        assert from_rem(to_rem(value, unit))[unit] == pytest.approx(value, abs=1e-9)

    def test_convert_length(self):
        assert convert_length(24, 'px') == {'px': 24.0, 'rem': 1.5, 'em': 1.5}
