import math

import pytest

from heat_load_calculator.constants import BTUH_PER_KW, BTUH_PER_TON
from heat_load_calculator.units import btuhr_to_kw, btuhr_to_ton, kw_to_btuhr, ton_to_btuhr


def test_constants_relationship():
    assert BTUH_PER_KW == 3_412.0
    assert BTUH_PER_TON == 12_000.0
    assert math.isclose(btuhr_to_kw(BTUH_PER_KW), 1.0)
    assert math.isclose(btuhr_to_ton(BTUH_PER_TON), 1.0)


@pytest.mark.parametrize(
    "tons, expected_btuhr",
    [
        (1.0, 12_000.0),
        (3_000.0, 36_000_000.0),
        (-2.5, -30_000.0),
        (0.0, 0.0),
    ],
)
def test_ton_to_btuhr(tons: float, expected_btuhr: float):
    assert math.isclose(ton_to_btuhr(tons), expected_btuhr)
    assert math.isclose(btuhr_to_ton(expected_btuhr), tons)


def test_kw_anchor_values():
    assert kw_to_btuhr(1.0) == 3_412.0
    assert btuhr_to_kw(21_600.0) == pytest.approx(6.3306, rel=1e-4)
    assert btuhr_to_kw(-3_412.0) == pytest.approx(-1.0)


@pytest.mark.parametrize("value", [0.0, 1.0, -1.0, 21_600.0, 1e-9, -1e18, 1e18, 123_456.789])
def test_conversions_invert(value: float):
    assert kw_to_btuhr(btuhr_to_kw(value)) == pytest.approx(value)
    assert ton_to_btuhr(btuhr_to_ton(value)) == pytest.approx(value)
