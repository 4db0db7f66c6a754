import pytest

from dcfvalue.condition import Condition
from dcfvalue.valuation import intrinsic_value


def _coca_cola(**overrides):
    fields = dict(
        current_earnings=828,
        growth_rate=0.15,
        terminal_growth_rate=0.05,
        discount_rate=0.09,
        growth_years=10,
        years=100,
    )
    fields.update(overrides)
    return Condition(**fields)


def test_coca_cola_1988():
    assert intrinsic_value(_coca_cola()) == 47109


def test_result_is_whole_number():
    value = intrinsic_value(_coca_cola(years=37, growth_years=7))
    assert value == int(value)


def test_longer_horizon_adds_value():
    shorter = intrinsic_value(_coca_cola(years=50))
    longer = intrinsic_value(_coca_cola(years=100))
    assert longer > shorter


def test_higher_discount_rate_lowers_value():
    low = intrinsic_value(_coca_cola(discount_rate=0.09))
    high = intrinsic_value(_coca_cola(discount_rate=0.12))
    assert high < low


def test_equal_growth_and_discount_rate_gives_earnings_per_year():
    condition = _coca_cola(
        current_earnings=100, growth_rate=0.1, discount_rate=0.1,
        growth_years=10, years=10,
    )
    assert intrinsic_value(condition) == pytest.approx(1000)


def test_value_scales_with_earnings():
    single = intrinsic_value(_coca_cola(current_earnings=1000, years=10))
    double = intrinsic_value(_coca_cola(current_earnings=2000, years=10))
    assert abs(double - 2 * single) <= 1