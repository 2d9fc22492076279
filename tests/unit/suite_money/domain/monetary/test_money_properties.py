from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency_registry import AUD, BTC, JPY, USD
from suite_money.domain.monetary.money import Money

currencies_st = st.sampled_from([AUD, USD, JPY, BTC])
minor_units_st = st.integers(min_value=-(10**30), max_value=10**30)
ratios_st = st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=12).filter(lambda ratios: sum(ratios) > 0)


@given(minor_units=minor_units_st, currency=currencies_st, ratios=ratios_st)
@settings(max_examples=300)
def test_allocation_parts_sum_exactly_to_original(minor_units, currency, ratios):
    money = Money.from_int(minor_units, currency)
    parts = money.allocate(ratios)

    assert len(parts) == len(ratios)
    assert sum(part.minor_units for part in parts) == minor_units
    assert all(part.sign in (0, money.sign) for part in parts)
    assert all(part.currency == currency and part.scale == money.scale for part in parts)
    assert all(part.is_zero for part, ratio in zip(parts, ratios) if ratio == 0)


@given(minor_units=minor_units_st, targets=st.integers(min_value=1, max_value=50))
def test_even_allocation_parts_differ_by_at_most_one_unit(minor_units, targets):
    parts = Money.from_int(minor_units, USD).allocate_to(targets)
    units = [part.minor_units for part in parts]

    assert sum(units) == minor_units
    assert max(units) - min(units) <= 1


@given(minor_units=minor_units_st, scale=st.integers(min_value=0, max_value=18), currency=currencies_st)
def test_minor_units_and_scale_round_trip(minor_units, scale, currency):
    money = Money.from_int(minor_units, currency, scale=scale)
    assert money.minor_units == minor_units
    assert money.scale == scale


@given(a=minor_units_st, b=minor_units_st, scale_a=st.integers(0, 6), scale_b=st.integers(0, 6))
def test_equal_money_hashes_equally(a, b, scale_a, scale_b):
    first = Money.from_fixed(FixedDecimal(a, scale_a), AUD, scale=6)
    second = Money.from_fixed(FixedDecimal(b, scale_b), AUD, scale=6)
    if first == second:
        assert hash(first) == hash(second)

    widened = Money(FixedDecimal(a * 10**scale_b, scale_a + scale_b), AUD)
    original = Money(FixedDecimal(a, scale_a), AUD)
    assert widened == original
    assert hash(widened) == hash(original)


@given(minor_units=minor_units_st, from_scale=st.integers(0, 12), to_scale=st.integers(0, 12))
def test_rescale_is_symmetric_for_negative_values(minor_units, from_scale, to_scale):
    value = FixedDecimal(minor_units, from_scale)
    assert (-value).rescale(to_scale) == -(value.rescale(to_scale))
