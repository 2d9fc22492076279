from __future__ import annotations

import pytest

from suite_money.domain.allocation import allocate_minor_units, even_ratios
from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.errors import InvalidAllocationError


def test_equal_ratios_give_remainder_to_earliest_parts():
    assert allocate_minor_units(100, [1, 1, 1]) == [34, 33, 33]
    assert allocate_minor_units(101, [1, 1, 1]) == [34, 34, 33]


def test_remainder_goes_to_largest_fraction_first():
    # shares 0.83, 1.67, 2.5 truncate to [0, 1, 2]; the 2 leftover units go to the two largest fractions
    assert allocate_minor_units(5, [1, 2, 3]) == [1, 2, 2]


def test_zero_ratio_parts_stay_zero():
    assert allocate_minor_units(7, [0, 1, 0, 1]) == [0, 4, 0, 3]


def test_negative_amount_mirrors_positive_allocation():
    positive = allocate_minor_units(100, [3, 7, 1])
    negative = allocate_minor_units(-100, [3, 7, 1])
    assert negative == [-part for part in positive]
    assert sum(negative) == -100
    assert all(part <= 0 for part in negative)


def test_zero_amount_allocates_zeros():
    assert allocate_minor_units(0, [1, 2]) == [0, 0]


def test_parts_sum_exactly_for_uneven_ratios():
    parts = allocate_minor_units(1_000_003, [17, 5, 91, 3])
    assert sum(parts) == 1_000_003
    assert len(parts) == 4


@pytest.mark.parametrize("ratios", [[], [0, 0], [1, -1], [1, 1.5], [True, 1]])
def test_invalid_ratios_fail(ratios):
    with pytest.raises(InvalidAllocationError):
        allocate_minor_units(100, ratios)


def test_even_ratios():
    assert even_ratios(3) == [1, 1, 1]
    with pytest.raises(InvalidAllocationError):
        even_ratios(0)


def test_fixed_decimal_allocation_keeps_scale():
    parts = FixedDecimal(1000, 2).allocate([1, 2])
    assert [part.scale for part in parts] == [2, 2]
    assert sum(parts) == FixedDecimal(1000, 2)
