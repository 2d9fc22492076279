from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from suite_money.codec.pattern_decoder import PatternDecoder
from suite_money.codec.pattern_encoder import PatternEncoder
from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency_registry import AUD, JPY, USD
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    InvalidAllocationError,
    InvalidScaleError,
    MoneyDivisionByZeroError,
    MoneyParseError,
    UnknownCurrencyError,
)
from suite_money.domain.monetary.money import Money
from tests.helpers.test_assistant import TEST_ASSISTANT as TST


# region Factories


def test_from_int_round_trips_minor_units_and_scale():
    money = Money.from_int(123456789012345678901234567890, "AUD", scale=5)
    assert money.minor_units == 123456789012345678901234567890
    assert money.scale == 5
    assert money.currency == AUD


def test_from_int_uses_currency_scale_by_default():
    assert Money.from_int(500, "USD").scale == 2
    assert Money.from_int(500, JPY).scale == 0


def test_from_num_takes_major_units():
    assert Money.from_num(10.5, "AUD").minor_units == 1050
    assert Money.from_num("10.005", "AUD").minor_units == 1001
    assert Money.from_num(-10, USD, scale=3).minor_units == -10000


def test_from_decimal_and_from_fixed_rescale_to_currency():
    assert Money.from_decimal(Decimal("1.239"), "AUD").minor_units == 124
    assert Money.from_fixed(FixedDecimal(12345, 3), "AUD").minor_units == 1235
    assert Money.from_fixed(FixedDecimal(5, 0), "AUD", scale=4).minor_units == 50000


def test_from_decimal_requires_decimal():
    with pytest.raises(TypeError):
        Money.from_decimal(1.5, "AUD")


def test_unknown_currency_code_fails():
    with pytest.raises(UnknownCurrencyError):
        Money.from_int(100, "ZZZ")


def test_constructor_requires_fixed_decimal_and_currency():
    with pytest.raises(TypeError):
        Money(Decimal("1.00"), AUD)
    with pytest.raises(TypeError):
        Money(FixedDecimal(100, 2), "AUD")


def test_invalid_scale_override_fails():
    with pytest.raises(InvalidScaleError):
        Money.from_int(100, "AUD", scale=-1)


def test_parse_with_default_pattern():
    money = Money.parse("$10.25", "AUD")
    assert money.minor_units == 1025
    assert money.currency == AUD


def test_parse_rounds_excess_digits_to_scale():
    assert Money.parse("$10.255", "AUD").minor_units == 1026
    assert Money.parse("10.5", "AUD", scale=0).minor_units == 11


def test_parse_with_explicit_pattern():
    assert Money.parse("USD 1,234.50", "USD", pattern="CCC #,##0.00").minor_units == 123450
    assert Money.parse("-$5", "USD").minor_units == -500


def test_parse_failure_raises_parse_error():
    with pytest.raises(MoneyParseError) as exc_info:
        Money.parse("$1x.00", "AUD")
    assert exc_info.value.position == 2


def test_try_parse_returns_none_on_failure(caplog):
    with caplog.at_level(logging.DEBUG, logger="suite_money.domain.monetary.money"):
        assert Money.try_parse("abc", "AUD") is None
    assert Money.try_parse("$1.00", "ZZZ") is None
    assert Money.try_parse("$1.00", "AUD") == Money.from_int(100, "AUD")
    assert "try_parse" in caplog.text


def test_decoding_with_custom_decoder():
    class CentsDecoder:
        def decode(self, value: int):
            return PatternDecoder(USD).decode(f"{value / 100}")

    money = Money.decoding(1999, CentsDecoder())
    assert money.minor_units == 1999
    assert money.currency == USD


# endregion

# region Properties


def test_amount_parts_and_predicates():
    money = Money.from_int(-1005, "AUD")
    assert money.integer_part == -10
    assert money.decimal_part == 5
    assert money.sign == -1
    assert money.is_negative
    assert not money.is_positive
    assert not money.is_zero
    assert Money.from_int(0, "AUD").is_zero


def test_currency_checks():
    money = Money.from_int(100, "AUD")
    assert money.is_in_currency("aud")
    assert money.is_in_currency(AUD)
    assert not money.is_in_currency("USD")
    assert not money.is_in_currency("ZZZ")
    assert money.is_in_same_currency_as(Money.from_int(5, AUD))


# endregion

# region Arithmetic


def test_add_and_subtract_same_currency():
    a = Money.from_int(1000, "AUD")
    b = Money.from_int(250, "AUD")
    assert (a + b).minor_units == 1250
    assert (a - b).minor_units == 750
    assert (a + b).currency == AUD


@pytest.mark.parametrize(
    "operation",
    [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a < b,
        lambda a, b: a <= b,
        lambda a, b: a > b,
        lambda a, b: a >= b,
        lambda a, b: a / b,
        lambda a, b: a.divided_by(b),
    ],
)
def test_cross_currency_operations_fail(operation):
    with pytest.raises(CurrencyMismatchError) as exc_info:
        operation(Money.from_int(100, "AUD"), Money.from_int(100, "USD"))
    assert exc_info.value.first == AUD
    assert exc_info.value.second == USD


def test_same_code_different_scale_is_a_different_currency():
    other = TST.currency.create_token("AUD", 4)
    with pytest.raises(CurrencyMismatchError):
        Money.from_int(100, "AUD") + Money.from_int(100, other)


def test_adding_a_plain_number_is_unsupported():
    with pytest.raises(TypeError):
        Money.from_int(100, "AUD") + 1


def test_negate_and_abs():
    money = Money.from_int(-1005, "AUD")
    assert (-money).minor_units == 1005
    assert abs(money).minor_units == 1005
    assert +money is money


def test_multiply_uses_schoolbook_rounding():
    money = Money.from_int(1000, "AUD")
    assert (money * 1.005).minor_units == 1005
    assert (money * Decimal("1.0005")).minor_units == 1001
    assert (Money.from_int(-1000, "AUD") * "1.0005").minor_units == -1001
    assert (3 * Money.from_int(333, "AUD")).minor_units == 999


def test_multiply_rescales_to_currency_scale():
    money = Money.from_int(10000, "AUD", scale=4)
    assert (money * 2).scale == 2
    assert (money * 2).minor_units == 200


def test_money_times_money_is_unsupported():
    with pytest.raises(TypeError):
        Money.from_int(100, "AUD") * Money.from_int(100, "AUD")


def test_divide_by_scalar():
    assert (Money.from_int(1000, "AUD") / 3).minor_units == 333
    assert (Money.from_int(2000, "AUD") / 3).minor_units == 667
    assert (Money.from_int(-2000, "AUD") / "3").minor_units == -667


def test_divide_by_zero_fails():
    with pytest.raises(MoneyDivisionByZeroError):
        Money.from_int(1000, "AUD") / 0
    with pytest.raises(ZeroDivisionError):
        Money.from_int(1000, "AUD").divided_by(Money.from_int(0, "AUD"))


def test_divided_by_returns_ratio():
    assert Money.from_int(150, "AUD").divided_by(Money.from_int(100, "AUD")) == 1.5
    assert Money.from_int(100, "AUD") / Money.from_int(400, "AUD") == 0.25


def test_fixed_operand_arithmetic():
    money = Money.from_int(1000, "AUD")
    assert money.multiply_by_fixed(FixedDecimal(1005, 3)).minor_units == 1005
    assert money.divide_by_fixed(FixedDecimal(3, 0)).minor_units == 333
    assert money.modulo_fixed(FixedDecimal(3, 0)).minor_units == 100
    with pytest.raises(MoneyDivisionByZeroError):
        money.divide_by_fixed(FixedDecimal(0, 2))


# endregion

# region Comparison


def test_equality_and_ordering():
    a = Money.from_int(100, "AUD")
    assert a == Money.from_int(100, AUD)
    assert a != Money.from_int(101, "AUD")
    assert a < Money.from_int(101, "AUD")
    assert a <= Money.from_int(100, "AUD")
    assert a > Money.from_int(-100, "AUD")
    assert a >= Money.from_int(100, "AUD")


def test_equality_ignores_representation_scale():
    a = Money.from_int(100, "AUD")
    b = Money.from_int(10000, "AUD", scale=4)
    assert a == b
    assert hash(a) == hash(b)


def test_different_currencies_are_never_equal():
    assert Money.from_int(100, "AUD") != Money.from_int(100, "USD")
    assert Money.from_int(100, "AUD") != 100


def test_sorting_same_currency():
    moneys = [Money.from_int(v, "AUD") for v in (5, -3, 10)]
    assert [m.minor_units for m in sorted(moneys)] == [-3, 5, 10]


# endregion

# region Allocation


def test_allocate_to_three_targets():
    parts = Money.from_int(100, "AUD").allocate_to(3)
    assert TST.money.minor_units_of(parts) == [34, 33, 33]
    assert all(part.currency == AUD for part in parts)


def test_allocate_according_to_ratios():
    money = Money.from_int(5, "AUD")
    parts = money.allocate([3, 7])
    assert TST.money.minor_units_of(parts) == [2, 3]
    assert TST.money.total_of(parts) == money


def test_allocate_negative_amount():
    parts = Money.from_int(-100, "AUD").allocate([1, 1, 1])
    assert TST.money.minor_units_of(parts) == [-34, -33, -33]


@pytest.mark.parametrize("targets", [0, -1])
def test_allocate_to_fewer_than_one_target_fails(targets):
    with pytest.raises(InvalidAllocationError):
        Money.from_int(100, "AUD").allocate_to(targets)


@pytest.mark.parametrize("ratios", [[], [0, 0], [2, -1]])
def test_allocate_invalid_ratios_fails(ratios):
    with pytest.raises(InvalidAllocationError):
        Money.from_int(100, "AUD").allocate(ratios)


# endregion

# region Encoding


def test_str_uses_currency_pattern():
    assert str(Money.from_int(1000, "AUD")) == "$10.00"
    assert str(Money.from_int(-5, "AUD")) == "-$0.05"
    assert str(Money.from_int(1234, "JPY")) == "¥1234"


def test_format_with_pattern():
    money = Money.from_num("1100", "AUD")
    assert money.format("SCCC0.00") == "$AUD1100.00"
    assert money.format("SCCC0") == "$AUD1100"
    assert money.format("S#,##0.00") == "$1,100.00"


def test_encoded_by_custom_encoder():
    class MinorUnitsEncoder:
        def encode(self, data):
            return (data.amount.minor_units, data.currency.code)

    assert Money.from_int(1999, "USD").encoded_by(MinorUnitsEncoder()) == (1999, "USD")
    assert Money.from_int(1999, "USD").encoded_by(PatternEncoder("CCC 0.00")) == "USD 19.99"


def test_repr():
    assert repr(Money.from_int(100050, "USD")) == "Money(1000.50, USD)"


# endregion
