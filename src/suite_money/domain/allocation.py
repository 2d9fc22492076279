from __future__ import annotations

from typing import Sequence

from suite_money.domain.monetary.errors import InvalidAllocationError


def validate_ratios(ratios: Sequence[int]) -> int:
    """Checks that $ratios describe an allocation and returns their sum.

    Raises:
        InvalidAllocationError: If $ratios is empty, contains a non-integer or negative
            value, or sums to zero.
    """
    # Raise: nothing to allocate into
    if len(ratios) == 0:
        raise InvalidAllocationError("$ratios is empty")

    for index, ratio in enumerate(ratios):
        # Raise: ratios are integer weights only
        if isinstance(ratio, bool) or not isinstance(ratio, int):
            raise InvalidAllocationError(f"$ratios[{index}] ({ratio!r}) is not an integer")

        # Raise: a negative weight would flip the sign of its part
        if ratio < 0:
            raise InvalidAllocationError(f"$ratios[{index}] ({ratio}) is negative")

    total = sum(ratios)

    # Raise: all-zero ratios give no proportion to split by
    if total == 0:
        raise InvalidAllocationError(f"$ratios ({list(ratios)}) sum to zero")

    return total


def allocate_minor_units(minor_units: int, ratios: Sequence[int]) -> list[int]:
    """Splits $minor_units into parts proportional to $ratios without losing a single unit.

    Every share is first truncated toward zero. The units lost by truncation are then
    handed out one at a time, starting with the share whose truncated fraction was the
    largest; equal fractions are served in list order.

    The result has one part per ratio, every part has the sign of $minor_units (or is zero),
    parts with ratio 0 are zero, and the parts sum exactly to $minor_units.

    Examples:
        >>> allocate_minor_units(100, [1, 1, 1])
        [34, 33, 33]
        >>> allocate_minor_units(-5, [3, 7])
        [-2, -3]

    Args:
        minor_units: The amount to split, in minor units.
        ratios: Non-negative integer weights with a positive sum.

    Returns:
        List of parts in minor units, in the order of $ratios.

    Raises:
        InvalidAllocationError: If $ratios are not valid (see `validate_ratios`).
    """
    total = validate_ratios(ratios)

    sign = -1 if minor_units < 0 else 1
    magnitude = abs(minor_units)

    shares = []
    fractions = []
    for ratio in ratios:
        share, fraction = divmod(magnitude * ratio, total)
        shares.append(share)
        fractions.append(fraction)

    # leftover < number of non-zero fractions, so zero ratios never receive a unit
    leftover = magnitude - sum(shares)
    by_largest_fraction = sorted(range(len(ratios)), key=lambda i: (-fractions[i], i))
    for index in by_largest_fraction[:leftover]:
        shares[index] += 1

    return [sign * share for share in shares]


def even_ratios(targets: int) -> list[int]:
    """Returns $targets equal weights, for splitting an amount evenly.

    Raises:
        InvalidAllocationError: If $targets < 1.
    """
    # Raise: cannot allocate to nothing
    if isinstance(targets, bool) or not isinstance(targets, int) or targets < 1:
        raise InvalidAllocationError(f"$targets ({targets!r}) must be an integer >= 1")

    return [1] * targets
