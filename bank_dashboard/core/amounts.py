"""Fixed-point helpers for currency amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

AMOUNT_PRECISION = 8
_QUANTUM = Decimal(1).scaleb(-AMOUNT_PRECISION)


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert a collaborator amount to ``Decimal`` without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid amount: {value!r}")
    try:
        # str() keeps floats such as 0.1 exact at their shortest repr
        result = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"invalid amount: {value!r}")
    return result


def round_amount(value: Decimal | float | int | str) -> Decimal:
    """Round to exactly 8 decimal places, half away from zero."""
    return to_decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = ["AMOUNT_PRECISION", "round_amount", "to_decimal"]
