"""Decimal root extraction on top of the integer bisection root."""

from __future__ import annotations

from bigdecimal.config import DecimalConfig, resolve_config
from bigdecimal.errors import DomainError
from bigdecimal.integer_math import nth_root_with_remainder
from bigdecimal.number import BigDecimal, as_big_decimal, negate, truncate_places

__all__ = ["decimal_nth_root", "sqrt"]


def decimal_nth_root(
    value: BigDecimal | int,
    root: int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """The ``root``-th root of a decimal, truncated to ``precision`` fractional digits.

    The mantissa is scaled by a power of ten so that the exponent becomes a
    multiple of ``root`` with at least ``root * precision`` digits below the
    decimal point; the integer root of the scaled mantissa then carries
    ``precision`` fractional digits.

    Args:
        value: Radicand
        root: Root degree, at least 1
        precision: Digits after the decimal point (default: configured precision)
        config: Settings (default: the active configuration)

    Returns:
        The root, truncated toward zero

    Raises:
        DomainError: If root < 1, precision < 0, or value is negative and
            root is even
    """
    settings = resolve_config(config)
    places = settings.precision if precision is None else precision
    value = as_big_decimal(value)
    if root < 1:
        raise DomainError(f"root degree must be at least 1, got {root}")
    if places < 0:
        raise DomainError(f"precision must not be negative, got {places}")
    if value.is_zero:
        return BigDecimal(0, config=settings)
    if value.is_negative:
        if root % 2 == 0:
            raise DomainError(f"even root {root} of negative value {value}")
        return negate(decimal_nth_root(-value, root, places, config=settings), config=settings)

    # Need exponent + root * scale_places >= 0 so the scaled mantissa is an int
    scale_places = max(places, -(value.exponent // root))
    shift = value.exponent + root * scale_places
    integer_root, _ = nth_root_with_remainder(value.mantissa * 10**shift, root)
    result = BigDecimal(integer_root, -scale_places, config=settings)
    return truncate_places(result, places, config=settings)


def sqrt(
    value: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Square root truncated to ``precision`` fractional digits.

    Raises:
        DomainError: If value is negative
    """
    return decimal_nth_root(value, 2, precision, config=config)
