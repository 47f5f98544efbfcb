"""Integer helpers underneath the decimal arithmetic.

Mantissas are plain Python ints. This module adds the pieces Python does
not provide directly: division truncating toward zero, decimal digit
counting without converting to text, conversions between ints and digit
strings of any length, and the bisection root extractor.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from bigdecimal.constants import CONVERSION_CHUNK_DIGITS
from bigdecimal.errors import DomainError

__all__ = [
    "div_trunc",
    "divrem_trunc",
    "digit_count",
    "strip_trailing_zeros",
    "int_to_digits",
    "digits_to_int",
    "factorial",
    "gcd",
    "lcm",
    "integer_sqrt",
    "nth_root_with_remainder",
]

# log10(2) rounded down, so digit estimates never overshoot
_LOG10_2_NUM = 301029
_LOG10_2_DEN = 1000000


# =============================================================================
# Division
# =============================================================================


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity. Mantissa division
    must truncate toward zero so that negative values lose digits the same
    way positive ones do.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    # Same-sign operands give a non-negative quotient, where floor and
    # truncation agree.
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def divrem_trunc(a: int, b: int) -> tuple[int, int]:
    """Quotient and remainder with truncation toward zero.

    The remainder has the sign of the dividend, so ``q * b + r == a``.
    """
    q = div_trunc(a, b)
    return q, a - q * b


# =============================================================================
# Digits
# =============================================================================


def digit_count(value: int) -> int:
    """Number of decimal digits in ``abs(value)``; zero has no digits."""
    value = abs(value)
    if value == 0:
        return 0
    # Lower bound from the bit length, then step up to the exact count
    digits = ((value.bit_length() - 1) * _LOG10_2_NUM) // _LOG10_2_DEN + 1
    while value >= 10**digits:
        digits += 1
    return digits


def strip_trailing_zeros(value: int) -> tuple[int, int]:
    """Remove trailing decimal zeros.

    Returns:
        (stripped value, number of zeros removed); zero returns (0, 0)
    """
    if value == 0:
        return 0, 0
    removed = 0
    chunk = 1
    while True:
        quotient, remainder = divmod(value, 10**chunk)
        if remainder:
            if chunk == 1:
                return value, removed
            chunk = 1
            continue
        value = quotient
        removed += chunk
        chunk *= 2


def int_to_digits(value: int) -> str:
    """Decimal digits of ``abs(value)`` for any size of int."""
    value = abs(value)
    if value < 10**CONVERSION_CHUNK_DIGITS:
        return str(value)
    half = digit_count(value) // 2
    high, low = divmod(value, 10**half)
    return int_to_digits(high) + int_to_digits(low).zfill(half)


def digits_to_int(digits: str) -> int:
    """Parse a string of decimal digits of any length.

    Raises:
        ValueError: If the string contains anything other than digits
    """
    if len(digits) <= CONVERSION_CHUNK_DIGITS:
        return int(digits)
    half = len(digits) // 2
    return digits_to_int(digits[:-half]) * 10**half + digits_to_int(digits[-half:])


# =============================================================================
# Combinatorics
# =============================================================================


def _multiply_range(low: int, high: int) -> int:
    """Product of low..high inclusive, split in halves to keep operands balanced."""
    if low > high:
        return 1
    if high - low < 8:
        product = low
        for n in range(low + 1, high + 1):
            product *= n
        return product
    middle = (low + high) // 2
    return _multiply_range(low, middle) * _multiply_range(middle + 1, high)


def factorial(n: int) -> int:
    """n! computed as a divide-and-conquer product.

    Raises:
        DomainError: If n is negative
    """
    if n < 0:
        raise DomainError(f"factorial is undefined for negative n: {n}")
    return _multiply_range(2, n)


def gcd(values: Iterable[int]) -> int:
    """Greatest common divisor of all values.

    Raises:
        DomainError: If values is empty
    """
    items = list(values)
    if not items:
        raise DomainError("gcd requires at least one value")
    return math.gcd(*items)


def lcm(values: Iterable[int]) -> int:
    """Least common multiple of all values.

    Raises:
        DomainError: If values is empty
    """
    items = list(values)
    if not items:
        raise DomainError("lcm requires at least one value")
    return math.lcm(*items)


# =============================================================================
# Roots
# =============================================================================


def nth_root_with_remainder(value: int, root: int) -> tuple[int, int]:
    """Floor of the ``root``-th root of ``value``, found by bisection.

    The search keeps ``low**root <= value < high**root`` and halves the
    bracket until it has width one. The starting bracket comes from the bit
    length of ``value``.

    Args:
        value: Non-negative radicand
        root: Root degree, at least 1

    Returns:
        (floor root, value - floor_root**root)

    Raises:
        DomainError: If root < 1 or value < 0
    """
    if root < 1:
        raise DomainError(f"root degree must be at least 1, got {root}")
    if value < 0:
        raise DomainError("cannot take an integer root of a negative value")
    if root == 1 or value < 2:
        return value, 0

    bits = value.bit_length()
    low = 1 << ((bits - 1) // root)
    high = 1 << -(-bits // root)
    while high - low > 1:
        middle = (low + high) // 2
        if middle**root <= value:
            low = middle
        else:
            high = middle
    return low, value - low**root


def integer_sqrt(value: int) -> int:
    """Floor square root by bisection.

    Raises:
        DomainError: If value is negative
    """
    if value < 0:
        raise DomainError("cannot take the square root of a negative value")
    return nth_root_with_remainder(value, 2)[0]
