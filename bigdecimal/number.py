"""Arbitrary-precision decimal numbers.

A BigDecimal is an integer mantissa and a base-ten exponent; its value is
``mantissa * 10**exponent``. Addition, subtraction, multiplication and
modulo are exact. Division produces at most ``precision`` significant
digits, taken from the active DecimalConfig or an explicit ``config=``.

Every value is normalized on construction: trailing zeros of the mantissa
are moved into the exponent, and zero always has exponent 0. When the
configuration has ``always_truncate`` set, values are additionally clipped
to ``precision`` significant digits.

Usage pattern:
    from bigdecimal import BigDecimal, local_config

    price = BigDecimal.parse("19.99")
    total = price * 3                  # exact: 59.97
    with local_config(precision=20):
        share = total / 7              # 20 significant digits
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from bigdecimal.config import DEFAULT_CONFIG, DecimalConfig, resolve_config
from bigdecimal.constants import (
    E_DIGITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    PI_DIGITS,
    UINT32_MAX,
)
from bigdecimal.errors import (
    DivideByZeroError,
    DomainError,
    FormatError,
    OutOfRangeError,
)
from bigdecimal.integer_math import (
    digit_count,
    digits_to_int,
    div_trunc,
    int_to_digits,
    strip_trailing_zeros,
)

__all__ = [
    # Classes
    "BigDecimal",
    "MidpointRounding",
    # Construction and formatting
    "parse",
    "parse_fraction",
    "try_parse_fraction",
    "normalize",
    "truncate",
    # Arithmetic
    "as_big_decimal",
    "negate",
    "absolute",
    "add",
    "subtract",
    "multiply",
    "divide",
    "divide_places",
    "floor_divide",
    "mod",
    "power",
    "compare",
    # Rounding
    "round_value",
    "round_places",
    "truncate_places",
    "floor",
    "ceiling",
    # Constants
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "TEN",
    "ONE_HALF",
    "PI",
    "E",
    "HALF_PI",
    "TWO_PI",
]


class MidpointRounding(str, Enum):
    """How to round a value exactly halfway between two candidates."""

    AWAY_FROM_ZERO = "away_from_zero"
    TO_EVEN = "to_even"


_DIGIT_CHARS = frozenset("0123456789.")


# =============================================================================
# Representation helpers
# =============================================================================


def _normalize_parts(mantissa: int, exponent: int) -> tuple[int, int]:
    """Fold trailing mantissa zeros into the exponent."""
    if mantissa == 0:
        return 0, 0
    mantissa, removed = strip_trailing_zeros(mantissa)
    return mantissa, exponent + removed


def _truncate_parts(mantissa: int, exponent: int, precision: int) -> tuple[int, int]:
    """Clip to ``precision`` significant digits toward zero, then normalize."""
    excess = digit_count(mantissa) - precision
    if excess > 0:
        mantissa = div_trunc(mantissa, 10**excess)
        exponent += excess
    return _normalize_parts(mantissa, exponent)


def _is_operand(value: object) -> bool:
    return isinstance(value, BigDecimal) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def as_big_decimal(value: BigDecimal | int) -> BigDecimal:
    """Accept a BigDecimal or an int; ints are converted exactly."""
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigDecimal(value, config=DEFAULT_CONFIG)
    raise TypeError(f"expected BigDecimal or int, got {type(value).__name__}")


def _exact(mantissa: int, exponent: int = 0) -> BigDecimal:
    """Normalized value that ignores the active truncation setting."""
    return BigDecimal(mantissa, exponent, config=DEFAULT_CONFIG)


def _align(a: BigDecimal, b: BigDecimal) -> tuple[int, int, int]:
    """Scale both mantissas to the smaller exponent.

    Returns:
        (mantissa of a, mantissa of b, common exponent)
    """
    if a._exponent == b._exponent:
        return a._mantissa, b._mantissa, a._exponent
    if a._exponent > b._exponent:
        return a._mantissa * 10 ** (a._exponent - b._exponent), b._mantissa, b._exponent
    return a._mantissa, b._mantissa * 10 ** (b._exponent - a._exponent), a._exponent


# =============================================================================
# BigDecimal
# =============================================================================


class BigDecimal:
    """Immutable arbitrary-precision decimal number.

    The value is ``mantissa * 10**exponent``. Instances are normalized (or
    truncated, see DecimalConfig.always_truncate) when constructed, so two
    equal values always have identical mantissa and exponent.

    Arithmetic operators accept BigDecimal and int operands. Floats and
    Decimals must be converted explicitly with from_float/from_decimal.

    Attributes:
        mantissa: Signed integer digits (read-only)
        exponent: Power of ten applied to the mantissa (read-only)
    """

    ZERO: ClassVar[BigDecimal]
    ONE: ClassVar[BigDecimal]
    MINUS_ONE: ClassVar[BigDecimal]
    TEN: ClassVar[BigDecimal]
    ONE_HALF: ClassVar[BigDecimal]
    PI: ClassVar[BigDecimal]
    E: ClassVar[BigDecimal]

    __slots__ = ("_mantissa", "_exponent")
    _mantissa: int
    _exponent: int

    def __init__(
        self,
        mantissa: int = 0,
        exponent: int = 0,
        *,
        config: DecimalConfig | None = None,
    ) -> None:
        """Create a value from a mantissa and exponent.

        Args:
            mantissa: Integer digits, with sign
            exponent: Power of ten applied to the mantissa
            config: Settings deciding between normalize and truncate
                (default: the active configuration)

        Raises:
            TypeError: If mantissa or exponent is not an int
        """
        if isinstance(mantissa, bool) or not isinstance(mantissa, int):
            raise TypeError(f"mantissa must be int, got {type(mantissa).__name__}")
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")

        settings = resolve_config(config)
        if settings.always_truncate:
            mantissa, exponent = _truncate_parts(mantissa, exponent, settings.precision)
        else:
            mantissa, exponent = _normalize_parts(mantissa, exponent)
        self._mantissa = mantissa
        self._exponent = exponent

    # --- Attributes ---

    @property
    def mantissa(self) -> int:
        """Signed integer digits."""
        return self._mantissa

    @property
    def exponent(self) -> int:
        """Power of ten applied to the mantissa."""
        return self._exponent

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        return (self._mantissa > 0) - (self._mantissa < 0)

    @property
    def significant_digits(self) -> int:
        """Digits in the mantissa; zero has none."""
        return digit_count(self._mantissa)

    @property
    def decimal_places(self) -> int:
        """Position of the decimal point relative to the first significant digit.

        Equals ``significant_digits + exponent``: the number of integer digits
        for values of magnitude one or more, zero or negative below one.
        """
        return self.significant_digits + self._exponent

    @property
    def whole_part(self) -> int:
        """Integer part, truncated toward zero."""
        if self._exponent >= 0:
            return self._mantissa * 10**self._exponent
        return div_trunc(self._mantissa, 10**-self._exponent)

    @property
    def fractional_part(self) -> BigDecimal:
        """Digits after the decimal point, carrying the sign of the value.

        ``whole_part + fractional_part`` equals the value.
        """
        if self._exponent >= 0:
            return _exact(0)
        scale = 10**-self._exponent
        return _exact(self._mantissa - div_trunc(self._mantissa, scale) * scale, self._exponent)

    @property
    def is_zero(self) -> bool:
        return self._mantissa == 0

    @property
    def is_negative(self) -> bool:
        return self._mantissa < 0

    @property
    def is_positive(self) -> bool:
        return self._mantissa > 0

    # --- Construction ---

    @classmethod
    def parse(cls, text: str, *, config: DecimalConfig | None = None) -> BigDecimal:
        """Parse decimal text. See the module-level parse."""
        return parse(text, config=config)

    @classmethod
    def parse_fraction(cls, text: str, *, config: DecimalConfig | None = None) -> BigDecimal:
        """Parse ``"numerator / denominator"``. See the module-level parse_fraction."""
        return parse_fraction(text, config=config)

    @classmethod
    def try_parse_fraction(
        cls, text: str, *, config: DecimalConfig | None = None
    ) -> BigDecimal | None:
        """Like parse_fraction, returning None instead of raising."""
        return try_parse_fraction(text, config=config)

    @classmethod
    def from_int(cls, value: int, *, config: DecimalConfig | None = None) -> BigDecimal:
        """Exact conversion from an int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int requires int, got {type(value).__name__}")
        return cls(value, config=config)

    @classmethod
    def from_float(cls, value: float, *, config: DecimalConfig | None = None) -> BigDecimal:
        """Convert a float through its shortest round-trip representation.

        ``from_float(0.1)`` is exactly 0.1, not the binary value stored in
        the float.

        Raises:
            FormatError: If value is NaN
            OutOfRangeError: If value is infinite
        """
        if not isinstance(value, float):
            raise TypeError(f"from_float requires float, got {type(value).__name__}")
        if math.isnan(value):
            raise FormatError("BigDecimal cannot represent NaN")
        if math.isinf(value):
            raise OutOfRangeError("BigDecimal cannot represent infinity")
        return parse(repr(value), config=config)

    @classmethod
    def from_decimal(cls, value: Decimal, *, config: DecimalConfig | None = None) -> BigDecimal:
        """Exact conversion from a decimal.Decimal.

        Raises:
            FormatError: If value is NaN
            OutOfRangeError: If value is infinite
        """
        if not isinstance(value, Decimal):
            raise TypeError(f"from_decimal requires Decimal, got {type(value).__name__}")
        if value.is_nan():
            raise FormatError("BigDecimal cannot represent NaN")
        if value.is_infinite():
            raise OutOfRangeError("BigDecimal cannot represent infinity")
        sign, digits, exponent = value.as_tuple()
        mantissa = digits_to_int("".join(str(d) for d in digits))
        return cls(-mantissa if sign else mantissa, int(exponent), config=config)

    @classmethod
    def from_value(
        cls, value: BigDecimal | int | str | float | Decimal, *, config: DecimalConfig | None = None
    ) -> BigDecimal:
        """Convert any supported value, dispatching on its type.

        Raises:
            TypeError: If the type is not supported
        """
        if isinstance(value, BigDecimal):
            return value
        if isinstance(value, bool):
            raise TypeError("BigDecimal cannot be built from bool")
        if isinstance(value, int):
            return cls.from_int(value, config=config)
        if isinstance(value, str):
            return parse(value, config=config)
        if isinstance(value, Decimal):
            return cls.from_decimal(value, config=config)
        if isinstance(value, float):
            return cls.from_float(value, config=config)
        raise TypeError(f"BigDecimal cannot be built from {type(value).__name__}")

    # --- Formatting ---

    def to_string(self) -> str:
        """Plain notation with no exponent, trailing fractional zeros trimmed."""
        if self._mantissa == 0:
            return "0"
        sign = "-" if self._mantissa < 0 else ""
        digits = int_to_digits(self._mantissa)
        if self._exponent >= 0:
            return sign + digits + "0" * self._exponent

        point = len(digits) + self._exponent
        if point > 0:
            whole, fraction = digits[:point], digits[point:]
        else:
            whole, fraction = "0", "0" * -point + digits
        fraction = fraction.rstrip("0")
        if not fraction:
            return sign + whole
        return f"{sign}{whole}.{fraction}"

    def to_scientific_string(self) -> str:
        """Scientific notation, e.g. ``4.9406564584124654E-324``."""
        if self._mantissa == 0:
            return "0E+0"
        sign = "-" if self._mantissa < 0 else ""
        digits = int_to_digits(self._mantissa)
        adjusted = len(digits) - 1 + self._exponent
        body = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{sign}{body}E{adjusted:+d}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigDecimal('{self.to_string()}')"

    # --- Conversion ---

    def to_int(self) -> int:
        """Integer part, truncated toward zero."""
        return self.whole_part

    def _to_bounded_int(self, low: int, high: int, kind: str) -> int:
        value = self.whole_part
        if not low <= value <= high:
            raise OutOfRangeError(f"{self} does not fit in {kind}")
        return value

    def to_int32(self) -> int:
        """Truncate toward zero, checking the signed 32-bit range.

        Raises:
            OutOfRangeError: If the integer part does not fit
        """
        return self._to_bounded_int(INT32_MIN, INT32_MAX, "int32")

    def to_uint32(self) -> int:
        """Truncate toward zero, checking the unsigned 32-bit range.

        Raises:
            OutOfRangeError: If the integer part does not fit
        """
        return self._to_bounded_int(0, UINT32_MAX, "uint32")

    def to_int64(self) -> int:
        """Truncate toward zero, checking the signed 64-bit range.

        Raises:
            OutOfRangeError: If the integer part does not fit
        """
        return self._to_bounded_int(INT64_MIN, INT64_MAX, "int64")

    def to_float(self) -> float:
        """Nearest float. Magnitudes below the float range become zero.

        Raises:
            OutOfRangeError: If the magnitude exceeds the float range
        """
        result = float(self.to_scientific_string())
        if math.isinf(result):
            raise OutOfRangeError(f"{self.to_scientific_string()} overflows float")
        return result

    def to_decimal(self) -> Decimal:
        """Exact decimal.Decimal with the same digits."""
        digits = tuple(int(ch) for ch in int_to_digits(self._mantissa))
        return Decimal((int(self._mantissa < 0), digits, self._exponent))

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._mantissa != 0

    def __trunc__(self) -> int:
        return self.to_int()

    def __floor__(self) -> int:
        return _floor_int(self)

    def __ceil__(self) -> int:
        return _ceiling_int(self)

    def __round__(self, ndigits: int | None = None) -> int | BigDecimal:
        """Round half to even, like the built-in numeric types."""
        if ndigits is None:
            return round_value(self, MidpointRounding.TO_EVEN)
        return round_places(self, ndigits, MidpointRounding.TO_EVEN)

    # --- Arithmetic operations ---

    def __add__(self, other: BigDecimal | int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: BigDecimal | int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: BigDecimal | int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other: BigDecimal | int) -> BigDecimal:
        """Divide to the active precision.

        Raises:
            DivideByZeroError: If other is zero
        """
        if not _is_operand(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other: int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return divide(other, self)

    def __floordiv__(self, other: BigDecimal | int) -> BigDecimal:
        """Floor of the quotient.

        Raises:
            DivideByZeroError: If other is zero
        """
        if not _is_operand(other):
            return NotImplemented
        return floor_divide(self, other)

    def __rfloordiv__(self, other: int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return floor_divide(other, self)

    def __mod__(self, other: BigDecimal | int) -> BigDecimal:
        """Floored modulo: the result has the sign of other.

        Raises:
            DivideByZeroError: If other is zero
        """
        if not _is_operand(other):
            return NotImplemented
        return mod(self, other)

    def __rmod__(self, other: int) -> BigDecimal:
        if not _is_operand(other):
            return NotImplemented
        return mod(other, self)

    def __divmod__(self, other: BigDecimal | int) -> tuple[BigDecimal, BigDecimal]:
        if not _is_operand(other):
            return NotImplemented
        return floor_divide(self, other), mod(self, other)

    def __pow__(self, exponent: int, modulo: None = None) -> BigDecimal:
        """Integer powers; negative exponents give the reciprocal."""
        if modulo is not None or isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return power(self, exponent)

    def __neg__(self) -> BigDecimal:
        return negate(self)

    def __pos__(self) -> BigDecimal:
        return self

    def __abs__(self) -> BigDecimal:
        return absolute(self)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigDecimal):
            return self._mantissa == other._mantissa and self._exponent == other._exponent
        if isinstance(other, int):
            return (self._mantissa, self._exponent) == _normalize_parts(other, 0)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigDecimal | int) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: BigDecimal | int) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: BigDecimal | int) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: BigDecimal | int) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        # Integral values hash like the equal int
        if self._exponent >= 0:
            return hash(self._mantissa * 10**self._exponent)
        return hash((self._mantissa, self._exponent))


# =============================================================================
# Parsing
# =============================================================================


def parse(text: str, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Parse decimal text into a BigDecimal.

    Accepts an optional sign, an optional decimal point and an optional
    exponent suffix (``E`` or ``e`` followed by a signed integer). Any other
    character in the mantissa part is ignored, so ``"1,234.5"`` parses as
    1234.5. Blank input parses as zero.

    Args:
        text: Text to parse
        config: Settings applied to the result (default: the active one)

    Returns:
        The parsed value

    Raises:
        TypeError: If text is not a string
        FormatError: If no digits remain, there is more than one decimal
            point, or the exponent is not an integer
    """
    if not isinstance(text, str):
        raise TypeError(f"parse requires str, got {type(text).__name__}")

    body = text.strip()
    if not body:
        return BigDecimal(0, config=config)

    exponent = 0
    marker = max(body.rfind("E"), body.rfind("e"))
    if marker != -1:
        exponent_text = body[marker + 1 :].strip()
        try:
            exponent = int(exponent_text)
        except ValueError as err:
            raise FormatError(f"Invalid exponent in decimal: '{text}'") from err
        body = body[:marker].strip()

    negative = body.startswith("-")
    cleaned = "".join(ch for ch in body if ch in _DIGIT_CHARS)
    if cleaned.count(".") > 1:
        raise FormatError(f"More than one decimal point: '{text}'")

    whole, _, fraction = cleaned.partition(".")
    digits = whole + fraction
    if not digits:
        raise FormatError(f"No digits in decimal: '{text}'")
    exponent -= len(fraction)

    # Strip zeros textually so long inputs never build oversized ints
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    stripped = stripped.lstrip("0")
    if not stripped:
        return BigDecimal(0, config=config)

    mantissa = digits_to_int(stripped)
    return BigDecimal(-mantissa if negative else mantissa, exponent, config=config)


def parse_fraction(text: str, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Parse ``"numerator / denominator"`` and divide.

    Raises:
        FormatError: If the text is not two decimals separated by one slash
        DivideByZeroError: If the denominator is zero
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_fraction requires str, got {type(text).__name__}")
    parts = text.split("/")
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise FormatError(f"Fraction must look like 'a / b': '{text}'")
    numerator = parse(parts[0], config=config)
    denominator = parse(parts[1], config=config)
    return divide(numerator, denominator, config=config)


def try_parse_fraction(text: str, *, config: DecimalConfig | None = None) -> BigDecimal | None:
    """Like parse_fraction, but returns None for malformed or zero-denominator input."""
    try:
        return parse_fraction(text, config=config)
    except (FormatError, DivideByZeroError):
        return None


# =============================================================================
# Normalization
# =============================================================================


def normalize(value: BigDecimal) -> BigDecimal:
    """Move trailing mantissa zeros into the exponent. Idempotent."""
    value = as_big_decimal(value)
    return _exact(value._mantissa, value._exponent)


def truncate(value: BigDecimal, precision: int) -> BigDecimal:
    """Keep at most ``precision`` significant digits, dropping the rest toward zero.

    Raises:
        DomainError: If precision is less than 1
    """
    if precision < 1:
        raise DomainError(f"truncate precision must be at least 1, got {precision}")
    value = as_big_decimal(value)
    mantissa, exponent = _truncate_parts(value._mantissa, value._exponent, precision)
    return _exact(mantissa, exponent)


# =============================================================================
# Arithmetic
# =============================================================================


def negate(value: BigDecimal, *, config: DecimalConfig | None = None) -> BigDecimal:
    value = as_big_decimal(value)
    return BigDecimal(-value._mantissa, value._exponent, config=config)


def absolute(value: BigDecimal, *, config: DecimalConfig | None = None) -> BigDecimal:
    value = as_big_decimal(value)
    return BigDecimal(abs(value._mantissa), value._exponent, config=config)


def add(
    a: BigDecimal | int, b: BigDecimal | int, *, config: DecimalConfig | None = None
) -> BigDecimal:
    """Exact sum."""
    a, b = as_big_decimal(a), as_big_decimal(b)
    left, right, exponent = _align(a, b)
    return BigDecimal(left + right, exponent, config=config)


def subtract(
    a: BigDecimal | int, b: BigDecimal | int, *, config: DecimalConfig | None = None
) -> BigDecimal:
    """Exact difference ``a - b``."""
    a, b = as_big_decimal(a), as_big_decimal(b)
    left, right, exponent = _align(a, b)
    return BigDecimal(left - right, exponent, config=config)


def multiply(
    a: BigDecimal | int, b: BigDecimal | int, *, config: DecimalConfig | None = None
) -> BigDecimal:
    """Exact product."""
    a, b = as_big_decimal(a), as_big_decimal(b)
    return BigDecimal(a._mantissa * b._mantissa, a._exponent + b._exponent, config=config)


def _long_divide(numerator: int, denominator: int, precision: int) -> tuple[int, int]:
    """Long division of positive ints to ``precision`` quotient digits.

    Produces the same digits as schoolbook division that multiplies the
    remainder by ten once per step until the remainder is zero or the
    quotient has ``precision`` digits, but takes all steps in one batch.
    Stopping early on a zero remainder only drops trailing zeros, which
    normalization removes anyway. A quotient whose integer part is already
    longer than ``precision`` is truncated.

    Returns:
        (quotient, steps), where the exact quotient is about
        ``quotient * 10**-steps``; steps is negative for truncated quotients
    """
    steps = precision - (digit_count(numerator) - digit_count(denominator))
    if steps >= 0:
        quotient = numerator * 10**steps // denominator
    else:
        quotient = numerator // (denominator * 10**-steps)

    # The digit estimate can be one short
    excess = digit_count(quotient) - precision
    if excess > 0:
        quotient //= 10**excess
        steps -= excess
    return quotient, steps


def divide(
    dividend: BigDecimal | int,
    divisor: BigDecimal | int,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Quotient with at most ``precision`` significant digits, truncated toward zero.

    Args:
        dividend: Value to divide
        divisor: Non-zero value to divide by
        config: Settings providing the precision (default: the active one)

    Returns:
        dividend / divisor

    Raises:
        DivideByZeroError: If divisor is zero
    """
    settings = resolve_config(config)
    dividend, divisor = as_big_decimal(dividend), as_big_decimal(divisor)
    if divisor.is_zero:
        raise DivideByZeroError(f"Cannot divide {dividend} by zero")
    if dividend.is_zero:
        return BigDecimal(0, config=settings)

    quotient, steps = _long_divide(
        abs(dividend._mantissa), abs(divisor._mantissa), settings.precision
    )
    if dividend.is_negative != divisor.is_negative:
        quotient = -quotient
    return BigDecimal(quotient, dividend._exponent - divisor._exponent - steps, config=settings)


def divide_places(
    dividend: BigDecimal | int,
    divisor: BigDecimal | int,
    places: int,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Quotient truncated to ``places`` digits after the decimal point.

    The division precision is chosen from the operand magnitudes so that
    every requested fractional digit is computed, whatever the size of the
    integer part.

    Raises:
        DivideByZeroError: If divisor is zero
    """
    settings = resolve_config(config)
    dividend, divisor = as_big_decimal(dividend), as_big_decimal(divisor)
    digits = places + max(dividend.decimal_places - divisor.decimal_places, 0) + 2
    quotient = divide(dividend, divisor, config=settings.replace(precision=max(digits, 1)))
    return truncate_places(quotient, places, config=settings)


def floor_divide(
    dividend: BigDecimal | int,
    divisor: BigDecimal | int,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Floor of ``dividend / divisor``, exact however many digits it has.

    Pairs with mod: ``floor_divide(a, b) * b + mod(a, b) == a``.

    Raises:
        DivideByZeroError: If divisor is zero
    """
    dividend, divisor = as_big_decimal(dividend), as_big_decimal(divisor)
    if divisor.is_zero:
        raise DivideByZeroError(f"Cannot divide {dividend} by zero")
    left, right, _ = _align(dividend, divisor)
    return BigDecimal(left // right, config=config)


def mod(
    value: BigDecimal | int,
    modulus: BigDecimal | int,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Floored modulo ``value - floor(value / modulus) * modulus``.

    Computed exactly on the aligned mantissas, so the result has the sign
    of the modulus and no precision is lost.

    Raises:
        DivideByZeroError: If modulus is zero
    """
    value, modulus = as_big_decimal(value), as_big_decimal(modulus)
    if modulus.is_zero:
        raise DivideByZeroError(f"Cannot take {value} modulo zero")
    left, right, exponent = _align(value, modulus)
    return BigDecimal(left % right, exponent, config=config)


def power(
    base: BigDecimal | int, exponent: int, *, config: DecimalConfig | None = None
) -> BigDecimal:
    """Raise to an integer power.

    Non-negative exponents are exact; negative exponents return the
    reciprocal of the positive power, to the configured precision.

    Raises:
        TypeError: If exponent is not an int
        DivideByZeroError: If base is zero and exponent is negative
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
    base = as_big_decimal(base)
    if exponent >= 0:
        return BigDecimal(base._mantissa**exponent, base._exponent * exponent, config=config)
    if base.is_zero:
        raise DivideByZeroError(f"Cannot raise zero to negative power {exponent}")
    positive = _exact(base._mantissa**-exponent, base._exponent * -exponent)
    return divide(_exact(1), positive, config=config)


def compare(a: BigDecimal | int, b: BigDecimal | int) -> int:
    """-1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    a, b = as_big_decimal(a), as_big_decimal(b)
    if a.sign != b.sign:
        return -1 if a.sign < b.sign else 1
    if a.sign == 0:
        return 0
    # Same sign: a different count of leading digits settles it without scaling
    if a.decimal_places != b.decimal_places:
        larger = 1 if a.decimal_places > b.decimal_places else -1
        return larger * a.sign
    left, right, _ = _align(a, b)
    return (left > right) - (left < right)


# =============================================================================
# Rounding
# =============================================================================


def round_value(
    value: BigDecimal, mode: MidpointRounding | str = MidpointRounding.AWAY_FROM_ZERO
) -> int:
    """Round to the nearest integer.

    Args:
        value: Value to round
        mode: Tie-breaking rule when the fraction is exactly one half

    Returns:
        The rounded integer
    """
    value = as_big_decimal(value)
    mode = MidpointRounding(mode)
    whole = value.whole_part
    step = -1 if value.is_negative else 1

    versus_half = compare(absolute(value.fractional_part, config=DEFAULT_CONFIG), ONE_HALF)
    if versus_half > 0:
        whole += step
    elif versus_half == 0:
        if mode is MidpointRounding.AWAY_FROM_ZERO or whole % 2 != 0:
            whole += step
    return whole


def round_places(
    value: BigDecimal,
    places: int,
    mode: MidpointRounding | str = MidpointRounding.AWAY_FROM_ZERO,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Round to ``places`` digits after the decimal point.

    Negative ``places`` round to tens, hundreds and so on.
    """
    value = as_big_decimal(value)
    mode = MidpointRounding(mode)
    dropped = -places - value._exponent
    if dropped <= 0:
        return value

    scale = 10**dropped
    quotient, remainder = divmod(abs(value._mantissa), scale)
    twice = 2 * remainder
    if twice > scale or (
        twice == scale and (mode is MidpointRounding.AWAY_FROM_ZERO or quotient % 2 == 1)
    ):
        quotient += 1
    return BigDecimal(-quotient if value.is_negative else quotient, -places, config=config)


def truncate_places(
    value: BigDecimal, places: int, *, config: DecimalConfig | None = None
) -> BigDecimal:
    """Drop digits beyond ``places`` after the decimal point, toward zero."""
    value = as_big_decimal(value)
    dropped = -places - value._exponent
    if dropped <= 0:
        return value
    return BigDecimal(div_trunc(value._mantissa, 10**dropped), -places, config=config)


def _floor_int(value: BigDecimal) -> int:
    whole = value.whole_part
    # Normalized values with a negative exponent always have a fraction
    if value._exponent < 0 and value.is_negative:
        whole -= 1
    return whole


def _ceiling_int(value: BigDecimal) -> int:
    whole = value.whole_part
    if value._exponent < 0 and value.is_positive:
        whole += 1
    return whole


def floor(value: BigDecimal, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Largest integer not greater than value."""
    return BigDecimal(_floor_int(as_big_decimal(value)), config=config)


def ceiling(value: BigDecimal, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Smallest integer not less than value."""
    return BigDecimal(_ceiling_int(as_big_decimal(value)), config=config)


# =============================================================================
# Constants
# =============================================================================

ZERO = _exact(0)
ONE = _exact(1)
MINUS_ONE = _exact(-1)
TEN = _exact(10)
ONE_HALF = _exact(5, -1)
PI = parse(PI_DIGITS, config=DEFAULT_CONFIG)
E = parse(E_DIGITS, config=DEFAULT_CONFIG)
HALF_PI = multiply(PI, ONE_HALF, config=DEFAULT_CONFIG)
TWO_PI = multiply(PI, 2, config=DEFAULT_CONFIG)

BigDecimal.ZERO = ZERO
BigDecimal.ONE = ONE
BigDecimal.MINUS_ONE = MINUS_ONE
BigDecimal.TEN = TEN
BigDecimal.ONE_HALF = ONE_HALF
BigDecimal.PI = PI
BigDecimal.E = E
