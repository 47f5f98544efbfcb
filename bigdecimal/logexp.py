"""Exponential and logarithm functions.

All public functions take ``precision`` as the number of digits after the
decimal point (default: the configured precision) and round the result half
away from zero at that position.
"""

from __future__ import annotations

import structlog

from bigdecimal.config import DEFAULT_CONFIG, DecimalConfig, local_config, resolve_config
from bigdecimal.constants import GUARD_DIGITS
from bigdecimal.errors import DomainError
from bigdecimal.number import (
    ONE,
    ONE_HALF,
    ZERO,
    BigDecimal,
    as_big_decimal,
    divide_places,
    power,
    round_places,
    truncate_places,
)
from bigdecimal.roots import decimal_nth_root
from bigdecimal.series import evaluate_at_precision, taylor_series_sum

logger = structlog.get_logger()

__all__ = [
    "exp",
    "exp_places",
    "ln",
    "log",
    "log_n",
    "log2",
    "log10",
    "approximate_e",
    "pow_decimal",
]

# ln(1 + y) is summed directly only inside this interval
LN_SERIES_LOWER = BigDecimal(9, -1, config=DEFAULT_CONFIG)
LN_SERIES_UPPER = BigDecimal(11, -1, config=DEFAULT_CONFIG)


# =============================================================================
# Working-precision implementations
# =============================================================================


def exp_places(x: BigDecimal, places: int) -> BigDecimal:
    """e**x to ``places`` fractional digits.

    Arguments above one are halved until they are at most one; the series
    result is then squared once per halving.
    """
    if x.is_zero:
        return ONE
    if x.is_negative:
        return divide_places(ONE, exp_places(-x, places), places)

    halvings = 0
    reduced = x
    while reduced > ONE:
        reduced = reduced * ONE_HALF
        halvings += 1
    if halvings:
        logger.debug("exp_argument_halved", halvings=halvings)

    # Integer digits of the result, plus the digits squaring erodes
    result_digits = (x.whole_part + 1) * 4343 // 10000 + 1
    working = places + result_digits + halvings // 3 + 1 + GUARD_DIGITS

    result = taylor_series_sum(reduced, 1, 1, 1, 1, True, working)
    for _ in range(halvings):
        result = truncate_places(result * result, working)
    return result


def _ln(x: BigDecimal, places: int) -> BigDecimal:
    """Natural logarithm of a positive value to ``places`` fractional digits.

    Uses ln(x) = 3 * ln(cbrt(x)) until the argument is close enough to one
    for the ln(1 + y) series.
    """
    if x == ONE:
        return ZERO
    if x < LN_SERIES_LOWER or x > LN_SERIES_UPPER:
        # Tiny arguments have tiny roots; keep their significant digits
        root_places = places + 2 + max(0, -x.decimal_places) // 3
        logger.debug("ln_cube_root_reduction", places=places, root_places=root_places)
        root = decimal_nth_root(x, 3, root_places)
        return _ln(root, places + 1) * 3
    return taylor_series_sum(x - ONE, 0, 1, 1, -1, False, places)


def _log(argument: BigDecimal, base: BigDecimal, places: int) -> BigDecimal:
    numerator = _ln(argument, places)
    denominator = _ln(base, places)
    # Small denominators and large numerators amplify the error of both logs
    extra = 2 * max(0, -denominator.decimal_places) + max(0, numerator.decimal_places)
    if extra:
        numerator = _ln(argument, places + extra)
        denominator = _ln(base, places + extra)
    return divide_places(numerator, denominator, places)


def _pow(base: BigDecimal, exponent: BigDecimal, places: int) -> BigDecimal:
    # Normalized values with a non-negative exponent are integers
    if exponent.exponent >= 0:
        n = exponent.to_int()
        if n >= 0:
            return power(base, n)
        return divide_places(ONE, power(base, -n), places)

    # Every integer digit of the result needs one more digit of ln(base)
    rough = exponent * _ln(base, GUARD_DIGITS)
    result_digits = max(0, rough.whole_part) * 4343 // 10000 + 1
    working = places + result_digits + max(0, exponent.decimal_places) + GUARD_DIGITS
    return exp_places(exponent * _ln(base, working), places)


def _require_positive(value: BigDecimal, name: str) -> None:
    if not value.is_positive:
        raise DomainError(f"{name} requires a positive argument, got {value}")


# =============================================================================
# Public functions
# =============================================================================


def exp(
    x: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """e raised to the power ``x``."""
    return evaluate_at_precision(exp_places, x, precision, config)


def ln(
    x: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Natural logarithm.

    Args:
        x: Positive argument
        precision: Digits after the decimal point (default: configured precision)
        config: Settings (default: the active configuration)

    Raises:
        DomainError: If x is zero or negative
    """
    _require_positive(as_big_decimal(x), "ln")
    return evaluate_at_precision(_ln, x, precision, config)


def log(
    x: BigDecimal | int,
    base: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Logarithm of ``x`` in an arbitrary base, computed as ln(x) / ln(base).

    Raises:
        DomainError: If x is not positive, or base is not positive or is one
    """
    settings = resolve_config(config)
    places = settings.precision if precision is None else precision
    if places < 0:
        raise DomainError(f"precision must not be negative, got {places}")
    x, base = as_big_decimal(x), as_big_decimal(base)
    _require_positive(x, "log")
    _require_positive(base, "log base")
    if base == ONE:
        raise DomainError("log base must not be one")

    with local_config(DEFAULT_CONFIG):
        result = _log(x, base, places + 1 + GUARD_DIGITS)
    return round_places(result, places, config=settings)


def log_n(
    base: BigDecimal | int,
    x: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Logarithm with the base given first: ``log_n(2, 8) == 3``."""
    return log(x, base, precision, config=config)


def log2(
    x: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Base-2 logarithm."""
    return log(x, 2, precision, config=config)


def log10(
    x: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Base-10 logarithm."""
    return log(x, 10, precision, config=config)


def pow_decimal(
    base: BigDecimal | int,
    exponent: BigDecimal | int,
    precision: int | None = None,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """``base`` raised to a decimal ``exponent``, as exp(exponent * ln(base)).

    Integer exponents accept any base and are exact before rounding.
    Fractional exponents need a positive base; zero to a positive
    fractional power is zero.

    Raises:
        DomainError: If base is negative and exponent is not an integer,
            or base is zero and exponent is a negative fraction
        DivideByZeroError: If base is zero and exponent is a negative integer
    """
    settings = resolve_config(config)
    places = settings.precision if precision is None else precision
    if places < 0:
        raise DomainError(f"precision must not be negative, got {places}")
    base, exponent = as_big_decimal(base), as_big_decimal(exponent)

    if exponent.exponent < 0:
        if base.is_zero:
            if exponent.is_positive:
                return BigDecimal(0, config=settings)
            raise DomainError(f"zero base requires a positive exponent, got {exponent}")
        if base.is_negative:
            raise DomainError(f"negative base requires an integer exponent, got {exponent}")

    with local_config(DEFAULT_CONFIG):
        result = _pow(base, exponent, places + 1 + GUARD_DIGITS)
    return round_places(result, places, config=settings)


def approximate_e(digits: int, *, config: DecimalConfig | None = None) -> BigDecimal:
    """e to ``digits`` fractional digits, as exp(1).

    Raises:
        DomainError: If digits is negative
    """
    if digits < 0:
        raise DomainError(f"digits must not be negative, got {digits}")
    return exp(ONE, digits, config=config)
