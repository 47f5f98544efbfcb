"""Trigonometric, hyperbolic and inverse trigonometric functions.

Angles are in radians. Every public function takes ``precision`` as the
number of digits after the decimal point (default: the configured
precision), evaluates with guard digits and rounds half away from zero.

Sine-family inputs are wrapped into [-pi/2, pi/2] before the series is
summed. Poles are detected exactly: an input equal to an odd multiple of the
stored pi/2 constant (or of pi/2 at the working precision) raises
UndefinedResultError instead of returning a huge value.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

import structlog

from bigdecimal.config import DEFAULT_CONFIG, DecimalConfig
from bigdecimal.constants import CONSTANT_PLACES, GUARD_DIGITS
from bigdecimal.errors import DomainError, OutOfRangeError, UndefinedResultError
from bigdecimal.logexp import exp_places
from bigdecimal.number import (
    HALF_PI,
    ONE,
    ONE_HALF,
    PI,
    ZERO,
    BigDecimal,
    MidpointRounding,
    divide_places,
    mod,
    round_value,
    truncate_places,
)
from bigdecimal.roots import sqrt
from bigdecimal.series import evaluate_at_precision, taylor_series_sum

logger = structlog.get_logger()

__all__ = [
    # Circular
    "sin",
    "cos",
    "tan",
    "cot",
    "sec",
    "csc",
    # Hyperbolic
    "sinh",
    "cosh",
    "tanh",
    "coth",
    "sech",
    "csch",
    # Inverse
    "arcsin",
    "arccos",
    "arctan",
    "arccot",
    "arcsec",
    "arccsc",
    # Pi
    "approximate_pi",
    "pi_value",
    "half_pi_value",
    # Reduction helpers
    "wrap_input",
    "mod_odd_half_pi",
    "is_multiple_of_pi",
]

ONE_QUARTER = BigDecimal(25, -2, config=DEFAULT_CONFIG)

# arctan halves its argument at most twice on [-1, 1]
_ARCTAN_EXTRA_PLACES = 2


# =============================================================================
# Pi
# =============================================================================


def _arctan_inverse(n: int, scale: int) -> int:
    """arctan(1/n) * scale, summed as an alternating integer series."""
    power = scale // n
    total = power
    n_squared = n * n
    k = 1
    sign = 1
    while power:
        power //= n_squared
        k += 2
        sign = -sign
        total += sign * (power // k)
    return total


def approximate_pi(digits: int) -> BigDecimal:
    """Pi truncated to ``digits`` fractional digits.

    Uses Machin's formula pi = 16 * arctan(1/5) - 4 * arctan(1/239), with
    both arctangents evaluated in integer fixed point.

    Raises:
        DomainError: If digits is negative
    """
    if digits < 0:
        raise DomainError(f"digits must not be negative, got {digits}")
    scale = 10 ** (digits + GUARD_DIGITS)
    scaled = 16 * _arctan_inverse(5, scale) - 4 * _arctan_inverse(239, scale)
    return BigDecimal(scaled // 10**GUARD_DIGITS, -digits, config=DEFAULT_CONFIG)


@lru_cache(maxsize=64)
def pi_value(places: int) -> BigDecimal:
    """Pi truncated to ``places`` fractional digits.

    Served from the stored constant when it has enough digits, computed
    otherwise.
    """
    if places <= CONSTANT_PLACES:
        return truncate_places(PI, places, config=DEFAULT_CONFIG)
    logger.debug("pi_constant_extended", places=places)
    return approximate_pi(places)


def half_pi_value(places: int) -> BigDecimal:
    """Pi / 2 truncated to ``places`` fractional digits."""
    return truncate_places(pi_value(places + 1) * ONE_HALF, places, config=DEFAULT_CONFIG)


def _pi_for(x: BigDecimal, places: int) -> BigDecimal:
    """Pi with enough digits to reduce ``x`` to ``places`` fractional digits."""
    return pi_value(places + max(x.decimal_places, 0) + 1)


# =============================================================================
# Reduction helpers
# =============================================================================


def wrap_input(x: BigDecimal, places: int) -> tuple[BigDecimal, bool]:
    """Reduce an angle into [-pi/2, pi/2] for the sine series.

    With i the nearest integer to x / pi, sin(x) = (-1)**i * sin(x - i * pi).

    Returns:
        (reduced angle, whether the sine changes sign)
    """
    pi = _pi_for(x, places)
    turns = round_value(divide_places(x, pi, 2), MidpointRounding.TO_EVEN)
    return x - pi * turns, turns % 2 == 1


def _multiple_of(x: BigDecimal, unit: BigDecimal) -> int | None:
    """The integer k with x == k * unit exactly, or None."""
    turns = round_value(divide_places(x, unit, 2))
    if unit * turns == x:
        return turns
    return None


def mod_odd_half_pi(x: BigDecimal, places: int) -> bool:
    """True if x is exactly an odd multiple of pi/2.

    Checks the stored pi/2 constant and pi/2 truncated to ``places``.
    """
    for unit in (HALF_PI, half_pi_value(places)):
        turns = _multiple_of(x, unit)
        if turns is not None and turns % 2 == 1:
            return True
    return False


def is_multiple_of_pi(x: BigDecimal, places: int) -> bool:
    """True if x is exactly an integer multiple of pi (zero included)."""
    return any(_multiple_of(x, unit) is not None for unit in (PI, pi_value(places)))


def _divide_near_pole(
    numerator: Callable[[int], BigDecimal],
    denominator: Callable[[int], BigDecimal],
    places: int,
) -> BigDecimal:
    """numerator / denominator to ``places`` fractional digits.

    Both arguments compute their value at a given number of working places.
    A denominator with leading zeros after the point loses integer digits of
    the quotient, so it is recomputed until the working places cover twice
    the number of leading zeros.
    """
    working = places + GUARD_DIGITS
    value = denominator(working)
    while True:
        if value.is_zero:
            working *= 2
        else:
            needed = places + GUARD_DIGITS + 2 * max(0, -value.decimal_places)
            if needed <= working:
                break
            working = needed
        value = denominator(working)

    if working > places + GUARD_DIGITS:
        logger.debug("pole_precision_extended", places=places, working=working)
    return divide_places(numerator(working), value, places)


# =============================================================================
# Circular functions
# =============================================================================


def _sin(x: BigDecimal, places: int) -> BigDecimal:
    if x.is_zero:
        return ZERO
    if x == HALF_PI:
        return ONE
    reduced, flip = wrap_input(x, places)
    result = taylor_series_sum(reduced, 0, 1, 2, -1, True, places)
    return -result if flip else result


def _cos(x: BigDecimal, places: int) -> BigDecimal:
    return _sin(x + half_pi_value(places + 1), places)


def _tan(x: BigDecimal, places: int) -> BigDecimal:
    if mod_odd_half_pi(x, places):
        raise UndefinedResultError(f"tan is undefined at odd multiples of pi/2: {x}")

    def reduced(working: int) -> BigDecimal:
        return mod(x, _pi_for(x, working))

    return _divide_near_pole(
        lambda working: _sin(reduced(working), working),
        lambda working: _cos(reduced(working), working),
        places,
    )


def _check_cot_csc(name: str, x: BigDecimal, places: int) -> None:
    if x.is_zero:
        raise DomainError(f"{name} is undefined at zero")
    if is_multiple_of_pi(x, places):
        raise UndefinedResultError(f"{name} is undefined at multiples of pi: {x}")


def _cot(x: BigDecimal, places: int) -> BigDecimal:
    _check_cot_csc("cot", x, places)

    def reduced(working: int) -> BigDecimal:
        return mod(x, _pi_for(x, working))

    return _divide_near_pole(
        lambda working: _cos(reduced(working), working),
        lambda working: _sin(reduced(working), working),
        places,
    )


def _sec(x: BigDecimal, places: int) -> BigDecimal:
    if mod_odd_half_pi(x, places):
        raise UndefinedResultError(f"sec is undefined at odd multiples of pi/2: {x}")
    return _divide_near_pole(
        lambda working: ONE,
        lambda working: _cos(mod(x, _pi_for(x, working) * 2), working),
        places,
    )


def _csc(x: BigDecimal, places: int) -> BigDecimal:
    _check_cot_csc("csc", x, places)
    return _divide_near_pole(
        lambda working: ONE,
        lambda working: _sin(mod(x, _pi_for(x, working) * 2), working),
        places,
    )


# =============================================================================
# Hyperbolic functions
# =============================================================================


def _exp_pair(x: BigDecimal, places: int) -> tuple[BigDecimal, BigDecimal]:
    """(e**|x|, e**-|x|) to ``places`` fractional digits."""
    grown = exp_places(abs(x), places)
    return grown, divide_places(ONE, grown, places)


def _sinh(x: BigDecimal, places: int) -> BigDecimal:
    if abs(x) <= ONE:
        return taylor_series_sum(x, 0, 1, 2, 1, True, places)
    grown, shrunk = _exp_pair(x, places + 1)
    result = truncate_places((grown - shrunk) * ONE_HALF, places)
    return -result if x.is_negative else result


def _cosh(x: BigDecimal, places: int) -> BigDecimal:
    if abs(x) <= ONE:
        return taylor_series_sum(x, 1, 2, 2, 1, True, places)
    grown, shrunk = _exp_pair(x, places + 1)
    return truncate_places((grown + shrunk) * ONE_HALF, places)


def _tanh(x: BigDecimal, places: int) -> BigDecimal:
    working = places + GUARD_DIGITS
    return divide_places(_sinh(x, working), _cosh(x, working), places)


def _coth(x: BigDecimal, places: int) -> BigDecimal:
    if x.is_zero:
        raise DomainError("coth is undefined at zero")
    return _divide_near_pole(
        lambda working: _cosh(x, working),
        lambda working: _sinh(x, working),
        places,
    )


def _sech(x: BigDecimal, places: int) -> BigDecimal:
    return divide_places(ONE, _cosh(x, places + GUARD_DIGITS), places)


def _csch(x: BigDecimal, places: int) -> BigDecimal:
    if x.is_zero:
        raise DomainError("csch is undefined at zero")
    return _divide_near_pole(lambda working: ONE, lambda working: _sinh(x, working), places)


# =============================================================================
# Inverse functions
# =============================================================================


def _arctan(x: BigDecimal, places: int) -> BigDecimal:
    if x.is_zero:
        return ZERO
    if abs(x) > ONE:
        inner = _arctan(divide_places(ONE, x, places + GUARD_DIGITS), places + 1)
        half_pi = half_pi_value(places + 1)
        return (half_pi if x.is_positive else -half_pi) - inner

    # arctan(x) = 2 * arctan(x / (1 + sqrt(1 + x**2))) until the series converges fast
    working = places + _ARCTAN_EXTRA_PLACES
    halvings = 0
    reduced = x
    while abs(reduced) > ONE_QUARTER:
        root = sqrt(ONE + reduced * reduced, working + GUARD_DIGITS)
        reduced = divide_places(reduced, ONE + root, working + GUARD_DIGITS)
        halvings += 1
    if halvings:
        logger.debug("arctan_argument_halved", halvings=halvings)
    return taylor_series_sum(reduced, 0, 1, 2, -1, False, working) * 2**halvings


def _check_unit_interval(name: str, x: BigDecimal) -> None:
    if abs(x) > ONE:
        raise OutOfRangeError(f"{name} is defined on [-1, 1], got {x}")


def _check_outside_unit_interval(name: str, x: BigDecimal) -> None:
    if abs(x) < ONE:
        raise OutOfRangeError(f"{name} is defined for |x| >= 1, got {x}")


def _arcsin(x: BigDecimal, places: int) -> BigDecimal:
    _check_unit_interval("arcsin", x)
    if x.is_zero:
        return ZERO
    if abs(x) == ONE:
        half_pi = half_pi_value(places)
        return half_pi if x.is_positive else -half_pi
    working = places + GUARD_DIGITS
    root = sqrt(ONE - x * x, working)
    return _arctan(divide_places(x, root, working), places)


def _arccos(x: BigDecimal, places: int) -> BigDecimal:
    _check_unit_interval("arccos", x)
    if x.is_zero:
        return half_pi_value(places)
    if x == ONE:
        return ZERO
    if x == -ONE:
        return pi_value(places)
    working = places + GUARD_DIGITS
    root = sqrt(ONE - x * x, working)
    angle = _arctan(divide_places(root, x, working), places + 1)
    if x.is_negative:
        return pi_value(places + 1) + angle
    return angle


def _arccot(x: BigDecimal, places: int) -> BigDecimal:
    return half_pi_value(places + 1) - _arctan(x, places + 1)


def _arcsec(x: BigDecimal, places: int) -> BigDecimal:
    _check_outside_unit_interval("arcsec", x)
    return _arccos(divide_places(ONE, x, places + GUARD_DIGITS), places)


def _arccsc(x: BigDecimal, places: int) -> BigDecimal:
    _check_outside_unit_interval("arccsc", x)
    return _arcsin(divide_places(ONE, x, places + GUARD_DIGITS), places)


# =============================================================================
# Public functions
# =============================================================================


def sin(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Sine of ``x`` radians."""
    return evaluate_at_precision(_sin, x, precision, config)


def cos(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Cosine of ``x`` radians, as sin(x + pi/2)."""
    return evaluate_at_precision(_cos, x, precision, config)


def tan(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Tangent of ``x`` radians.

    Raises:
        UndefinedResultError: If x is an odd multiple of pi/2
    """
    return evaluate_at_precision(_tan, x, precision, config)


def cot(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Cotangent of ``x`` radians.

    Raises:
        DomainError: If x is zero
        UndefinedResultError: If x is a non-zero multiple of pi
    """
    return evaluate_at_precision(_cot, x, precision, config)


def sec(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Secant of ``x`` radians.

    Raises:
        UndefinedResultError: If x is an odd multiple of pi/2
    """
    return evaluate_at_precision(_sec, x, precision, config)


def csc(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Cosecant of ``x`` radians.

    Raises:
        DomainError: If x is zero
        UndefinedResultError: If x is a non-zero multiple of pi
    """
    return evaluate_at_precision(_csc, x, precision, config)


def sinh(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Hyperbolic sine."""
    return evaluate_at_precision(_sinh, x, precision, config)


def cosh(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Hyperbolic cosine."""
    return evaluate_at_precision(_cosh, x, precision, config)


def tanh(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Hyperbolic tangent."""
    return evaluate_at_precision(_tanh, x, precision, config)


def coth(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Hyperbolic cotangent.

    Raises:
        DomainError: If x is zero
    """
    return evaluate_at_precision(_coth, x, precision, config)


def sech(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Hyperbolic secant."""
    return evaluate_at_precision(_sech, x, precision, config)


def csch(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Hyperbolic cosecant.

    Raises:
        DomainError: If x is zero
    """
    return evaluate_at_precision(_csch, x, precision, config)


def arcsin(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Inverse sine, in [-pi/2, pi/2].

    Raises:
        OutOfRangeError: If x is outside [-1, 1]
    """
    return evaluate_at_precision(_arcsin, x, precision, config)


def arccos(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Inverse cosine, in [0, pi].

    Raises:
        OutOfRangeError: If x is outside [-1, 1]
    """
    return evaluate_at_precision(_arccos, x, precision, config)


def arctan(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Inverse tangent, in (-pi/2, pi/2)."""
    return evaluate_at_precision(_arctan, x, precision, config)


def arccot(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Inverse cotangent, in (0, pi)."""
    return evaluate_at_precision(_arccot, x, precision, config)


def arcsec(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Inverse secant, as arccos(1/x).

    Raises:
        OutOfRangeError: If |x| < 1
    """
    return evaluate_at_precision(_arcsec, x, precision, config)


def arccsc(x: BigDecimal | int, precision: int | None = None, *, config: DecimalConfig | None = None) -> BigDecimal:
    """Inverse cosecant, as arcsin(1/x).

    Raises:
        OutOfRangeError: If |x| < 1
    """
    return evaluate_at_precision(_arccsc, x, precision, config)
