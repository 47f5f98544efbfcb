"""Convergent power series evaluation.

Every transcendental function in the package is built on taylor_series_sum,
which sums

    sum_start + sign_0 * x**n_0 / d(n_0) + sign_1 * x**n_1 / d(n_1) + ...

for n_k = counter_start + k * jump, where d(n) is n! or n and each sign is
the previous one times ``multiplier``. Common parameterizations:

    exp(x)      1, 1, 1, +1, factorial
    sin(x)      0, 1, 2, -1, factorial
    sinh(x)     0, 1, 2, +1, factorial
    cosh(x)     1, 2, 2, +1, factorial
    ln(1 + y)   0, 1, 1, -1, plain
    arctan(x)   0, 1, 2, -1, plain
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from bigdecimal.config import DEFAULT_CONFIG, DecimalConfig, local_config, resolve_config
from bigdecimal.constants import GUARD_DIGITS
from bigdecimal.errors import DomainError
from bigdecimal.integer_math import factorial
from bigdecimal.number import (
    BigDecimal,
    absolute,
    add,
    as_big_decimal,
    compare,
    divide_places,
    multiply,
    negate,
    power,
    round_places,
    truncate_places,
)

logger = structlog.get_logger()

__all__ = ["precision_target", "taylor_series_sum", "evaluate_at_precision"]


def precision_target(precision: int) -> BigDecimal:
    """Convergence threshold ``10**-(precision + 1)``."""
    return BigDecimal(1, -(precision + 1), config=DEFAULT_CONFIG)


def taylor_series_sum(
    x: BigDecimal | int,
    sum_start: BigDecimal | int,
    counter_start: int,
    jump: int,
    multiplier: int,
    factorial_denominator: bool,
    precision: int,
    *,
    config: DecimalConfig | None = None,
) -> BigDecimal:
    """Sum a power series until it converges to ``precision`` fractional digits.

    Summation stops when a term (the change of the partial sum) is smaller
    than precision_target(precision), or after ``2 * precision`` terms. Powers
    and terms are kept to ``precision + GUARD_DIGITS`` fractional digits so
    that operand sizes stay bounded.

    Args:
        x: Series argument
        sum_start: Initial value of the sum
        counter_start: Power of the first term
        jump: Increase of the power between terms
        multiplier: Factor applied to the sign after each term (+1 or -1)
        factorial_denominator: Divide by n! if True, by n if False
        precision: Fractional digits the sum must be accurate to
        config: Settings applied to the result (default: the active one)

    Returns:
        The partial sum at the point of convergence

    Raises:
        DomainError: If precision < 1, jump < 1, counter_start < 0, or a
            plain denominator would be zero
    """
    if precision < 1:
        raise DomainError(f"series precision must be at least 1, got {precision}")
    if jump < 1:
        raise DomainError(f"series jump must be at least 1, got {jump}")
    if counter_start < 0 or (counter_start == 0 and not factorial_denominator):
        raise DomainError(f"invalid series counter start: {counter_start}")

    settings = resolve_config(config)
    exact = DEFAULT_CONFIG
    x = as_big_decimal(x)
    places = precision + GUARD_DIGITS
    target = precision_target(precision)

    step = power(x, jump, config=exact)
    current_power = truncate_places(power(x, counter_start, config=exact), places, config=exact)
    total = as_big_decimal(sum_start)
    n = counter_start
    sign = 1
    max_terms = 2 * precision

    for _ in range(max_terms):
        denominator = factorial(n) if factorial_denominator else n
        term = divide_places(current_power, denominator, places, config=exact)
        if sign < 0:
            term = negate(term, config=exact)
        total = add(total, term, config=exact)
        if compare(absolute(term, config=exact), target) < 0:
            break
        sign *= multiplier
        n += jump
        current_power = truncate_places(multiply(current_power, step, config=exact), places, config=exact)
    else:
        logger.warning(
            "series_iteration_cap_reached",
            terms=max_terms,
            precision=precision,
            counter=n,
        )

    return BigDecimal(total.mantissa, total.exponent, config=settings)


def evaluate_at_precision(
    func: Callable[[BigDecimal, int], BigDecimal],
    value: BigDecimal | int,
    precision: int | None,
    config: DecimalConfig | None,
) -> BigDecimal:
    """Evaluate ``func(value, places)`` with guard digits and round the result.

    ``func`` runs with exact arithmetic (no truncation) and is asked for
    ``precision + GUARD_DIGITS`` fractional digits; the result is rounded
    half away from zero to ``precision`` fractional digits.

    Args:
        func: Function of (argument, working places)
        value: Argument
        precision: Fractional digits of the result (default: configured precision)
        config: Settings (default: the active configuration)

    Raises:
        DomainError: If precision is negative
    """
    settings = resolve_config(config)
    places = settings.precision if precision is None else precision
    if places < 0:
        raise DomainError(f"precision must not be negative, got {places}")
    value = as_big_decimal(value)
    with local_config(DEFAULT_CONFIG):
        result = func(value, places + GUARD_DIGITS)
    return round_places(result, places, config=settings)
