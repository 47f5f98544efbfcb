"""Tests for trigonometric, hyperbolic and inverse functions."""

import math

import pytest
from structlog.testing import capture_logs

from bigdecimal import (
    HALF_PI,
    ONE,
    PI,
    TWO_PI,
    ZERO,
    BigDecimal,
    DomainError,
    OutOfRangeError,
    UndefinedResultError,
    approximate_pi,
    arccos,
    arccot,
    arccsc,
    arcsec,
    arcsin,
    arctan,
    cos,
    cosh,
    cot,
    coth,
    csc,
    csch,
    local_config,
    round_places,
    sec,
    sech,
    sin,
    sinh,
    tan,
    tanh,
)
from bigdecimal.constants import GUARD_DIGITS
from bigdecimal.number import truncate_places
from bigdecimal.trig import half_pi_value, is_multiple_of_pi, mod_odd_half_pi, pi_value, wrap_input
from tests.helpers import D, digits_after_point

PRECISION = 30
OFFSET = 0.00123

# Points just either side of every multiple of pi/2 in [-2pi, 2pi]
NEAR_HALF_PI_MULTIPLES = [k * math.pi / 2 + sign * OFFSET for k in range(-4, 5) for sign in (-1, 1)]

CIRCULAR = [
    (sin, math.sin),
    (cos, math.cos),
    (tan, math.tan),
    (cot, lambda x: 1 / math.tan(x)),
    (sec, lambda x: 1 / math.cos(x)),
    (csc, lambda x: 1 / math.sin(x)),
]


def assert_matches(result: BigDecimal, expected: float) -> None:
    assert result.to_float() == pytest.approx(expected, rel=1e-11, abs=1e-25)


class TestCircularAgainstMath:
    """Circular functions agree with math around the multiples of pi/2."""

    @pytest.mark.parametrize("func,reference", CIRCULAR, ids=lambda f: getattr(f, "__name__", ""))
    @pytest.mark.parametrize("x", NEAR_HALF_PI_MULTIPLES)
    def test_near_multiples(self, func, reference, x):
        """f(k * pi/2 +- 0.00123) matches the float implementation."""
        assert_matches(func(BigDecimal.from_float(x), PRECISION), reference(x))

    @pytest.mark.parametrize("x", [0.5, -0.7, 2.0, 3.0, 10.0, -25.5, 1000000.0])
    def test_assorted_points(self, x):
        """sin and cos at ordinary points, including large arguments."""
        value = BigDecimal.from_float(x)
        assert_matches(sin(value, PRECISION), math.sin(x))
        assert_matches(cos(value, PRECISION), math.cos(x))


class TestCircularExactValues:
    """Exact values and symmetries."""

    def test_sin_special_values(self):
        """sin(0) = 0, sin(pi/2) = 1, sin(pi) = 0, sin(-pi/2) = -1."""
        assert sin(ZERO, PRECISION) == ZERO
        assert sin(HALF_PI, PRECISION) == ONE
        assert sin(PI, PRECISION) == ZERO
        assert sin(-HALF_PI, PRECISION) == -1

    def test_cos_special_values(self):
        """cos(0) = 1, cos(pi/2) = 0, cos(pi) = -1."""
        assert cos(ZERO, PRECISION) == ONE
        assert cos(HALF_PI, PRECISION) == ZERO
        assert cos(PI, PRECISION) == -1

    def test_tan_special_values(self):
        """tan(0) = 0, tan(pi/4) = 1, tan(pi) = 0."""
        assert tan(ZERO, PRECISION) == ZERO
        assert tan(PI * D("0.25"), PRECISION) == ONE
        assert tan(PI, PRECISION) == ZERO

    def test_reciprocal_special_values(self):
        """sec(0) = 1, sec(pi) = -1, csc(pi/2) = 1, cot(pi/4) = 1."""
        assert sec(ZERO, PRECISION) == ONE
        assert sec(PI, PRECISION) == -1
        assert csc(HALF_PI, PRECISION) == ONE
        assert cot(PI * D("0.25"), PRECISION) == ONE

    def test_sin_is_odd(self):
        """sin(-x) == -sin(x) exactly."""
        x = D("0.7")
        assert sin(-x, PRECISION) == -sin(x, PRECISION)

    def test_precision_bounds_places(self):
        """Results carry at most `precision` fractional digits."""
        assert digits_after_point(sin(D("0.3"), 25)) <= 25

    def test_default_precision(self):
        """Without precision the configured precision is used."""
        with local_config(precision=10):
            assert sin(D("0.5")) == D("0.4794255386")


class TestPoles:
    """Functions evaluated at their poles."""

    @pytest.mark.parametrize("func", [tan, sec])
    @pytest.mark.parametrize("multiple", [1, 3, -1, -5])
    def test_odd_half_pi_multiples(self, func, multiple):
        """tan and sec are undefined at odd multiples of pi/2."""
        with pytest.raises(UndefinedResultError, match="odd multiples"):
            func(HALF_PI * multiple, PRECISION)

    def test_working_precision_half_pi(self):
        """pi/2 truncated to the working precision is also a pole."""
        with pytest.raises(UndefinedResultError):
            tan(half_pi_value(PRECISION + GUARD_DIGITS), PRECISION)

    @pytest.mark.parametrize("func", [cot, csc])
    def test_multiples_of_pi(self, func):
        """cot and csc are undefined at non-zero multiples of pi."""
        with pytest.raises(UndefinedResultError, match="multiples of pi"):
            func(PI, PRECISION)
        with pytest.raises(UndefinedResultError):
            func(TWO_PI * -3, PRECISION)

    @pytest.mark.parametrize("func", [cot, csc, coth, csch])
    def test_zero(self, func):
        """Reciprocal functions of zero are domain errors."""
        with pytest.raises(DomainError, match="zero"):
            func(ZERO, PRECISION)

    @pytest.mark.parametrize(
        "func,x,precision,expected",
        [
            (tan, "1.5707963267948966", 5, "51998506188720270.66019"),
            (tan, "1.5707963267948966", 20, "51998506188720270.66019474166122686848"),
            (tan, "-1.5707963267948966", 20, "-51998506188720270.66019474166122686848"),
            (sec, "1.5707963267948966", 20, "51998506188720270.66019474166122687809"),
            (cot, "3.14159265358979", 20, "-308788493220129.3574786585956730974"),
            (csc, "3.14159265358979", 20, "308788493220129.35747865859567471663"),
            (cot, "1E-15", 20, "999999999999999.99999999999999966667"),
        ],
    )
    def test_all_digits_next_to_pole(self, func, x, precision, expected):
        """Every requested digit is correct next to a pole."""
        assert func(D(x), precision) == D(expected)

    def test_extended_precision_is_logged(self):
        """Near a pole the working precision grows."""
        with capture_logs() as logs:
            tan(D("1.5707963267948966"), 5)
        assert any(entry["event"] == "pole_precision_extended" for entry in logs)

    def test_near_pole_is_finite(self):
        """Points next to a pole evaluate normally."""
        result = tan(HALF_PI - BigDecimal(1, -10), PRECISION)
        assert result > 10**9


class TestHyperbolic:
    """Hyperbolic functions."""

    @pytest.mark.parametrize("x", [-10.0, -3.0, -1.5, -0.5, 0.00123, 0.75, 1.0, 2.5, 10.0])
    def test_against_math(self, x):
        """sinh, cosh, tanh and sech match math."""
        value = BigDecimal.from_float(x)
        assert_matches(sinh(value, PRECISION), math.sinh(x))
        assert_matches(cosh(value, PRECISION), math.cosh(x))
        assert_matches(tanh(value, PRECISION), math.tanh(x))
        assert_matches(sech(value, PRECISION), 1 / math.cosh(x))

    @pytest.mark.parametrize("x", [-3.0, -0.5, 0.00123, 1.0, 4.0])
    def test_reciprocals_against_math(self, x):
        """coth and csch match math."""
        value = BigDecimal.from_float(x)
        assert_matches(coth(value, PRECISION), 1 / math.tanh(x))
        assert_matches(csch(value, PRECISION), 1 / math.sinh(x))

    def test_at_zero(self):
        """sinh(0) = tanh(0) = 0, cosh(0) = sech(0) = 1."""
        assert sinh(ZERO, PRECISION) == ZERO
        assert tanh(ZERO, PRECISION) == ZERO
        assert cosh(ZERO, PRECISION) == ONE
        assert sech(ZERO, PRECISION) == ONE

    def test_sinh_is_odd(self):
        """sinh(-x) == -sinh(x) for large and small arguments."""
        for text in ("0.5", "3"):
            x = D(text)
            assert sinh(-x, PRECISION) == -sinh(x, PRECISION)


class TestInverse:
    """Inverse trigonometric functions."""

    @pytest.mark.parametrize("x", [-1.0, -0.9, -0.5, 0.00123, 0.5, 0.99, 1.0])
    def test_arcsin_arccos_against_math(self, x):
        """arcsin and arccos match math on [-1, 1]."""
        value = BigDecimal.from_float(x)
        assert_matches(arcsin(value, PRECISION), math.asin(x))
        assert_matches(arccos(value, PRECISION), math.acos(x))

    @pytest.mark.parametrize("x", [-100.0, -2.0, -1.0, -0.3, 0.2, 1.0, 3.0, 10000.0])
    def test_arctan_arccot_against_math(self, x):
        """arctan and arccot match math."""
        value = BigDecimal.from_float(x)
        assert_matches(arctan(value, PRECISION), math.atan(x))
        assert_matches(arccot(value, PRECISION), math.pi / 2 - math.atan(x))

    @pytest.mark.parametrize("x", [-5.0, -1.0, 1.0, 1.5, 10.0])
    def test_arcsec_arccsc_against_math(self, x):
        """arcsec and arccsc match math outside (-1, 1)."""
        value = BigDecimal.from_float(x)
        assert_matches(arcsec(value, PRECISION), math.acos(1 / x))
        assert_matches(arccsc(value, PRECISION), math.asin(1 / x))

    def test_special_values(self):
        """Endpoints map to multiples of pi/2."""
        half_pi = round_places(HALF_PI, PRECISION)
        assert arcsin(ONE, PRECISION) == half_pi
        assert arcsin(-ONE, PRECISION) == -half_pi
        assert arccos(ONE, PRECISION) == ZERO
        assert arccos(ZERO, PRECISION) == half_pi
        assert arccos(-ONE, PRECISION) == round_places(PI, PRECISION)
        assert arctan(ZERO, PRECISION) == ZERO

    def test_arctan_one_is_quarter_pi(self):
        """arctan(1) = pi/4."""
        assert arctan(ONE, PRECISION) == round_places(PI * D("0.25"), PRECISION)

    def test_arctan_halving_is_logged(self):
        """Arguments above one quarter are halved first."""
        with capture_logs() as logs:
            arctan(D("0.9"), 10)
        assert any(entry["event"] == "arctan_argument_halved" for entry in logs)

    @pytest.mark.parametrize("func", [arcsin, arccos])
    @pytest.mark.parametrize("x", ["1.0001", "-2"])
    def test_outside_unit_interval(self, func, x):
        """arcsin and arccos reject |x| > 1."""
        with pytest.raises(OutOfRangeError, match=r"\[-1, 1\]"):
            func(D(x), PRECISION)

    @pytest.mark.parametrize("func", [arcsec, arccsc])
    @pytest.mark.parametrize("x", ["0", "0.5", "-0.9999"])
    def test_inside_unit_interval(self, func, x):
        """arcsec and arccsc reject |x| < 1."""
        with pytest.raises(OutOfRangeError, match=r"\|x\| >= 1"):
            func(D(x), PRECISION)

    def test_sin_of_arcsin(self):
        """sin(arcsin(x)) recovers x."""
        x = D("0.6")
        assert sin(arcsin(x, 40), PRECISION) == x


class TestPi:
    """Tests for pi approximation and reduction helpers."""

    def test_approximate_pi(self):
        """Machin's formula reproduces the stored digits."""
        assert approximate_pi(50) == truncate_places(PI, 50)
        assert approximate_pi(0) == 3

    def test_approximate_pi_beyond_constant(self):
        """300 digits start with the 200 stored ones."""
        assert truncate_places(approximate_pi(300), 200) == PI

    def test_approximate_pi_negative_digits(self):
        """Negative digit counts are rejected."""
        with pytest.raises(DomainError):
            approximate_pi(-1)

    def test_pi_value_uses_constant(self):
        """Short requests are served from the constant."""
        assert pi_value(100) == truncate_places(PI, 100)

    def test_pi_value_extends_constant(self):
        """Long requests compute pi and log it."""
        pi_value.cache_clear()
        with capture_logs() as logs:
            value = pi_value(250)
        assert truncate_places(value, 200) == PI
        assert any(entry["event"] == "pi_constant_extended" for entry in logs)

    def test_wrap_input(self):
        """10 wraps to 10 - 3 * pi with a sign flip."""
        reduced, flip = wrap_input(D("10"), 30)
        assert flip is True
        assert reduced.to_float() == pytest.approx(10 - 3 * math.pi, rel=1e-14)

    def test_wrap_input_in_range(self):
        """Values already in range are unchanged."""
        reduced, flip = wrap_input(D("0.5"), 30)
        assert reduced == D("0.5")
        assert flip is False

    def test_pole_helpers(self):
        """Exact multiple detection."""
        assert mod_odd_half_pi(HALF_PI * 5, 30)
        assert not mod_odd_half_pi(PI, 30)
        assert not mod_odd_half_pi(D("1.5"), 30)
        assert is_multiple_of_pi(PI * 7, 30)
        assert is_multiple_of_pi(ZERO, 30)
        assert not is_multiple_of_pi(D("3"), 30)
