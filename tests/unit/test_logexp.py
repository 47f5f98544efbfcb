"""Tests for exponential and logarithm functions."""

import math

import pytest
from structlog.testing import capture_logs

from bigdecimal import (
    E,
    ONE,
    ZERO,
    DivideByZeroError,
    DomainError,
    approximate_e,
    exp,
    ln,
    local_config,
    log,
    log2,
    log10,
    log_n,
    pow_decimal,
    round_places,
)
from tests.helpers import D, digits_after_point


class TestExp:
    """Tests for exp."""

    def test_one(self):
        """exp(1) to 20 places."""
        assert exp(1, 20) == D("2.71828182845904523536")

    def test_zero(self):
        """exp(0) = 1."""
        assert exp(ZERO, 20) == ONE

    def test_negative(self):
        """exp(-1) = 1/e, rounded to 20 places."""
        assert exp(-1, 20) == D("0.3678794411714423216")

    def test_five(self):
        """exp(5) starts 148.4131591."""
        assert str(exp(5, 10)).startswith("148.4131591")

    @pytest.mark.parametrize("x", ["0.5", "-0.25", "2.5", "10", "100", "-50"])
    def test_against_math(self, x):
        """Agrees with math.exp."""
        result = exp(D(x), 40)
        assert result.to_float() == pytest.approx(math.exp(float(x)), rel=1e-14)

    def test_precision_bounds_places(self):
        """Results carry at most `precision` fractional digits."""
        assert digits_after_point(exp(D("0.3"), 25)) <= 25

    def test_default_precision(self):
        """Without precision the configured precision is used."""
        with local_config(precision=10):
            assert exp(1) == D("2.7182818285")

    def test_halving_is_logged(self):
        """Large arguments log their halving count."""
        with capture_logs() as logs:
            exp(5, 10)
        assert any(entry["event"] == "exp_argument_halved" for entry in logs)

    def test_approximate_e(self):
        """approximate_e(50) matches the stored constant rounded to 50 places."""
        assert approximate_e(50) == round_places(E, 50)

    def test_approximate_e_negative_digits(self):
        """Negative digit counts are rejected."""
        with pytest.raises(DomainError):
            approximate_e(-1)


class TestLn:
    """Tests for the natural logarithm."""

    def test_two(self):
        """ln(2) to 20 places."""
        assert ln(2, 20) == D("0.69314718055994530942")

    def test_ten(self):
        """ln(10) to 20 places."""
        assert ln(10, 20) == D("2.30258509299404568402")

    def test_one(self):
        """ln(1) = 0."""
        assert ln(ONE, 20) == ZERO

    def test_e(self):
        """ln(e) = 1 with the 200-place constant."""
        assert ln(E, 50) == ONE

    def test_tiny_argument(self):
        """ln(1E-100) = -100 * ln(10)."""
        assert ln(D("1E-100"), 20) == D("-230.2585092994045684018")

    @pytest.mark.parametrize("x", ["0.5", "0.95", "1.05", "3", "1000", "123456.789", "0.0001"])
    def test_against_math(self, x):
        """Agrees with math.log."""
        result = ln(D(x), 30)
        assert result.to_float() == pytest.approx(math.log(float(x)), rel=1e-14)

    def test_exp_round_trip(self):
        """ln(exp(x)) recovers x."""
        x = D("1.2345")
        assert ln(exp(x, 40), 30) == x

    def test_cube_root_reduction_is_logged(self):
        """Arguments far from one are reduced by cube roots."""
        with capture_logs() as logs:
            ln(10, 10)
        assert any(entry["event"] == "ln_cube_root_reduction" for entry in logs)

    @pytest.mark.parametrize("x", ["0", "-1", "-0.5"])
    def test_non_positive_raises(self, x):
        """ln of zero or a negative value is a domain error."""
        with pytest.raises(DomainError, match="positive"):
            ln(D(x), 10)


class TestLog:
    """Tests for logarithms in other bases."""

    def test_exact_powers(self):
        """Powers of the base give integers."""
        assert log(8, 2, 10) == 3
        assert log2(1024, 10) == 10
        assert log10(D("0.001"), 10) == -3
        assert log10(D("1E+50"), 10) == 50

    def test_log_n_takes_base_first(self):
        """log_n(2, 8) = 3."""
        assert log_n(2, 8, 10) == 3

    def test_log10_of_two(self):
        """log10(2) to 20 places."""
        assert log10(2, 20) == D("0.30102999566398119521")

    def test_fractional_base(self):
        """Bases below one give negated logarithms."""
        assert log(8, D("0.5"), 10) == -3

    def test_against_math(self):
        """Agrees with math.log in base 7."""
        result = log(D("12345.6789"), 7, 30)
        assert result.to_float() == pytest.approx(math.log(12345.6789, 7), rel=1e-14)

    def test_base_close_to_one(self):
        """A base near one still gives the requested accuracy."""
        result = log(2, D("1.0001"), 20)
        assert result.to_float() == pytest.approx(math.log(2) / math.log(1.0001), rel=1e-12)

    @pytest.mark.parametrize("base", ["1", "0", "-2"])
    def test_invalid_base(self, base):
        """Bases that are one or not positive are domain errors."""
        with pytest.raises(DomainError, match="base"):
            log(8, D(base), 10)

    def test_invalid_argument(self):
        """log of a non-positive value is a domain error."""
        with pytest.raises(DomainError):
            log(ZERO, 10, 10)

    def test_negative_precision(self):
        """Negative precision is rejected."""
        with pytest.raises(DomainError, match="negative"):
            log(8, 2, -1)


class TestPowDecimal:
    """Tests for decimal exponents."""

    @pytest.mark.parametrize(
        "base,exponent,precision,expected",
        [
            (2, "0.5", 20, "1.4142135623730950488"),
            (10, "-0.5", 10, "0.316227766"),
            ("1.1", 3, 5, "1.331"),
            (2, -2, 5, "0.25"),
            ("1E+10", "1.5", 5, "1E+15"),
            (0, 0, 5, "1"),
            (0, "0.5", 5, "0"),
        ],
    )
    def test_known_values(self, base, exponent, precision, expected):
        """Integer and fractional exponents give correctly rounded results."""
        assert pow_decimal(D(str(base)), D(str(exponent)), precision) == D(expected)

    def test_against_math(self):
        """A fractional power agrees with float pow."""
        result = pow_decimal(D("1.5"), D("2.5"), 15)
        assert result.to_float() == pytest.approx(1.5**2.5, rel=1e-14)
        assert digits_after_point(result) <= 15

    def test_negative_base_needs_integer_exponent(self):
        """A negative base with a fractional exponent is a domain error."""
        assert pow_decimal(-2, 3, 5) == D("-8")
        with pytest.raises(DomainError, match="integer exponent"):
            pow_decimal(-8, D("0.5"), 10)

    def test_zero_base_negative_exponent(self):
        """Zero to a negative power is undefined."""
        with pytest.raises(DomainError, match="positive exponent"):
            pow_decimal(0, D("-0.5"), 10)
        with pytest.raises(DivideByZeroError):
            pow_decimal(0, -1, 10)

    def test_negative_precision(self):
        """Negative precision is rejected."""
        with pytest.raises(DomainError, match="negative"):
            pow_decimal(2, D("0.5"), -1)
