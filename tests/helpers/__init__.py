"""Test helpers module for shared test utilities."""

from bigdecimal import BigDecimal


def D(text: str) -> BigDecimal:
    """Shorthand for BigDecimal.parse in test tables."""
    return BigDecimal.parse(text)


def digits_after_point(value: BigDecimal) -> int:
    """Number of fractional digits in the canonical string."""
    text = value.to_string()
    return len(text.partition(".")[2])
