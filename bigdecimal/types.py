"""Pydantic field types for BigDecimal values.

Decimal amounts in JSON documents are usually strings, so that no digits
are lost to floating point on the way. These annotated types parse such
strings into BigDecimal (or validate and canonicalize them as strings).

Usage:
    class Quote(BaseModel):
        price: DecimalField
        label: DecimalString
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer, PlainValidator

from bigdecimal.errors import FormatError, OutOfRangeError
from bigdecimal.number import BigDecimal


def validate_big_decimal(value: Any) -> BigDecimal:
    """Convert a field value to BigDecimal.

    Args:
        value: BigDecimal, int, decimal string or decimal.Decimal

    Returns:
        The parsed value

    Raises:
        ValueError: If value is a float, a bool, another type, or text that
            is not a decimal
    """
    if isinstance(value, BigDecimal):
        return value

    # Floats have already lost digits; require the caller to send text
    if isinstance(value, (bool, float)):
        raise ValueError(f"BigDecimal fields do not accept {type(value).__name__}: {value!r}")

    if isinstance(value, int):
        return BigDecimal.from_int(value)

    if isinstance(value, Decimal):
        try:
            return BigDecimal.from_decimal(value)
        except (FormatError, OutOfRangeError) as err:
            raise ValueError(f"BigDecimal must be finite: {value}") from err

    if not isinstance(value, str):
        raise ValueError(f"BigDecimal must be string or int, got {type(value).__name__}")

    if not value.strip():
        raise ValueError("BigDecimal must not be blank")

    try:
        return BigDecimal.parse(value)
    except FormatError as err:
        raise ValueError(f"BigDecimal must be a decimal string: '{value}'") from err


def validate_big_decimal_string(value: Any) -> str:
    """Validate a decimal and return it in canonical string form."""
    return validate_big_decimal(value).to_string()


# BigDecimal parsed from text or int, serialized back as canonical text
DecimalField = Annotated[
    BigDecimal,
    PlainValidator(validate_big_decimal),
    PlainSerializer(lambda value: value.to_string(), return_type=str),
    Field(description="Arbitrary-precision decimal as a string"),
]

# Decimal kept as its canonical string
DecimalString = Annotated[
    str,
    BeforeValidator(validate_big_decimal_string),
    Field(description="Arbitrary-precision decimal as a canonical string"),
]
