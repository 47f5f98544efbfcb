"""Constants shared across the bigdecimal package."""

# Default number of significant digits for division and series evaluation
DEFAULT_PRECISION = 5000
DEFAULT_ALWAYS_TRUNCATE = False

# Extra digits carried by internal computations before the final rounding
GUARD_DIGITS = 10

# Python refuses int<->str conversions above 4300 digits; stay below that
CONVERSION_CHUNK_DIGITS = 4000

# Fixed-width integer bounds for narrowing conversions
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# 200 decimal places of pi and e
PI_DIGITS = (
    "3."
    "14159265358979323846264338327950288419716939937510"
    "58209749445923078164062862089986280348253421170679"
    "82148086513282306647093844609550582231725359408128"
    "48111745028410270193852110555964462294895493038196"
)
E_DIGITS = (
    "2."
    "71828182845904523536028747135266249775724709369995"
    "95749669676277240766303535475945713821785251664274"
    "91932003059921817413596629043572900334295260595630"
    "73813232862794349076323382988075319525101901157383"
)
CONSTANT_PLACES = 200
