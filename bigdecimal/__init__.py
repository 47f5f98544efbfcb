"""Arbitrary-precision decimal arithmetic and transcendental functions."""

from bigdecimal.config import (
    DEFAULT_CONFIG,
    DecimalConfig,
    get_config,
    local_config,
    reset_config,
    set_config,
)
from bigdecimal.errors import (
    BigDecimalError,
    DivideByZeroError,
    DomainError,
    FormatError,
    OutOfRangeError,
    UndefinedResultError,
)
from bigdecimal.logexp import approximate_e, exp, ln, log, log2, log10, log_n, pow_decimal
from bigdecimal.number import (
    E,
    HALF_PI,
    MINUS_ONE,
    ONE,
    ONE_HALF,
    PI,
    TEN,
    TWO_PI,
    ZERO,
    BigDecimal,
    MidpointRounding,
    ceiling,
    divide,
    floor,
    floor_divide,
    mod,
    parse,
    parse_fraction,
    power,
    round_places,
    round_value,
    truncate,
    try_parse_fraction,
)
from bigdecimal.roots import decimal_nth_root, sqrt
from bigdecimal.trig import (
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
    sec,
    sech,
    sin,
    sinh,
    tan,
    tanh,
)
from bigdecimal.types import DecimalField, DecimalString

__version__ = "0.1.0"
__all__ = [
    # Core type
    "BigDecimal",
    "MidpointRounding",
    # Configuration
    "DecimalConfig",
    "DEFAULT_CONFIG",
    "get_config",
    "set_config",
    "reset_config",
    "local_config",
    # Errors
    "BigDecimalError",
    "FormatError",
    "DivideByZeroError",
    "DomainError",
    "OutOfRangeError",
    "UndefinedResultError",
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
    # Arithmetic
    "parse",
    "parse_fraction",
    "try_parse_fraction",
    "truncate",
    "divide",
    "floor_divide",
    "mod",
    "power",
    "round_value",
    "round_places",
    "floor",
    "ceiling",
    # Roots
    "decimal_nth_root",
    "sqrt",
    # Exponential and logarithm
    "exp",
    "ln",
    "log",
    "log_n",
    "log2",
    "log10",
    "pow_decimal",
    "approximate_e",
    # Trigonometry
    "sin",
    "cos",
    "tan",
    "cot",
    "sec",
    "csc",
    "sinh",
    "cosh",
    "tanh",
    "coth",
    "sech",
    "csch",
    "arcsin",
    "arccos",
    "arctan",
    "arccot",
    "arcsec",
    "arccsc",
    "approximate_pi",
    # Validation types
    "DecimalField",
    "DecimalString",
    "__version__",
]
