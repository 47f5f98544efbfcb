"""Error types raised by BigDecimal arithmetic.

Every error derives from BigDecimalError, which is an ArithmeticError, so
callers can catch the whole family at once. The concrete classes also derive
from the closest built-in exception (ValueError, ZeroDivisionError) so that
generic handlers keep working.
"""

from __future__ import annotations


class BigDecimalError(ArithmeticError):
    """Base class for BigDecimal errors."""

    pass


class FormatError(BigDecimalError, ValueError):
    """Input text or value could not be parsed as a decimal."""

    pass


class DivideByZeroError(BigDecimalError, ZeroDivisionError):
    """Division or modulo by zero."""

    pass


class DomainError(BigDecimalError, ValueError):
    """Argument outside the set of values a function accepts."""

    pass


class OutOfRangeError(BigDecimalError, ValueError):
    """Argument outside a restricted range, or a conversion overflowed."""

    pass


class UndefinedResultError(BigDecimalError):
    """Function evaluated at one of its poles."""

    pass
