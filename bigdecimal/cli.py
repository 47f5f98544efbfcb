"""Command line evaluation of BigDecimal functions.

Usage:
    # Pi to 500 places
    bigdecimal pi --digits 500

    # Any single-argument function
    bigdecimal eval sin 0.5 --precision 60

    # Logarithm in a chosen base
    bigdecimal log 1024 --base 2 --precision 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

import structlog

from bigdecimal import logexp, roots, trig
from bigdecimal.errors import BigDecimalError
from bigdecimal.number import BigDecimal

logger = structlog.get_logger()

FUNCTIONS: dict[str, Callable[..., BigDecimal]] = {
    "sin": trig.sin,
    "cos": trig.cos,
    "tan": trig.tan,
    "cot": trig.cot,
    "sec": trig.sec,
    "csc": trig.csc,
    "sinh": trig.sinh,
    "cosh": trig.cosh,
    "tanh": trig.tanh,
    "coth": trig.coth,
    "sech": trig.sech,
    "csch": trig.csch,
    "arcsin": trig.arcsin,
    "arccos": trig.arccos,
    "arctan": trig.arctan,
    "arccot": trig.arccot,
    "arcsec": trig.arcsec,
    "arccsc": trig.arccsc,
    "exp": logexp.exp,
    "ln": logexp.ln,
    "log2": logexp.log2,
    "log10": logexp.log10,
    "sqrt": roots.sqrt,
}

DEFAULT_CLI_PRECISION = 50


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigdecimal",
        description="Evaluate arbitrary-precision decimal functions",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    pi_parser = commands.add_parser("pi", help="Print pi")
    pi_parser.add_argument("--digits", type=int, default=DEFAULT_CLI_PRECISION)

    e_parser = commands.add_parser("e", help="Print e")
    e_parser.add_argument("--digits", type=int, default=DEFAULT_CLI_PRECISION)

    eval_parser = commands.add_parser("eval", help="Evaluate a function at a value")
    eval_parser.add_argument("function", choices=sorted(FUNCTIONS))
    eval_parser.add_argument("value", help="Decimal argument, e.g. 0.5 or 1.2E-3")
    eval_parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_CLI_PRECISION,
        help=f"Digits after the decimal point (default: {DEFAULT_CLI_PRECISION})",
    )

    log_parser = commands.add_parser("log", help="Logarithm in an arbitrary base")
    log_parser.add_argument("value")
    log_parser.add_argument("--base", default="10")
    log_parser.add_argument("--precision", type=int, default=DEFAULT_CLI_PRECISION)
    return parser


def run(args: argparse.Namespace) -> BigDecimal:
    """Compute the value requested by parsed arguments."""
    if args.command == "pi":
        return trig.approximate_pi(args.digits)
    if args.command == "e":
        return logexp.approximate_e(args.digits)
    if args.command == "log":
        return logexp.log(BigDecimal.parse(args.value), BigDecimal.parse(args.base), args.precision)
    return FUNCTIONS[args.function](BigDecimal.parse(args.value), args.precision)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    try:
        result = run(args)
    except BigDecimalError as err:
        logger.error("evaluation_failed", command=args.command, error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(result.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
