"""Precision and truncation settings for BigDecimal arithmetic.

Settings live in an immutable DecimalConfig value. Every constructor and
operation accepts an explicit ``config=`` argument; when it is omitted the
active configuration is used. The active configuration is stored in a
context variable, so scoped overrides made with ``local_config`` are private
to the current thread or asyncio task.

Environment variables read once at import time:
- BIGDECIMAL_PRECISION: default precision (default: 5000)
- BIGDECIMAL_ALWAYS_TRUNCATE: truncate every value to the precision
  (default: false)
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass

import structlog

from bigdecimal.constants import DEFAULT_ALWAYS_TRUNCATE, DEFAULT_PRECISION

logger = structlog.get_logger()

ENV_PRECISION = "BIGDECIMAL_PRECISION"
ENV_ALWAYS_TRUNCATE = "BIGDECIMAL_ALWAYS_TRUNCATE"


@dataclass(frozen=True)
class DecimalConfig:
    """Arithmetic settings threaded through every BigDecimal operation.

    Attributes:
        precision: Maximum number of significant digits produced by division,
            and the default number of fractional digits for transcendental
            functions (default: 5000)
        always_truncate: If True, every constructed value is clipped to
            ``precision`` significant digits. If False, values are only
            normalized (default: False)
    """

    precision: int = DEFAULT_PRECISION
    always_truncate: bool = DEFAULT_ALWAYS_TRUNCATE

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be int, got {type(self.precision).__name__}")
        if self.precision < 1:
            raise ValueError(f"precision must be at least 1, got {self.precision}")
        if not isinstance(self.always_truncate, bool):
            raise TypeError(
                f"always_truncate must be bool, got {type(self.always_truncate).__name__}"
            )

    def replace(self, **changes: object) -> DecimalConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DecimalConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Configuration with unset variables at their library defaults

        Raises:
            ValueError: If BIGDECIMAL_PRECISION is not a positive integer
        """
        env = os.environ if environ is None else environ
        raw_precision = env.get(ENV_PRECISION, str(DEFAULT_PRECISION))
        try:
            precision = int(raw_precision)
        except ValueError as err:
            raise ValueError(f"{ENV_PRECISION} must be an integer: '{raw_precision}'") from err
        always_truncate = env.get(
            ENV_ALWAYS_TRUNCATE, str(DEFAULT_ALWAYS_TRUNCATE)
        ).lower() in ("true", "1", "yes")
        return cls(precision=precision, always_truncate=always_truncate)


# Library defaults, independent of the environment
DEFAULT_CONFIG = DecimalConfig()

_current_config: ContextVar[DecimalConfig] = ContextVar(
    "bigdecimal_config", default=DecimalConfig.from_env()
)


def get_config() -> DecimalConfig:
    """Return the active configuration."""
    return _current_config.get()


def set_config(config: DecimalConfig) -> Token[DecimalConfig]:
    """Make ``config`` the active configuration.

    Returns:
        Token that restores the previous configuration via reset_config
    """
    if not isinstance(config, DecimalConfig):
        raise TypeError(f"config must be DecimalConfig, got {type(config).__name__}")
    logger.debug(
        "decimal_config_set",
        precision=config.precision,
        always_truncate=config.always_truncate,
    )
    return _current_config.set(config)


def reset_config(token: Token[DecimalConfig]) -> None:
    """Restore the configuration that was active before set_config."""
    _current_config.reset(token)


def resolve_config(config: DecimalConfig | None) -> DecimalConfig:
    """Return ``config`` if given, otherwise the active configuration."""
    if config is None:
        return _current_config.get()
    return config


@contextmanager
def local_config(config: DecimalConfig | None = None, **overrides: object) -> Iterator[DecimalConfig]:
    """Temporarily replace the active configuration.

    Args:
        config: Base configuration (default: the active one)
        **overrides: Fields to change on the base configuration

    Yields:
        The configuration in effect inside the block

    Example:
        with local_config(precision=50):
            third = ONE / 3
    """
    scoped = resolve_config(config)
    if overrides:
        scoped = scoped.replace(**overrides)
    token = set_config(scoped)
    try:
        yield scoped
    finally:
        reset_config(token)
