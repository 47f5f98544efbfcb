"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bigdecimal import DEFAULT_CONFIG, DecimalConfig, local_config


@pytest.fixture(autouse=True)
def default_config() -> Iterator[DecimalConfig]:
    """Run every test under the library defaults, whatever the environment says."""
    with local_config(DEFAULT_CONFIG) as config:
        yield config


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()
