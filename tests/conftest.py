"""Shared pytest fixtures and configuration for the wacs-options test suite.

Guidelines
----------
* No network, filesystem or process side effects in any test.
* Every test builds its own registry; nothing is shared between tests.
* Core tests must be pure — no console output is asserted there.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from wacs_options.core.binder import OptionsBinder
from wacs_options.core.flags import build_registry
from wacs_options.core.registry import FlagRegistry


@pytest.fixture
def registry() -> FlagRegistry:
    return build_registry()


@pytest.fixture
def binder(registry: FlagRegistry) -> OptionsBinder:
    return OptionsBinder(registry)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop the handler ``configure_logging`` installs so tests stay isolated."""
    yield
    from wacs_options.cli import console

    logger = logging.getLogger("wacs_options")
    if console._installed_handler is not None:
        logger.removeHandler(console._installed_handler)
        console._installed_handler = None
    logger.setLevel(logging.NOTSET)
