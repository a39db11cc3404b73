from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from anyrand.utils.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by CLI invocations."""

    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
