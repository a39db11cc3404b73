from __future__ import annotations

import logging

import pytest

from anyrand import ScalarGenerator
from anyrand.utils.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("anyrand.engine").name == "anyrand.engine"
    assert get_logger("tools").name == "anyrand.tools"
    assert get_logger(ROOT_LOGGER).name == ROOT_LOGGER


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("info")
    configure_logging(logging.DEBUG)
    ours = [h for h in logger.handlers if getattr(h, "_anyrand", False)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG


def test_seed_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER):
        ScalarGenerator(int, seed=77)
    assert "seeded explicitly: 77" in caplog.text
    assert "integral strategy" in caplog.text
