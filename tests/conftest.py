"""Shared test fixtures and configuration.

Keeps tests away from the real config and log directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from focuscard.models.config_models import AppConfig
from focuscard.models.focus.ticker import ManualTicker
from focuscard.services.focus_service import FocusCardState


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application logger at a temporary directory."""
    import focuscard.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("focuscard").handlers.clear()
    with patch("focuscard.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    for handler in logging.getLogger("focuscard").handlers:
        handler.close()
    logging.getLogger("focuscard").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from focuscard.services.config_service import ConfigService, get_config_service

    get_config_service.cache_clear()
    with patch(
        "focuscard.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        svc = ConfigService()
        yield svc
    get_config_service.cache_clear()


@pytest.fixture()
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture()
def state(ticker) -> FocusCardState:
    """State with three labels, no seed tasks and a manual ticker."""
    return FocusCardState(
        total_seconds=1500,
        labels=["Work", "Study", "Life"],
        seed_tasks=[],
        ticker=ticker,
    )


@pytest.fixture()
def default_config() -> AppConfig:
    return AppConfig()
