"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state and to
build independent task stores per test.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from taskflow_api.adapters.memory import InMemoryTaskRepository
from taskflow_api.server import create_app
from taskflow_api.services import TaskService


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path):
    """Point platformdirs config and log locations at *tmp_path*.

    Also resets the logger and config-manager singletons so every test starts
    from a clean slate.
    """
    import taskflow_api.config as config_mod
    import taskflow_api.utils.logger as logger_mod

    logger_mod._logger = None
    config_mod._config_manager = None
    logging.getLogger("taskflow_api").handlers.clear()

    with patch("taskflow_api.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        with patch(
            "taskflow_api.config.user_config_dir", return_value=str(tmp_path / "config")
        ):
            yield tmp_path

    for handler in logging.getLogger("taskflow_api").handlers:
        handler.close()
    logging.getLogger("taskflow_api").handlers.clear()
    logger_mod._logger = None
    config_mod._config_manager = None


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def repository(clock):
    return InMemoryTaskRepository(clock=clock)


@pytest.fixture()
def service(repository):
    return TaskService(repository)


@pytest.fixture()
def app(service):
    flask_app = create_app(service=service)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app):
    return app.test_client()
