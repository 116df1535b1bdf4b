"""Pytest configuration and fixtures for neo-permissions tests."""

import pytest
from loguru import logger

from neo_permissions.config import (
    LOG_NAMESPACE,
    PermissionSettings,
    clear_settings_cache,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_library_state():
    """Restore default settings and logging after each test."""
    yield
    clear_settings_cache()
    setup_logging(PermissionSettings(_env_file=None))


@pytest.fixture
def log_messages():
    """Capture library log records as formatted messages."""
    messages = []
    logger.enable(LOG_NAMESPACE)
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable(LOG_NAMESPACE)


@pytest.fixture
def tracing_settings():
    """Settings with library logging and match tracing enabled."""
    return PermissionSettings(_env_file=None, log_enabled=True, log_level="DEBUG", trace_matches=True)


@pytest.fixture
def sample_required_permissions():
    """Required permissions from the permission language reference."""
    return [
        "users.read",
        "users.write",
        "assets.files.read",
        "assets.files.write",
        "assets.files.archive.read",
        "assets.stats.read",
        "assets.stats.history.monthly.view",
    ]


@pytest.fixture
def sample_granted_permissions():
    """Granted scopes from the permission language reference."""
    return [
        "users.*",
        "assets.files.*",
        "assets.files.archive.*",
        "assets.stats.*",
        "assets.*",
        "assets.*.read",
        "*.*.read",
    ]
