"""Unit tests for the application factory"""

import logging

from config import DEFAULT_SESSION_SECRET, ApplicationConfig
from goldbill.api.app import create_app


class QuietConfig(ApplicationConfig):
    LOG_LEVEL = "INFO"
    ENABLE_SENTRY = 0
    SEED_ON_STARTUP = False
    SESSION_SECRET = "unit-test-secret"


class DefaultSecretConfig(QuietConfig):
    SESSION_SECRET = DEFAULT_SESSION_SECRET


def _secret_warnings(caplog):
    return [
        record for record in caplog.records
        if record.levelno == logging.WARNING and "SESSION_SECRET" in record.getMessage()
    ]


def test_warns_when_default_session_secret_is_used(caplog):
    caplog.set_level(logging.INFO)

    create_app(DefaultSecretConfig)

    assert len(_secret_warnings(caplog)) == 1


def test_configured_session_secret_does_not_warn(caplog):
    caplog.set_level(logging.INFO)

    app = create_app(QuietConfig)

    assert _secret_warnings(caplog) == []
    assert app.state.config is QuietConfig
