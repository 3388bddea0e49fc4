import logging
import os

from app.core.logger import LOG_FILE, get_logger, resolve_level


def test_level_names_are_resolved():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING
    assert resolve_level("chatty") == logging.INFO


def test_default_level_comes_from_settings(monkeypatch):
    from app.core.config import settings

    monkeypatch.setattr(settings, "LOG_LEVEL", "ERROR")
    assert resolve_level(None) == logging.ERROR


def test_handlers_are_attached_once():
    first = get_logger("quote_mailer.tests.once")
    second = get_logger("quote_mailer.tests.once")
    assert first is second
    assert len(second.handlers) == 2
    assert second.propagate is False
    assert any(
        getattr(handler, "baseFilename", None) == os.path.abspath(LOG_FILE)
        for handler in second.handlers
    )


def test_per_logger_level_knob():
    mailjet_like = get_logger("quote_mailer.tests.mailjet", level="DEBUG")
    assert mailjet_like.isEnabledFor(logging.DEBUG)

    quieter = get_logger("quote_mailer.tests.mailjet", level="WARNING")
    assert quieter.level == logging.WARNING
    assert not quieter.isEnabledFor(logging.INFO)
