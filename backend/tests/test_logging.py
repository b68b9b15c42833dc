import logging

from app.core import logging as app_logging


def test_configure_logging_adds_one_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(app_logging, "_configured", False)
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    before = len(root.handlers)

    app_logging.configure_logging("debug")
    app_logging.configure_logging("warning")

    assert len(root.handlers) == before + 1
    assert root.level == logging.WARNING
    assert logging.getLogger("twilio.http_client").level == logging.WARNING
