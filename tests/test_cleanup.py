"""Tests for best-effort cleanup steps."""

import logging

from spot_webdriver.cleanup import run_best_effort


def test_success():
    calls = []

    result = run_best_effort("close_tab", lambda: calls.append("ran"))

    assert calls == ["ran"]
    assert result.ok is True
    assert result.error is None
    assert result.duration_ms >= 0


def test_failure_is_reported_not_raised(caplog):
    def explode():
        raise ValueError("socket already closed")

    with caplog.at_level(logging.WARNING, logger="spot_webdriver.cleanup"):
        result = run_best_effort("disconnect", explode)

    assert result.ok is False
    assert result.name == "disconnect"
    assert result.error == "socket already closed"
    assert "disconnect failed" in caplog.text
