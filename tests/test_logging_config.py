"""Tests for logging formatters and setup."""

import json
import logging

from spot_webdriver.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    configure_logging,
)


def _record(**extra):
    record = logging.LogRecord("spot_webdriver.session", logging.INFO, __file__, 1, "Starting %s", ("TV",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extras():
    payload = json.loads(JSONFormatter().format(_record(participant="tv", step="start_tv")))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "spot_webdriver.session"
    assert payload["message"] == "Starting TV"
    assert payload["participant"] == "tv"
    assert payload["step"] == "start_tv"
    assert payload["timestamp"].endswith("Z")
    assert "lineno" not in payload


def test_colored_formatter_leaves_record_untouched():
    record = _record()

    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert "\033[32mINFO\033[0m Starting TV" == output
    assert record.levelname == "INFO"


def test_configure_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    root = logging.getLogger()
    saved = root.handlers[:], root.level

    try:
        configure_logging(level="debug", json_format=True, log_file=str(log_file))

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert all(isinstance(h.formatter, JSONFormatter) for h in root.handlers)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved[0]:
            root.addHandler(handler)
        root.setLevel(saved[1])
