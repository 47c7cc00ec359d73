import json
import logging
import sys

from netfence.log import JSONFormatter, get_logger


def test_formatter_emits_json_with_extras() -> None:
    record = logging.LogRecord(
        "netfence.test", logging.INFO, __file__, 1, "allowed %d", (3,), None
    )
    record.variable = "BROWSER_ALLOWED_HOSTS"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["name"] == "netfence.test"
    assert payload["message"] == "allowed 3"
    assert payload["variable"] == "BROWSER_ALLOWED_HOSTS"
    assert "msg" not in payload
    assert "error" not in payload


def test_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "netfence.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    payload = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in payload["error"]


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("netfence.policy").name == "netfence.policy"
