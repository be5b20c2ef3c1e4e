import json
import logging
import sys

from offline_gateway.core import logging_config


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="gateway.authorizer",
        level=logging.ERROR,
        pathname="authorizer.py",
        lineno=10,
        msg="Could not parse %s",
        args=("AUTHORIZER",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_custom_json_formatter_fields():
    formatter = logging_config.CustomJsonFormatter()

    log_json = json.loads(formatter.format(_record(override_source="env")))

    assert log_json["message"] == "Could not parse AUTHORIZER"
    assert log_json["level"] == "ERROR"
    assert log_json["logger"] == "gateway.authorizer"
    assert log_json["override_source"] == "env"
    assert log_json["_time"].endswith("+00:00")
    assert "lineno" not in log_json


def test_custom_json_formatter_includes_exception():
    formatter = logging_config.CustomJsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    log_json = json.loads(formatter.format(record))

    assert "ValueError: boom" in log_json["exception"]


def test_setup_logging_falls_back_without_config(monkeypatch, tmp_path):
    calls = {}

    def fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)

    logging_config.setup_logging(str(tmp_path / "missing.yml"))

    assert calls == {"level": "DEBUG"}


def test_setup_logging_substitutes_environment(monkeypatch, tmp_path):
    config_file = tmp_path / "logging.yml"
    config_file.write_text(
        "\n".join(
            [
                "version: 1",
                "disable_existing_loggers: false",
                "formatters:",
                "  json:",
                "    (): offline_gateway.core.logging_config.CustomJsonFormatter",
                "handlers:",
                "  discard:",
                "    class: logging.NullHandler",
                "    formatter: json",
                "loggers:",
                "  offline_gateway.tests.logging_probe:",
                "    level: ${LOG_LEVEL}",
                "    handlers: [discard]",
                "    propagate: false",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    logging_config.setup_logging(str(config_file))

    probe = logging.getLogger("offline_gateway.tests.logging_probe")
    assert probe.level == logging.WARNING
    assert probe.propagate is False


def test_setup_logging_reads_path_from_environment(monkeypatch, tmp_path):
    seen = []
    monkeypatch.setenv("LOG_CONFIG_PATH", str(tmp_path / "nope.yml"))
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: seen.append(kw))

    logging_config.setup_logging()

    assert len(seen) == 1


def test_setup_logging_uses_config_log_level(monkeypatch, tmp_path, make_config):
    calls = {}
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.update(kw))

    logging_config.setup_logging(
        str(tmp_path / "missing.yml"), log_level=make_config(LOG_LEVEL="ERROR").LOG_LEVEL
    )

    assert calls == {"level": "ERROR"}


def test_setup_logging_defaults_to_info(monkeypatch, tmp_path):
    calls = {}
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.update(kw))

    logging_config.setup_logging(str(tmp_path / "missing.yml"))

    assert calls == {"level": "INFO"}
