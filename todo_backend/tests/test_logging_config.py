import json

import structlog

from todo_api.logging_config import setup_logging


def emit_line(capsys, fmt):
    setup_logging(fmt)
    try:
        structlog.get_logger().info("Started", method="GET", path="/todos")
    finally:
        setup_logging("console")
    return capsys.readouterr().out.strip().splitlines()[-1]


def test_json_format_emits_json_object(capsys):
    record = json.loads(emit_line(capsys, "json"))
    assert record["event"] == "Started"
    assert record["method"] == "GET"
    assert record["path"] == "/todos"
    assert record["level"] == "info"
    # UTC ISO timestamps end in Z
    assert record["timestamp"].endswith("Z")


def test_console_format_is_plain_text(capsys):
    line = emit_line(capsys, "console")
    assert "Started" in line
    assert "path=/todos" in line
    assert not line.startswith("{")


def test_level_filters_lower_records(capsys):
    setup_logging("json", "WARNING")
    try:
        structlog.get_logger().info("hidden")
        structlog.get_logger().warning("shown")
    finally:
        setup_logging("console")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
