from __future__ import annotations

import sys

import structlog

import carbon_headlines.logging as log_module
from carbon_headlines.logging import _render_line, get_logger


def test_warning_lines_use_warn_prefix():
    line = _render_line(None, "warning", {"event": "source failed", "source": "euractiv", "level": "warning"})
    assert line == "WARN: source failed source=euractiv"


def test_info_lines_use_info_prefix():
    line = _render_line(None, "info", {"event": "collection finished", "headlines": 3})
    assert line == "INFO: collection finished headlines=3"


def test_get_logger_configures_stderr_output(monkeypatch):
    monkeypatch.setattr(log_module, "_configured", False)

    get_logger()

    assert log_module._configured is True
    printer = structlog.get_config()["logger_factory"]()
    assert printer._file is sys.stderr
