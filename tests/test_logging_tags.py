"""Tests for console logging helpers and configuration."""

import pytest

from oznav.config import Config
from oznav.logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_WARNING,
    Color,
    colored,
    log_step,
    log_warning,
)


def test_colored_wraps_and_respects_no_color(monkeypatch):
    monkeypatch.delenv("OZNAV_NO_COLOR", raising=False)
    text = colored("hi", Color.GREEN, bold=True)
    assert text.startswith(Color.BOLD.value + Color.GREEN.value)
    assert text.endswith(Color.RESET.value)

    monkeypatch.setenv("OZNAV_NO_COLOR", "1")
    assert colored("hi", Color.GREEN) == "hi"


def test_log_helpers_tag_lines(monkeypatch, capsys):
    monkeypatch.setenv("OZNAV_NO_COLOR", "1")
    log_step("searching")
    log_warning("careful")

    out = capsys.readouterr().out.splitlines()
    assert out == [f"{LOG_TAG_DETERMINISTIC} searching", f"{LOG_TAG_WARNING} careful"]


def test_config_validate(monkeypatch):
    monkeypatch.setattr(Config, "TRACE_FORMAT", "jsonl")
    Config.validate()

    monkeypatch.setattr(Config, "TRACE_FORMAT", "xml")
    with pytest.raises(ValueError, match="OZNAV_TRACE_FORMAT"):
        Config.validate()

    monkeypatch.setattr(Config, "TRACE_FORMAT", "text")
    monkeypatch.setattr(Config, "TRACE_ENCODING", "not-a-codec")
    with pytest.raises(ValueError, match="OZNAV_TRACE_ENCODING"):
        Config.validate()


def test_config_display_lists_values():
    shown = Config.display()
    assert "Trace format" in shown
    assert "Verbose" in shown
