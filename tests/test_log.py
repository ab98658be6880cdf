import logging
import re

import pytest

from nodens import log


def test_loggers_unavailable_before_init(monkeypatch):
    monkeypatch.setattr(log, "_core", None)
    monkeypatch.setattr(log, "_client", None)
    with pytest.raises(RuntimeError):
        log.core_logger()
    with pytest.raises(RuntimeError):
        log.client_logger()


def test_init_names_loggers():
    log.init()
    assert log.core_logger().name == "NODENS"
    assert log.client_logger().name == "APP"


def test_loggers_accept_trace_level():
    log.init()
    assert log.core_logger().level == log.TRACE
    assert log.client_logger().isEnabledFor(log.TRACE)
    assert logging.getLevelName(log.TRACE) == "TRACE"


def test_message_pattern(capsys):
    log.init()
    log.core_logger().info("hello %s", "world")
    out = capsys.readouterr().out
    match = re.fullmatch(r"\[(\d{2}):(\d{2}):(\d{2})\] (\w+): (.*)\n", out)
    hours, minutes, seconds, logger_name, message = match.groups()
    assert logger_name == "NODENS"
    assert message == "hello world"
    assert 0 <= int(hours) < 24
    assert 0 <= int(minutes) < 60
    assert 0 <= int(seconds) < 62


def test_client_trace_message_is_written(capsys):
    log.init()
    log.client_logger().log(log.TRACE, "tick")
    out = capsys.readouterr().out
    assert out.rstrip("\n").endswith("APP: tick")


def test_no_colour_when_not_a_terminal(capsys):
    log.init()
    log.core_logger().error("boom")
    out = capsys.readouterr().out
    assert "\033[" not in out
    assert "NODENS: boom" in out


def test_init_twice_keeps_one_handler(capsys):
    log.init()
    log.init()
    assert len(log.core_logger().handlers) == 1
    log.core_logger().warning("once")
    assert capsys.readouterr().out.count("once") == 1


def test_loggers_do_not_propagate():
    log.init()
    assert log.core_logger().propagate is False
    assert log.client_logger().propagate is False