"""
Tests for LoggerManager and message normalization.
"""

from __future__ import annotations

import logging

from frontline.components.loggers import LoggerManager, normalize_message
from frontline.core.ports.logger import LogCategory


class BrokenLogger:
    def init(self) -> None:
        pass

    def log(self, message: str, category: str) -> None:
        raise RuntimeError("backend down")


class TestNormalizeMessage:
    def test_string_passes_through(self) -> None:
        assert normalize_message("plain") == "plain"

    def test_object_uses_str(self) -> None:
        assert normalize_message(42) == "42"

    def test_exception_includes_message_and_trace(self) -> None:
        try:
            raise ValueError("bad value")
        except ValueError as e:
            text = normalize_message(e)

        assert text.startswith("bad value")
        assert "Traceback" in text
        assert "ValueError" in text

    def test_chained_cause_is_rendered(self) -> None:
        try:
            try:
                raise KeyError("inner")
            except KeyError as inner:
                raise RuntimeError("outer") from inner
        except RuntimeError as e:
            text = normalize_message(e)

        assert "inner" in text
        assert "outer" in text


class TestLoggerManager:
    def test_init_called_once_per_backend(self, recording_logger) -> None:
        LoggerManager({"r": recording_logger})

        assert recording_logger.init_calls == 1

    def test_broadcasts_in_order(self, recording_logger) -> None:
        order: list[str] = []

        class Tagged:
            def __init__(self, tag: str) -> None:
                self.tag = tag

            def init(self) -> None:
                pass

            def log(self, message: str, category: str) -> None:
                order.append(self.tag)

        manager = LoggerManager({"a": Tagged("a"), "r": recording_logger, "b": Tagged("b")})
        manager.log("hello", "warning")

        assert order == ["a", "b"]
        assert recording_logger.records == [("hello", "warning")]
        assert manager.names == ["a", "r", "b"]

    def test_enum_category_becomes_value(self, recording_logger) -> None:
        LoggerManager({"r": recording_logger}).log("x", LogCategory.ERROR)

        assert recording_logger.records == [("x", "error")]

    def test_default_category_is_info(self, recording_logger) -> None:
        LoggerManager({"r": recording_logger}).log("x")

        assert recording_logger.categories() == ["info"]

    def test_failing_backend_does_not_block_others(self, recording_logger, caplog) -> None:
        manager = LoggerManager({"broken": BrokenLogger(), "r": recording_logger})

        with caplog.at_level(logging.ERROR, logger="frontline.components.loggers._impl"):
            manager.log("still delivered", "error")

        assert recording_logger.records == [("still delivered", "error")]
        assert "broken" in caplog.text

    def test_no_backends_is_noop(self) -> None:
        manager = LoggerManager()
        manager.log("into the void")

        assert len(manager) == 0
        assert manager.get_logger_by_name("r") is None
