# tests/unit/observability/test_logger.py
"""
LoggerService 的单元测试。

使用 `structlog.testing.capture_logs` 捕获结构化事件；
LoggerService 在捕获块内创建，以确保使用的是捕获配置。
"""

from unittest.mock import Mock

import pytest
from structlog.testing import capture_logs

from recipe_hub.observability import LoggerService


def _config(level):
    config = Mock()
    config.get = Mock(return_value=level)
    return config


class TestLoggerThreshold:
    def test_info_emitted_at_info_threshold(self):
        with capture_logs() as logs:
            LoggerService(_config("info")).info("hello")

        assert len(logs) == 1
        assert logs[0]["event"] == "hello"
        assert logs[0]["log_level"] == "info"

    def test_debug_suppressed_at_info_threshold(self):
        with capture_logs() as logs:
            LoggerService(_config("info")).debug("hidden")

        assert logs == []

    @pytest.mark.parametrize(
        ("threshold", "expected"),
        [
            ("debug", ["debug", "info", "warning", "error"]),
            ("warn", ["warning", "error"]),
            ("error", ["error"]),
        ],
    )
    def test_threshold_ordering(self, threshold, expected):
        with capture_logs() as logs:
            logger = LoggerService(_config(threshold))
            logger.debug("d")
            logger.info("i")
            logger.warn("w")
            logger.error("e")

        assert [entry["log_level"] for entry in logs] == expected

    def test_invalid_level_falls_back_to_info(self):
        logger = LoggerService(_config("verbose"))
        assert logger.level == "info"
        assert not logger.should_log("debug")
        assert logger.should_log("info")

    def test_level_is_read_once(self):
        config = _config("error")
        logger = LoggerService(config)
        config.get.return_value = "debug"

        assert logger.level == "error"
        config.get.assert_called_once_with("log_level", "info")


class TestLoggerPayload:
    def test_metadata_is_merged_alongside_message(self):
        with capture_logs() as logs:
            LoggerService(_config("info")).info(
                "recipe created", {"recipe_id": "1", "count": 2}
            )

        assert logs[0]["recipe_id"] == "1"
        assert logs[0]["count"] == 2
        assert logs[0]["event"] == "recipe created"

    def test_error_is_nested_with_name_message_stack(self):
        try:
            raise ValueError("boom")
        except ValueError as e:
            error = e

        with capture_logs() as logs:
            LoggerService(_config("info")).error("failed", {"op": "x"}, error=error)

        nested = logs[0]["error"]
        assert nested["name"] == "ValueError"
        assert nested["message"] == "boom"
        assert "Traceback" in nested["stack"]
        assert "boom" in nested["stack"]
        assert logs[0]["op"] == "x"

    def test_error_without_exception_has_no_error_field(self):
        with capture_logs() as logs:
            LoggerService(_config("info")).error("plain failure")

        assert "error" not in logs[0]
