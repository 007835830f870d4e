# tests/unit/test_config.py
"""
环境记录加载 (`load_environment`) 与 dotenv 文件加载的测试。
"""

import os

import pytest
from pydantic import ValidationError

from recipe_hub.application.services import ConfigurationService
from recipe_hub.config import (
    SKIP_VALIDATION_ENV,
    load_dotenv_files,
    load_environment,
)
from recipe_hub_core.exceptions import ConfigValidationError, MissingConfigError

REQUIRED = {
    "port": "3000",
    "database_url": "postgresql+asyncpg://u:p@localhost:5432/recipes",
    "rabbitmq_host": "mq.local",
    "rabbitmq_port": "5672",
    "rabbitmq_username": "guest",
    "rabbitmq_password": "guest",
}


class TestLoadEnvironment:
    def test_valid_environment_is_parsed_and_coerced(self, set_env):
        """必填项齐全时返回强类型记录。"""
        set_env(**REQUIRED)

        env = load_environment()

        assert env.port == 3000
        assert env.rabbitmq_port == 5672
        assert env.database_url == REQUIRED["database_url"]
        assert env.host == "0.0.0.0"

    def test_defaults_for_app_env_and_log_level(self, set_env):
        set_env(**REQUIRED)

        env = load_environment()

        assert env.app_env == "development"
        assert env.log_level == "info"
        assert env.log_format == "json"

    def test_missing_required_key_raises(self, set_env):
        """缺少 RABBITMQ_PASSWORD 时启动失败。"""
        values = dict(REQUIRED)
        values.pop("rabbitmq_password")
        set_env(**values)

        with pytest.raises(ConfigValidationError) as exc_info:
            load_environment()
        assert "rabbitmq_password" in str(exc_info.value)

    def test_empty_string_counts_as_missing(self, set_env):
        set_env(**{**REQUIRED, "rabbitmq_host": ""})

        with pytest.raises(ConfigValidationError):
            load_environment()

    def test_invalid_app_env_rejected(self, set_env):
        set_env(**REQUIRED, app_env="staging")

        with pytest.raises(ConfigValidationError):
            load_environment()

    def test_invalid_port_rejected(self, set_env):
        set_env(**{**REQUIRED, "port": "not-a-number"})

        with pytest.raises(ConfigValidationError):
            load_environment()

    def test_invalid_database_url_rejected(self, set_env):
        set_env(**{**REQUIRED, "database_url": "::not a url::"})

        with pytest.raises(ConfigValidationError):
            load_environment()

    def test_log_level_is_normalized(self, set_env):
        """`WARNING` 与 `warn` 等价。"""
        set_env(**REQUIRED, log_level="WARNING")

        assert load_environment().log_level == "warn"

    def test_environment_record_is_immutable(self, set_env):
        set_env(**REQUIRED)
        env = load_environment()

        with pytest.raises(ValidationError):
            env.port = 1  # type: ignore[misc]


class TestSkipValidation:
    def test_skip_flag_never_fails(self, monkeypatch, set_env):
        """跳过校验时，缺失的必填项保持缺失，由访问器抛出 MissingConfigError。"""
        monkeypatch.setenv(SKIP_VALIDATION_ENV, "1")
        set_env(database_url="sqlite+aiosqlite:///x.db")

        env = load_environment()
        config = ConfigurationService(env)

        assert config.get("database_url") == "sqlite+aiosqlite:///x.db"
        with pytest.raises(MissingConfigError):
            config.get("rabbitmq_password")
        assert config.get("rabbitmq_password", "fallback") == "fallback"


class TestLoadDotenvFiles:
    @pytest.fixture
    def tracked_env(self, monkeypatch):
        """登记会被 dotenv 写入的变量，测试结束后由 monkeypatch 还原。"""
        for name in ("RECIPEHUB_PORT", "RECIPEHUB_RABBITMQ_HOST", "RECIPEHUB_LOG_LEVEL"):
            monkeypatch.setenv(name, "placeholder")
            monkeypatch.delenv(name)

    def test_mode_file_takes_precedence_over_base_file(
        self, tmp_path, monkeypatch, tracked_env
    ):
        monkeypatch.setenv("RECIPEHUB_APP_ENV", "test")
        (tmp_path / ".env.test").write_text("RECIPEHUB_PORT=4000\n", encoding="utf-8")
        (tmp_path / ".env").write_text(
            "RECIPEHUB_PORT=5000\nRECIPEHUB_RABBITMQ_HOST=from-base\n",
            encoding="utf-8",
        )

        loaded = load_dotenv_files(tmp_path)

        assert loaded == [tmp_path / ".env.test", tmp_path / ".env"]
        assert os.environ["RECIPEHUB_PORT"] == "4000"
        assert os.environ["RECIPEHUB_RABBITMQ_HOST"] == "from-base"

    def test_real_environment_wins(self, tmp_path, monkeypatch, tracked_env):
        monkeypatch.setenv("RECIPEHUB_LOG_LEVEL", "error")
        (tmp_path / ".env").write_text("RECIPEHUB_LOG_LEVEL=debug\n", encoding="utf-8")

        load_dotenv_files(tmp_path)

        assert os.environ["RECIPEHUB_LOG_LEVEL"] == "error"

    def test_missing_files_are_ignored(self, tmp_path):
        assert load_dotenv_files(tmp_path) == []
