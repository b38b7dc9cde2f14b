# -*- coding: utf-8 -*-
"""
Tests for environment configuration and logger setup.
"""

import logging

import pytest

from sqlscribe import config
from sqlscribe.logger_config import LOGGER_NAME, get_logger, setup_logger


class TestSamplingRates:

    def test_defaults(self, monkeypatch):
        for env_var in config._SAMPLING_ENV.values():
            monkeypatch.delenv(env_var, raising=False)

        assert config.get_sampling_rates() == {
            "correctness": 1.0,
            "intentMatch": 1.0,
            "readability": 1.0,
        }

    @pytest.mark.parametrize(
        "raw, expected",
        [("0.25", 0.25), ("0", 0.0), ("1.5", 1.0), ("-2", 0.0), ("often", 1.0), ("", 1.0)],
    )
    def test_parsing(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SQLSCRIBE_SAMPLING_READABILITY", raw)

        assert config.get_sampling_rates()["readability"] == expected


class TestModels:

    def test_judge_default(self, monkeypatch):
        monkeypatch.delenv("SQLSCRIBE_CORRECTNESS_JUDGE_MODEL", raising=False)

        assert config.get_judge_model("correctness") == config.DEFAULT_JUDGE_MODELS["correctness"]

    def test_judge_override(self, monkeypatch):
        monkeypatch.setenv("SQLSCRIBE_INTENT_JUDGE_MODEL", "openai:gpt-4o-mini")

        assert config.get_judge_model("intentMatch") == "openai:gpt-4o-mini"

    def test_unknown_judge(self):
        with pytest.raises(KeyError):
            config.get_judge_model("speed")

    def test_agent_model_override(self, monkeypatch):
        monkeypatch.setenv("SQLSCRIBE_MODEL", "test")

        assert config.get_model() == "test"


class TestLogger:

    def test_file_handler(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SQLSCRIBE_LOG_DIR", str(tmp_path))
        logger = setup_logger(run_timestamp="2026-01-01_00-00-00")

        get_logger("tests").info("hello from the tests")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "sqlscribe_2026-01-01_00-00-00.log"
        assert log_file.exists()
        assert "hello from the tests" in log_file.read_text(encoding="utf-8")

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_console_only(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SQLSCRIBE_LOG_DIR", str(tmp_path / "logs"))
        logger = setup_logger(log_to_file=False)

        assert len(logger.handlers) == 1
        assert not (tmp_path / "logs").exists()

    def test_child_logger(self):
        assert get_logger("scorers").name == f"{LOGGER_NAME}.scorers"
        assert get_logger() is logging.getLogger(LOGGER_NAME)


class TestDialect:

    def test_single_default_dialect(self):
        from sql_tools import DEFAULT_DIALECT

        assert config.DEFAULT_DIALECT is DEFAULT_DIALECT
