# ABOUTME: Tests for environment-driven application configuration
# ABOUTME: Validates defaults, QA_CORPUS_ overrides and the cached global instance

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from qa_corpus.config import Config, get_config, reload_config


class TestConfig:
    """Test configuration defaults and overrides."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config(_env_file=None)

        assert config.source_files == ["React_QA.md", "Complete_React_QA_Final.md", "React_QA_Final.md"]
        assert config.output_basename == "reactQuestions"
        assert config.typescript_module is True
        assert config.database_url is None
        assert config.default_topic == "React"

    def test_environment_overrides(self):
        env = {
            "QA_CORPUS_OUTPUT_DIR": "/tmp/corpus",
            "QA_CORPUS_SOURCE_FILES": '["one.md", "two.md"]',
            "QA_CORPUS_TYPESCRIPT_MODULE": "false",
            "QA_CORPUS_LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config(_env_file=None)

        assert config.output_dir == Path("/tmp/corpus")
        assert config.source_files == ["one.md", "two.md"]
        assert config.typescript_module is False
        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with patch.dict(os.environ, {"QA_CORPUS_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError):
                Config(_env_file=None)


class TestGlobalConfig:
    """Test the lazily created global instance."""

    def teardown_method(self):
        reload_config()

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_picks_up_environment(self):
        with patch.dict(os.environ, {"QA_CORPUS_DEFAULT_TOPIC": "Vue"}):
            config = reload_config()

        assert config.default_topic == "Vue"
        assert get_config() is config
