"""
Tests for Config: dotenv loading, defaults and keyword overrides.
"""

import os

from config import Config, DEFAULT_API_URL


class TestConfig:
    def test_reads_values_from_env_file(self, tmp_path, monkeypatch):
        """Values in the dotenv file are exposed through properties."""
        for name in ("API_TOKEN", "API_URL", "API_VERSION", "APPLICATION_ID", "LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("API_TOKEN=from-file\nAPPLICATION_ID=42\nAPI_VERSION=9\n")

        config = Config(env_file=str(env_file))

        assert config.api_token == "from-file"
        assert config.application_id == "42"
        assert config.api_version == "9"
        assert config.base_url == f"{DEFAULT_API_URL}/v9"
        for name in ("API_TOKEN", "APPLICATION_ID", "API_VERSION"):
            os.environ.pop(name, None)

    def test_defaults_when_nothing_is_set(self, tmp_path, monkeypatch):
        for name in ("API_TOKEN", "API_URL", "API_VERSION", "APPLICATION_ID", "LOG_FILE"):
            monkeypatch.delenv(name, raising=False)

        config = Config(env_file=str(tmp_path / "missing.env"))

        assert config.api_token is None
        assert config.api_url == DEFAULT_API_URL
        assert config.api_version == "10"
        assert config.log_file is None

    def test_keyword_overrides_win_over_environment(self, tmp_path, monkeypatch):
        """An explicitly passed credential beats the ambient one."""
        monkeypatch.setenv("API_TOKEN", "ambient")

        config = Config(env_file=str(tmp_path / "missing.env"), api_token="explicit", api_url="https://x.test/api/")

        assert config.api_token == "explicit"
        assert config.base_url == "https://x.test/api/v10"
