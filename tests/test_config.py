"""Tests for environment-driven session configuration."""

import pytest

from spot_webdriver.config import Config, get_config
from spot_webdriver.errors import SpotError


class TestFromEnv:
    def test_defaults(self):
        config = Config.from_env({})

        assert config.backend_pairing_code == ""
        assert config.max_page_load_wait == 60000
        assert config.tv_url == "http://localhost:8000"
        assert config.remote_url == "http://localhost:8000"
        assert config.headless is True
        assert config.log_json is False

    def test_overrides(self):
        config = Config.from_env(
            {
                "SPOT_BACKEND_PAIRING_CODE": "PERM01",
                "SPOT_MAX_PAGE_LOAD_WAIT": "5000",
                "SPOT_TV_URL": "https://spot.example.com",
                "SPOT_REMOTE_URL": "https://remote.example.com",
                "SPOT_HEADLESS": "false",
                "LOG_LEVEL": "DEBUG",
                "LOG_JSON": "1",
            }
        )

        assert config.backend_pairing_code == "PERM01"
        assert config.max_page_load_wait == 5000
        assert config.tv_url == "https://spot.example.com"
        assert config.remote_url == "https://remote.example.com"
        assert config.headless is False
        assert config.log_level == "DEBUG"
        assert config.log_json is True

    def test_config_is_read_only(self):
        config = Config()

        with pytest.raises(AttributeError):
            config.backend_pairing_code = "changed"


class TestValidate:
    def test_valid_config_returns_itself(self):
        config = Config()

        assert config.validate() is config

    def test_rejects_non_positive_wait(self):
        with pytest.raises(SpotError) as exc_info:
            Config(max_page_load_wait=0).validate()

        assert exc_info.value.code == "invalid_config"

    def test_rejects_url_without_scheme(self):
        with pytest.raises(SpotError, match="SPOT_REMOTE_URL"):
            Config(remote_url="localhost:8000").validate()

    def test_get_config_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SPOT_BACKEND_PAIRING_CODE", "FROMENV")

        assert get_config().backend_pairing_code == "FROMENV"

    def test_rejects_non_integer_wait(self):
        with pytest.raises(SpotError) as exc_info:
            Config.from_env({"SPOT_MAX_PAGE_LOAD_WAIT": "60s"})

        assert exc_info.value.code == "invalid_config"
        assert exc_info.value.message == "SPOT_MAX_PAGE_LOAD_WAIT must be an integer, got '60s'"
        assert "SPOT_MAX_PAGE_LOAD_WAIT" in str(exc_info.value)

    def test_overrides_replace_bad_environment_values(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SPOT_TV_URL", "localhost:8000")

        config = get_config(tv_url="http://tv.test")

        assert config.tv_url == "http://tv.test"
