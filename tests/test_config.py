"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    Config,
    GeneratorConfig,
    ServerConfig,
    LoggingConfig,
    AuthConfig,
    load_config,
)
from core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def no_tag_env(monkeypatch):
    monkeypatch.delenv("QUICKID_SYSTEM_TAG", raising=False)
    monkeypatch.delenv("API_USERNAME", raising=False)
    monkeypatch.delenv("API_PASSWORD", raising=False)


class TestGeneratorConfig:
    """Tests for GeneratorConfig class."""

    def test_default_values(self):
        """GeneratorConfig defaults to an empty tag."""
        assert GeneratorConfig().system_tag == ""

    def test_custom_values(self):
        """GeneratorConfig accepts a tag."""
        assert GeneratorConfig(system_tag="-h1-").system_tag == "-h1-"

    def test_non_string_tag_rejected(self):
        """A non-string tag raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(system_tag=7)
        assert exc_info.value.context["key"] == "generator.system_tag"


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.crash_file == "logs/crash.log"

    def test_custom_values(self):
        """LoggingConfig accepts custom values."""
        config = LoggingConfig(level="DEBUG", crash_file="/var/log/crash.log")
        assert config.level == "DEBUG"
        assert config.crash_file == "/var/log/crash.log"


class TestAuthConfig:
    """Tests for AuthConfig class."""

    def test_unset_by_default(self):
        """No built-in credentials."""
        config = AuthConfig()
        assert config.username is None
        assert config.password is None
        assert config.configured is False

    def test_needs_both_fields(self):
        """A username alone is not enough."""
        assert AuthConfig("operator").configured is False
        assert AuthConfig("operator", "s3cret").configured is True


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.generator, GeneratorConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "generator": {"system_tag": "-x-"},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.generator.system_tag == "-x-"
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"server": {"port": 9001}})
        assert config.server.port == 9001
        assert config.generator.system_tag == ""

    def test_from_dict_unknown_key(self):
        """Unknown keys are rejected."""
        with pytest.raises(TypeError):
            Config.from_dict({"generator": {"tag": "-x-"}})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        assert isinstance(load_config(), Config)

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        assert config.generator.system_tag == "-a1-"
        assert config.server.port == 8080

    def test_load_config_custom_path(self, tmp_path):
        """load_config reads an explicit path."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"generator": {"system_tag": "-p-"}}))
        assert load_config(path).generator.system_tag == "-p-"

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.generator.system_tag == ""

    def test_environment_overrides_tag(self, monkeypatch):
        """QUICKID_SYSTEM_TAG wins over the file."""
        monkeypatch.setenv("QUICKID_SYSTEM_TAG", "-env-")
        assert load_config().generator.system_tag == "-env-"

    def test_credentials_unset_without_environment(self):
        """The shipped config carries no credentials."""
        assert load_config().auth.configured is False

    def test_credentials_from_environment(self, monkeypatch):
        """API_USERNAME and API_PASSWORD supply the credentials."""
        monkeypatch.setenv("API_USERNAME", "operator")
        monkeypatch.setenv("API_PASSWORD", "s3cret")
        auth = load_config().auth
        assert (auth.username, auth.password) == ("operator", "s3cret")

    def test_empty_environment_tag(self, monkeypatch):
        """An empty variable still overrides."""
        monkeypatch.setenv("QUICKID_SYSTEM_TAG", "")
        assert load_config().generator.system_tag == ""
