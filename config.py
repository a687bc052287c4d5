import json
import os
from pathlib import Path

from core.errors import ConfigurationError

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

SYSTEM_TAG_ENV = "QUICKID_SYSTEM_TAG"
API_USERNAME_ENV = "API_USERNAME"
API_PASSWORD_ENV = "API_PASSWORD"


class GeneratorConfig:
    __slots__ = ("system_tag",)

    def __init__(self, system_tag=""):
        if not isinstance(system_tag, str):
            raise ConfigurationError(f"system_tag must be a string, got {type(system_tag).__name__}",
                                     key="generator.system_tag")
        self.system_tag = system_tag


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class AuthConfig:
    """Basic-auth credentials. Unset means every authenticated request is refused."""
    __slots__ = ("username", "password")

    def __init__(self, username=None, password=None):
        self.username = username
        self.password = password

    @property
    def configured(self):
        return bool(self.username and self.password)


class Config:
    __slots__ = ("generator", "server", "logging", "auth")

    def __init__(self, generator=None, server=None, logging=None, auth=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()
        self.auth = auth or AuthConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
            AuthConfig(**d.get("auth", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if config_path.exists():
        with open(config_path) as file:
            config = Config.from_dict(json.load(file))
    else:
        config = Config()

    # Environment wins over the file
    system_tag = os.environ.get(SYSTEM_TAG_ENV)
    if system_tag is not None:
        config.generator = GeneratorConfig(system_tag)

    config.auth = AuthConfig(
        os.environ.get(API_USERNAME_ENV, config.auth.username),
        os.environ.get(API_PASSWORD_ENV, config.auth.password),
    )
    return config
