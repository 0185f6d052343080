"""Configuration management for commandpage.

The route table (commands, static mounts, listen address, page title)
is read from a YAML file and validated into frozen Pydantic models.
Process settings such as logging come from ``COMMANDPAGE_`` environment
variables and an optional .env file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be loaded."""


# ---------------------------------------------------------------------------
# Route table models
# ---------------------------------------------------------------------------


def _check_http_path(value: str) -> str:
    if not value.startswith("/"):
        raise ValueError(f"http_path must start with '/': {value!r}")
    return value


HttpPath = Annotated[str, AfterValidator(_check_http_path)]


class CommandInfo(BaseModel):
    """A command exposed as an HTTP route."""

    model_config = ConfigDict(frozen=True)

    http_path: HttpPath = Field(description="Route the command is served under")
    description: str = Field(description="Link label and page title")
    command: str = Field(description="Executable name or path")
    args: tuple[str, ...] = Field(description="Argument vector")


class StaticPathInfo(BaseModel):
    """A local directory served under an HTTP prefix."""

    model_config = ConfigDict(frozen=True)

    http_path: HttpPath = Field(description="Mount prefix")
    fs_path: str = Field(description="Directory to serve")
    include_in_main_page: bool = Field(description="List the mount on the index page")


class Configuration(BaseModel):
    """Root of the route table document."""

    model_config = ConfigDict(frozen=True)

    listen_address: str = Field(description="host:port to bind")
    main_page_title: str
    commands: tuple[CommandInfo, ...]
    static_paths: tuple[StaticPathInfo, ...]

    @field_validator("listen_address")
    @classmethod
    def check_listen_address(cls, value: str) -> str:
        host, sep, port = value.rpartition(":")
        if not sep or not host or not port.isdigit() or int(port) > 65535:
            raise ValueError(f"listen_address must be host:port, got {value!r}")
        return value

    @property
    def host(self) -> str:
        host = self.listen_address.rpartition(":")[0]
        # [::1]:8080
        return host[1:-1] if host.startswith("[") and host.endswith("]") else host

    @property
    def port(self) -> int:
        return int(self.listen_address.rpartition(":")[2])

    @property
    def index_static_paths(self) -> tuple[StaticPathInfo, ...]:
        return tuple(s for s in self.static_paths if s.include_in_main_page)


def load_configuration(config_path: Path | str) -> Configuration:
    """Read and validate the route table from a YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
            YAML, or does not describe a valid Configuration.
    """
    path = Path(config_path)
    logger.info("Reading %s", path)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    try:
        configuration = Configuration(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    logger.debug("Configuration: %r", configuration)
    return configuration


# ---------------------------------------------------------------------------
# Process settings
# ---------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Process-level settings for commandpage.

    Every field can be overridden from the environment, e.g.
    ``COMMANDPAGE_CONFIG_FILE`` or ``COMMANDPAGE_LOGGING__LEVEL``.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "COMMANDPAGE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    config_file: Path | None = Field(default=None)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
