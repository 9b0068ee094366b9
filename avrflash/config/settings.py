"""
Tool configuration for avrflash.

Settings come from several sources, highest precedence first:
1. Environment variables (AVRFLASH_*)
2. The YAML file given on the command line
3. avrflash.yaml in the current directory
4. config.yaml in the XDG config directory
5. Default values
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from avrflash.core.errors import ConfigError
from avrflash.core.structlog_logger import get_struct_logger
from avrflash.utils.xdg import get_xdg_config_dir


logger = get_struct_logger(__name__)

ENV_PREFIX = "AVRFLASH_"
CONFIG_FILE_NAME = "avrflash.yaml"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AvrflashSettings(BaseSettings):
    """Settings model with automatic environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="forbid",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (env_settings, init_settings)

    cargo: str = "cargo"
    programmer: str = "avrdude"
    metadata_key: str = "avrflash"
    # Tool name prefixing the programmer's diagnostics; defaults to the
    # programmer's executable name
    diagnostic_tool: str | None = None
    log_level: str = "WARNING"

    @field_validator("cargo", "programmer", "metadata_key")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return upper

    @property
    def effective_diagnostic_tool(self) -> str:
        """Tool name expected at the start of programmer diagnostics."""
        if self.diagnostic_tool:
            return self.diagnostic_tool
        return Path(self.programmer).stem

    @property
    def template_key_path(self) -> str:
        """Manifest key holding the programmer argument template."""
        return f"package.metadata.{self.metadata_key}.args"


def get_config_search_paths(cli_config_path: str | Path | None = None) -> list[Path]:
    """Config file locations in order of precedence."""
    paths: list[Path] = []
    if cli_config_path:
        paths.append(Path(cli_config_path).expanduser().resolve())
    paths.append(Path.cwd() / CONFIG_FILE_NAME)
    paths.append(get_xdg_config_dir() / "config.yaml")
    return paths


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return data


def load_settings(cli_config_path: str | Path | None = None) -> AvrflashSettings:
    """Load settings from the first config file found and the environment.

    Raises:
        ConfigError: If the explicitly given file is missing, or any file or
            environment value is invalid
    """
    if cli_config_path and not Path(cli_config_path).expanduser().is_file():
        raise ConfigError(f"config file not found: {cli_config_path}")

    config_data: dict[str, Any] = {}
    for path in get_config_search_paths(cli_config_path):
        if path.is_file():
            config_data = _read_config_file(path)
            logger.debug("config_file_loaded", path=str(path))
            break
    else:
        logger.debug("no_config_file_found")

    env_vars = sorted(k for k in os.environ if k.upper().startswith(ENV_PREFIX))
    if env_vars:
        logger.debug("config_env_vars_found", names=env_vars)

    try:
        return AvrflashSettings(**config_data)
    except ValidationError as e:
        raise ConfigError(f"invalid avrflash configuration: {e}") from e
