"""Configuration file model and loading."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ghreviews.github_client import GitHubAuthError, get_github_token_with_source

DEFAULT_CONFIG_FILE_NAME = ".ghreviews/config.yml"

logger = logging.getLogger("ghreviews.config")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or is invalid."""


class RepoRef(BaseModel):
    """Repository to poll, identified by owner and name."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str = Field(min_length=1)
    owner: str = Field(min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


class AppConfig(BaseModel):
    """Resolved notifier configuration."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    token: str = ""
    username: str = Field(min_length=1)
    repos: list[RepoRef] = Field(default_factory=list)

    def resolve_token(self) -> tuple[str, str]:
        """Return the access token and where it came from."""
        try:
            return get_github_token_with_source(self.token or None)
        except GitHubAuthError as error:
            raise ConfigError(str(error)) from error


def default_config_path() -> Path:
    """Return the config path under the current user's home directory."""
    return Path.home() / DEFAULT_CONFIG_FILE_NAME


def load_config(path: Path) -> AppConfig:
    """Read and validate the YAML configuration at `path`."""
    logger.debug("Loading configuration from %s", path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigError(f"could not read config file {path}: {error}") from error

    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as error:
        raise ConfigError(f"could not parse config file {path}: {error}") from error

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigError(f"config file {path} must contain a mapping at the top level.")

    try:
        config = AppConfig.model_validate(payload)
    except ValidationError as error:
        details = "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
            for item in error.errors()
        )
        raise ConfigError(f"invalid config file {path}: {details}") from error

    logger.debug("Loaded %d repositories for user %s", len(config.repos), config.username)
    return config
