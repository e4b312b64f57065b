"""YAML config loader with environment overrides and credential checks."""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from weatherblend.config.defaults import DEFAULT_SOURCES
from weatherblend.config.schema import BlendConfig

ENV_BASE_URL = "HOME_ASSISTANT_URL"
ENV_TOKEN = "HOME_ASSISTANT_TOKEN"
ENV_CONFIG_PATH = "WEATHERBLEND_CONFIG"


class ConfigurationError(Exception):
    """Raised when required deployment configuration is missing."""


def load_config(path: str | Path | None = None) -> BlendConfig:
    """Load and validate config from a YAML file.

    If no sources are specified in the YAML, injects DEFAULT_SOURCES.
    A path of None yields the defaults.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if "sources" not in raw or not raw["sources"]:
        raw["sources"] = [s.model_dump() for s in DEFAULT_SOURCES]

    return BlendConfig(**raw)


def apply_env_overrides(
    config: BlendConfig, environ: Mapping[str, str] | None = None
) -> BlendConfig:
    """Overlay Home Assistant URL and token from the environment.

    Returns a new BlendConfig; unset or empty variables leave the file values.
    """
    if environ is None:
        environ = os.environ
    update = {}
    if environ.get(ENV_BASE_URL):
        update["base_url"] = environ[ENV_BASE_URL]
    if environ.get(ENV_TOKEN):
        update["token"] = environ[ENV_TOKEN]
    if not update:
        return config
    data = config.model_dump()
    data["home_assistant"].update(update)
    return BlendConfig(**data)


def load_runtime_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> BlendConfig:
    """Load the YAML named by path (or WEATHERBLEND_CONFIG) and apply env overrides."""
    if environ is None:
        environ = os.environ
    if path is None:
        path = environ.get(ENV_CONFIG_PATH) or None
    return apply_env_overrides(load_config(path), environ)


def require_credentials(config: BlendConfig) -> None:
    """Raise ConfigurationError unless both base URL and token are set."""
    missing = []
    if not config.home_assistant.base_url:
        missing.append(ENV_BASE_URL)
    if not config.home_assistant.token:
        missing.append(ENV_TOKEN)
    if missing:
        raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")


def masked_config_json(config: BlendConfig) -> str:
    """Render config as JSON with the token hidden."""
    token = config.home_assistant.token
    shown = config.model_copy(
        update={
            "home_assistant": config.home_assistant.model_copy(
                update={"token": "****" if token else ""}
            )
        }
    )
    return shown.model_dump_json(indent=2)
