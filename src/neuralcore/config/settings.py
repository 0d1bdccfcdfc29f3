"""Configuration management for neuralcore.

Loads settings from a YAML configuration file with environment variable
overrides (``NEURALCORE_`` prefix, ``__`` for nested sections). Supports
.env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/neuralcore.yaml")


class VisionConfig(BaseModel):
    iterations: int = Field(default=5, gt=0, description="Frames captured per run")
    interval: float = Field(default=1.0, ge=0, description="Seconds between frames")
    seed: int | None = Field(default=None, description="Seed for the random sampler")


class EndpointConfig(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8090, ge=1, le=65535)


class ClientConfig(BaseModel):
    base_url: str = Field(default="http://localhost:8090")
    timeout: float = Field(default=10.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for neuralcore.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "NEURALCORE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    vision: VisionConfig = Field(default_factory=VisionConfig)
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _drop_env_shadowed(yaml_data)

    return Settings(**yaml_data)


def _drop_env_shadowed(yaml_data: dict) -> None:
    """Remove YAML values that a NEURALCORE_ env var or .env entry overrides.

    Init kwargs outrank env vars and .env entries in pydantic-settings, so
    YAML values must be cleared for those to win.
    """
    prefix = Settings.model_config["env_prefix"]
    delimiter = Settings.model_config["env_nested_delimiter"]
    keys = set(os.environ)
    env_file = Path(Settings.model_config["env_file"])
    if env_file.exists():
        keys.update(dotenv_values(env_file))
    for key in keys:
        if not key.upper().startswith(prefix):
            continue
        parts = key[len(prefix):].lower().split(delimiter)
        section = yaml_data
        for part in parts[:-1]:
            section = section.get(part)
            if not isinstance(section, dict):
                break
        else:
            section.pop(parts[-1], None)
