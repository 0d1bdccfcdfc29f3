"""Configuration management for neuralcore.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides.
"""

from neuralcore.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
