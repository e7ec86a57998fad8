"""Configuration management for kbremap.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides.
"""

from kbremap.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
