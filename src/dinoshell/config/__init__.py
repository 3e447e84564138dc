"""Configuration management for dinoshell.

Loads and validates YAML-based configuration with Pydantic models.
Environment variables (``DINOSHELL_`` prefix) override file values.
"""

from dinoshell.config.settings import LoggingConfig, ServerConfig, Settings, load_settings

__all__ = ["LoggingConfig", "ServerConfig", "Settings", "load_settings"]
