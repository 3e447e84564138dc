"""Configuration management for dinoshell.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files. The defaults reproduce the fixed loopback
host: 127.0.0.1:8888 serving the ``dino3d`` asset root.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/dinoshell.yaml")


class ServerConfig(BaseModel):
    host: str = Field(default="127.0.0.1", description="Loopback bind address")
    port: int = Field(default=8888, ge=0, le=65535, description="0 picks a free port")
    asset_root: str = Field(default="dino3d", min_length=1)
    index_page: str = Field(default="index.html", min_length=1)
    asset_dir: Path | None = Field(
        default=None, description="Asset store directory (default: bundled assets)"
    )
    redirect_status: int = Field(default=302, ge=300, le=399)
    chunk_size: int = Field(default=64 * 1024, gt=0)
    startup_timeout: float = Field(default=5.0, gt=0)

    @property
    def entry_path(self) -> str:
        """Path the root redirect points at, e.g. ``/dino3d/index.html``."""
        return f"/{self.asset_root}/{self.index_page}"

    @property
    def main_page_url(self) -> str:
        return f"http://{self.host}:{self.port}{self.entry_path}"


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for dinoshell.

    Loads from YAML file and supports environment variable overrides,
    e.g. ``DINOSHELL_SERVER__PORT=9000``.
    """

    model_config = {
        "env_prefix": "DINOSHELL_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment wins over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


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

    return Settings(**yaml_data)
