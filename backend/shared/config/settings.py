"""Typed settings for the marketplace API.

Values are resolved from, highest priority first:

1. the YAML file ``${CONFIG_DIR}/${ENVIRONMENT}.yaml`` (or an explicit path)
2. ``APP_``-prefixed environment variables, nested with ``__``
   (``APP_CATALOG__CATEGORIES_INCLUDE_UNAVAILABLE=false``)
3. a ``.env`` file in the working directory
4. the defaults below
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("config")

DEFAULT_CONFIG_DIR = "./config"
DEFAULT_ENVIRONMENT = "development"


class DatabaseConfig(BaseModel):
    """Connection and pool options. Pool options are ignored for SQLite."""
    url: str = Field(default="sqlite:///./marketplace.db")
    echo_sql: bool = Field(default=False)
    pool_size: int = Field(default=5)
    max_overflow: int = Field(default=10)
    pool_timeout: int = Field(default=30)
    pool_recycle: int = Field(default=3600)


class APIConfig(BaseModel):
    """HTTP server and routing options."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api")
    allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('allow_origins', mode='before')
    @classmethod
    def split_origins(cls, v):
        """Accept ``"https://a, https://b"`` as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v


class AuthConfig(BaseModel):
    """Bearer token verification."""
    jwt_secret_key: str = Field(default="development-secret-key-change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60)


class CatalogConfig(BaseModel):
    """Catalog listing behavior."""
    # Category listing historically ignored availability; keep that as the default.
    categories_include_unavailable: bool = Field(default=True)


class ObservabilityConfig(BaseModel):
    """Logging and metrics."""
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)
    log_file: Optional[str] = Field(default=None)
    metrics_enabled: bool = Field(default=True)


class Settings(BaseSettings):
    """Root settings object, one section per concern."""
    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT)
    version: str = Field(default="1.0.0")
    service_name: str = Field(default="marketplace-api")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


def default_config_path() -> Path:
    """Location of the YAML file for the current ``ENVIRONMENT``."""
    config_dir = os.environ.get("CONFIG_DIR", DEFAULT_CONFIG_DIR)
    environment = os.environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT)
    return Path(config_dir) / f"{environment}.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug(f"No configuration file at {path}, using environment and defaults")
        return {}
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Could not read configuration file {path}: {str(e)}")
        return {}
    logger.info(f"Loaded configuration from {path}")
    return data


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Build settings from a YAML file, the environment and defaults.

    Values found in the YAML file are passed as explicit arguments and therefore
    take precedence over ``APP_`` environment variables.

    Args:
        config_path: YAML file to read instead of the environment's default one

    Raises:
        pydantic.ValidationError: If a value has the wrong type
    """
    path = Path(config_path) if config_path else default_config_path()
    return Settings(**_read_yaml(path))


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None


def is_production() -> bool:
    """Whether the service runs with ``environment: production``."""
    return os.environ.get("ENVIRONMENT", get_settings().environment) == "production"
