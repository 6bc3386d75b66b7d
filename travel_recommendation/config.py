"""
Centralized configuration management with validation and type conversion.

All settings come from environment variables (optionally seeded from a
``.env`` file) and are converted to the right type once, at import time:
- Catalog location and fetch timeout
- CORS origin for the HTTP surface
- Logging level, format and optional rotating log file
"""

import os
import logging
from typing import Optional, Dict, Any
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urljoin

from dotenv import load_dotenv

load_dotenv()


class Environment(Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


@dataclass
class CatalogConfig:
    """Where the destination catalog lives and how long to wait for it."""
    base_url: str = "http://localhost:5000/"
    path: str = "travel_recommendation_api.json"
    timeout: float = 10.0

    @property
    def url(self) -> str:
        """Absolute URL of the catalog document."""
        return urljoin(self.base_url, self.path)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5


class Config:
    """Centralized configuration with validation and type conversion."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.environment = self._get_environment()
        self.debug = self._get_bool("DEBUG", False)

        self.catalog_config = CatalogConfig(
            base_url=self._get_str("CATALOG_BASE_URL", "http://localhost:5000/"),
            path=self._get_str("CATALOG_PATH", "travel_recommendation_api.json"),
            timeout=self._get_float("CATALOG_TIMEOUT", 10.0),
        )
        self.preload_catalog = self._get_bool("PRELOAD_CATALOG", True)

        self.cors_origin = self._get_str("CORS_ORIGIN", "*")

        self.logging_config = LoggingConfig(
            level=self._get_str("LOG_LEVEL", "INFO"),
            format=self._get_str("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file=self._get_optional("LOG_FILE"),
            max_bytes=self._get_int("LOG_MAX_BYTES", 10485760),
            backup_count=self._get_int("LOG_BACKUP_COUNT", 5),
        )

        self._validate()

    def _get_environment(self) -> Environment:
        """Get application environment."""
        env_str = self._get_str("ENVIRONMENT", "development").lower()
        try:
            return Environment(env_str)
        except ValueError:
            raise ValueError(f"Invalid environment: {env_str}")

    def _get_optional(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return os.getenv(key, default)

    def _get_str(self, key: str, default: str) -> str:
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable with default.

        Raises:
            ValueError: If value cannot be converted to int
        """
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Invalid integer for {key}: {value}")

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable with default.

        Raises:
            ValueError: If value cannot be converted to float
        """
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Invalid float for {key}: {value}")

    def _get_bool(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('1', 'true', 'yes', 'on')

    def _validate(self):
        """Validate configuration values."""
        if self.catalog_config.timeout <= 0:
            raise ValueError(f"Invalid catalog timeout: {self.catalog_config.timeout}")

        if not self.catalog_config.base_url.startswith(('http://', 'https://')):
            raise ValueError(f"Invalid catalog base URL: {self.catalog_config.base_url}")

        if not self.catalog_config.path:
            raise ValueError("CATALOG_PATH must not be empty")

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for debugging."""
        return {
            'environment': self.environment.value,
            'debug': self.debug,
            'catalog_config': {
                'base_url': self.catalog_config.base_url,
                'path': self.catalog_config.path,
                'url': self.catalog_config.url,
                'timeout': self.catalog_config.timeout,
            },
            'preload_catalog': self.preload_catalog,
            'cors_origin': self.cors_origin,
            'log_level': self.logging_config.level,
        }


# Global configuration instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config


def setup_logging():
    """Set up logging based on configuration."""
    from logging.handlers import RotatingFileHandler

    config = get_config()

    logging.basicConfig(
        level=getattr(logging, config.logging_config.level.upper()),
        format=config.logging_config.format,
    )

    if config.logging_config.file:
        file_handler = RotatingFileHandler(
            config.logging_config.file,
            maxBytes=config.logging_config.max_bytes,
            backupCount=config.logging_config.backup_count,
        )
        file_handler.setFormatter(logging.Formatter(config.logging_config.format))
        logging.getLogger().addHandler(file_handler)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif config.is_production():
        logging.getLogger().setLevel(logging.INFO)
