"""
Environment-driven configuration for backend services.

Loads ``.env`` files, validates required keys and renders database
connection strings for postgres, mysql, sqlserver, oracle, mongodb, redis
and cassandra.
"""

from api_config.app_config import AppConfig
from api_config.config_manager import ApiConfig, get_config, reload_config
from api_config.db_config import DatabaseConfig, with_dsn_parameters, with_type
from api_config.dsn import DSN, Backend, new_dsn, parse_database_url
from api_config.env_manager import EnvManager
from api_config.errors import (
    BadRequestError,
    ConfigurationError,
    InternalServerError,
    RootPathNotFoundError,
)
from api_config.utils.root_path import RootPathResolver

__all__ = [
    "ApiConfig",
    "AppConfig",
    "Backend",
    "BadRequestError",
    "ConfigurationError",
    "DSN",
    "DatabaseConfig",
    "EnvManager",
    "InternalServerError",
    "RootPathNotFoundError",
    "RootPathResolver",
    "get_config",
    "new_dsn",
    "parse_database_url",
    "reload_config",
    "with_dsn_parameters",
    "with_type",
]
