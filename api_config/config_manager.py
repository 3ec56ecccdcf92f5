"""
Centralized Configuration Management

ApiConfig bundles the application and database configuration of a service
into one object that is validated as a unit at startup.
"""

import os
from typing import Any, Dict, Mapping, Optional

from api_config.app_config import AppConfig
from api_config.db_config import DatabaseConfig
from api_config.dsn import Backend, BackendLike
from api_config.env_manager import DEFAULT_ENVIRONMENT, EnvManager
from api_config.logger import config_log
from api_config.utils.environment_utils import mask_connection_string

ENV_FILE_SELECTOR_KEY = "APP_ENV_FILE"


class ApiConfig:
    """Application plus database configuration, validated on construction"""

    def __init__(
        self,
        env: EnvManager,
        db_type: BackendLike = Backend.POSTGRES,
        params: Optional[Mapping[str, str]] = None,
    ):
        self.env = env
        self.app = AppConfig(env)
        self.db = DatabaseConfig(env, db_type=db_type, params=params)
        self.validate()

    def validate(self) -> None:
        """Validate app settings, then database settings; stop at the first failure."""
        self.app.validate()
        self.db.validate()
        config_log("All configurations validated successfully")

    def get(self, key: str, default: Optional[str] = None) -> str:
        return self.env.get(key, default)

    def summary(self) -> Dict[str, Any]:
        """Loggable overview with the database password masked."""
        dsn = self.db.dsn
        return {
            "app_name": self.app.name,
            "app_env": self.app.environment,
            "app_url": self.app.url,
            "app_debug": self.app.debug,
            "db_type": str(self.db.db_type),
            "connection_string": mask_connection_string(
                dsn.generate_connection_string(), dsn.password
            ),
        }


# Global configuration instance
_api_config = None


def _default_env_manager() -> EnvManager:
    environment = os.environ.get(ENV_FILE_SELECTOR_KEY, DEFAULT_ENVIRONMENT)
    return EnvManager(environment=environment)


def get_config() -> ApiConfig:
    """Get global configuration instance"""
    global _api_config
    if _api_config is None:
        _api_config = ApiConfig(_default_env_manager())
    return _api_config


def reload_config() -> ApiConfig:
    """Reload configuration"""
    global _api_config
    _api_config = ApiConfig(_default_env_manager())
    return _api_config
