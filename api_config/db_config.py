"""
Database connection configuration (environment-driven)
======================================================

Builds the connection string of one database backend from the environment.

ENVIRONMENT VARIABLES:
---------------------
- DATABASE_URL: full database URL; when set it takes precedence over the
  discrete keys below
- DB_HOST: Database server hostname or IP address
- DB_PORT: Database server port (default: the backend's default port)
- DB_DATABASE: Database name (not required for redis)
- DB_USERNAME: Database username
- DB_PASSWORD: Database password

CONSTRUCTION:
------------
    DatabaseConfig(env, db_type="mysql", params={"charset": "utf8mb4"})
    DatabaseConfig.from_options(env, with_type("mysql"), with_dsn_parameters({...}))

Each option may be given once; repeating one is a configuration error.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from api_config import env_manager as keys
from api_config.dsn import (
    DSN,
    Backend,
    BackendLike,
    default_port,
    new_dsn,
    parse_database_url,
    to_backend,
)
from api_config.env_manager import EnvManager
from api_config.errors import ConfigurationError, InternalServerError
from api_config.logger import config_log

TYPE_OPTION = "type"
PARAMS_OPTION = "params"

_DUPLICATE_OPTION_MESSAGES = {
    TYPE_OPTION: "multiple database types provided",
    PARAMS_OPTION: "multiple DSN parameter sets provided",
}


@dataclass(frozen=True)
class DatabaseOption:
    """A single construction option for ``DatabaseConfig.from_options``."""

    name: str
    value: Any


def with_type(db_type: BackendLike) -> DatabaseOption:
    """Select the database backend (postgres, mysql, ...)."""
    return DatabaseOption(TYPE_OPTION, db_type)


def with_dsn_parameters(params: Mapping[str, str]) -> DatabaseOption:
    """Extra parameters appended to the connection string."""
    return DatabaseOption(PARAMS_OPTION, params)


def required_keys(db_type: BackendLike) -> List[str]:
    """Environment keys that must be non-empty for ``db_type``."""
    if to_backend(db_type) == Backend.REDIS:
        # Redis has no database name
        return [keys.DB_HOST_KEY, keys.DB_USERNAME_KEY, keys.DB_PASSWORD_KEY]
    return [
        keys.DB_HOST_KEY,
        keys.DB_USERNAME_KEY,
        keys.DB_PASSWORD_KEY,
        keys.DB_DATABASE_KEY,
    ]


class DatabaseConfig:
    """Database configuration bound to one backend."""

    def __init__(
        self,
        env: EnvManager,
        db_type: BackendLike = Backend.POSTGRES,
        params: Optional[Mapping[str, str]] = None,
    ):
        self.env = env
        self.db_type = to_backend(db_type)
        self.params: Dict[str, str] = dict(params or {})
        self._dsn: Optional[DSN] = None

        try:
            self.env.load_environment_variables()
        except ConfigurationError as e:
            raise InternalServerError("failed to load environment variables") from e

    @classmethod
    def from_options(cls, env: EnvManager, *options: DatabaseOption) -> "DatabaseConfig":
        """Build a config from ``with_type`` / ``with_dsn_parameters`` options."""
        collected: Dict[str, Any] = {}
        for option in options:
            if option.name in collected:
                raise InternalServerError(_DUPLICATE_OPTION_MESSAGES[option.name])
            collected[option.name] = option.value

        return cls(
            env,
            db_type=collected.get(TYPE_OPTION, Backend.POSTGRES),
            params=collected.get(PARAMS_OPTION),
        )

    def get(self, key: str, default: Optional[str] = None) -> str:
        return self.env.get(key, default)

    @property
    def dsn(self) -> DSN:
        """The DSN, built from the environment on first access."""
        if self._dsn is None:
            self._dsn = self._load_from_env()
        return self._dsn

    def connection_string(self) -> str:
        """Render the connection string of the configured backend."""
        return self.dsn.generate_connection_string()

    def _load_from_env(self) -> DSN:
        database_url = self.env.get(keys.DB_URL_KEY).strip()
        if database_url:
            config_log(f"Building {self.db_type} DSN from {keys.DB_URL_KEY}")
            return parse_database_url(database_url, self.db_type, self.params)

        config_log(f"Building {self.db_type} DSN from discrete DB_* variables")
        return new_dsn(
            self.env.get(keys.DB_HOST_KEY),
            self.env.get(keys.DB_PORT_KEY, default_port(self.db_type)),
            self.env.get(keys.DB_USERNAME_KEY),
            self.env.get(keys.DB_PASSWORD_KEY),
            self.env.get(keys.DB_DATABASE_KEY),
            self.params,
            self.db_type,
        )

    def validate(self) -> None:
        """Raise if any required key for the backend is missing or blank."""
        missing_keys = [
            key for key in required_keys(self.db_type) if not self.env.get(key).strip()
        ]
        if missing_keys:
            config_log(f"ERROR: Missing required database fields: {missing_keys}", "ERROR")
            raise InternalServerError(
                f"missing required key(s): {', '.join(missing_keys)}"
            )
