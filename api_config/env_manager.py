"""
Environment Manager
===================

Reads configuration values from a backing environment mapping (the process
environment by default), overlaid with the project's ``.env`` file.

ENV FILES:
----------
- ``.env``                default environment ("production"); must exist
- ``.env.<environment>``  any other environment; when the named file does
  not exist no file is loaded (``.env`` is never used in its place)

Files are located in the project root, found by walking up from the start
directory to the first directory holding ``pyproject.toml``. Values from a
file never override a key already present in the environment.

LOOKUP ORDER:
-------------
1. memoized value (when caching is enabled)
2. environment
3. caller-supplied default
4. built-in defaults table (when enabled)
5. empty string
"""

import os
import threading
from typing import Callable, Dict, MutableMapping, Optional

from dotenv import dotenv_values

from api_config.errors import InternalServerError
from api_config.logger import config_log
from api_config.utils.root_path import RootPathResolver

APP_NAME_KEY = "APP_NAME"
APP_ENV_KEY = "APP_ENV"
APP_ENCRYPTION_KEY = "APP_KEY"
APP_DEBUG_KEY = "APP_DEBUG"
APP_URL_KEY = "APP_URL"
APP_TIMEZONE_KEY = "APP_TIMEZONE"
APP_LOCALE_KEY = "APP_LOCALE"
APP_FALLBACK_LOCALE_KEY = "APP_FALLBACK_LOCALE"
APP_CIPHER_KEY = "APP_CIPHER"
AUTH_SECRET_KEY = "AUTH_SECRET"
DB_URL_KEY = "DATABASE_URL"
DB_HOST_KEY = "DB_HOST"
DB_PORT_KEY = "DB_PORT"
DB_DATABASE_KEY = "DB_DATABASE"
DB_USERNAME_KEY = "DB_USERNAME"
DB_PASSWORD_KEY = "DB_PASSWORD"
DB_SSL_MODE_KEY = "SSL_MODE"

DEFAULT_ENVIRONMENT = "production"
ENV_FILE_NAME = ".env"


def default_values() -> Dict[str, str]:
    """Built-in defaults for the known configuration keys."""
    return {
        APP_NAME_KEY: "default_app",
        APP_ENV_KEY: "local",
        APP_ENCRYPTION_KEY: "",
        APP_DEBUG_KEY: "false",
        APP_URL_KEY: "http://localhost",
        APP_TIMEZONE_KEY: "UTC",
        APP_LOCALE_KEY: "en",
        APP_FALLBACK_LOCALE_KEY: "en",
        APP_CIPHER_KEY: "AES-256-CBC",
        AUTH_SECRET_KEY: "my_default_secret",
        DB_HOST_KEY: "127.0.0.1",
        DB_PORT_KEY: "5432",
        DB_DATABASE_KEY: "default_db",
        DB_USERNAME_KEY: "default_user",
        DB_PASSWORD_KEY: "default_pass",
        DB_SSL_MODE_KEY: "disable",
    }


class EnvManager:
    """Environment variable lookup with file loading, defaults and caching."""

    def __init__(
        self,
        environment: str = DEFAULT_ENVIRONMENT,
        use_defaults: bool = True,
        use_cache: bool = False,
        extend_defaults: Optional[Callable[[Dict[str, str]], None]] = None,
        environ: Optional[MutableMapping[str, str]] = None,
        start_dir: Optional[str] = None,
        path_resolver: Optional[RootPathResolver] = None,
    ):
        self.environment = environment or DEFAULT_ENVIRONMENT
        self.use_defaults = use_defaults
        self.use_cache = use_cache
        self.environ = os.environ if environ is None else environ
        self.start_dir = start_dir or os.getcwd()
        self.path_resolver = path_resolver or RootPathResolver()

        self.defaults = default_values()
        if extend_defaults is not None:
            extend_defaults(self.defaults)

        self._cache: Dict[str, str] = {}
        self._cache_lock = threading.Lock()

        self.root_dir = self.path_resolver.resolve(self.start_dir)
        self.load_environment_variables()

    def env_file_path(self) -> str:
        """Path of the env file for the configured environment."""
        if self.environment == DEFAULT_ENVIRONMENT:
            return os.path.join(self.root_dir, ENV_FILE_NAME)
        return os.path.join(self.root_dir, f"{ENV_FILE_NAME}.{self.environment}")

    def _existing_env_file(self) -> Optional[str]:
        """The env file to load, or None for a named environment without one."""
        env_path = self.env_file_path()
        if os.path.isfile(env_path):
            return env_path

        if self.environment == DEFAULT_ENVIRONMENT:
            raise InternalServerError(
                f"failed to load environment variables from: {env_path} file."
            )
        return None

    def _read_file(self, env_path: str) -> Dict[str, str]:
        try:
            values = dotenv_values(env_path)
        except (OSError, UnicodeDecodeError) as e:
            raise InternalServerError(
                f"failed to load environment variables from: {env_path} file."
            ) from e
        # Bare keys without "=" parse to None
        return {key: value for key, value in values.items() if value is not None}

    def load_environment_variables(self) -> None:
        """Copy env file values into the environment without overriding set keys."""
        env_path = self._existing_env_file()
        if env_path is None:
            config_log(
                f"No {os.path.basename(self.env_file_path())} file found, "
                "using environment variables and defaults only"
            )
            return

        loaded = 0
        for key, value in self._read_file(env_path).items():
            if key not in self.environ:
                self.environ[key] = value
                loaded += 1
        config_log(f"Loaded environment from: {env_path} ({loaded} new keys)")

    def read_environment_variables(self) -> Dict[str, str]:
        """Parse the env file and return its values without applying them."""
        env_path = self._existing_env_file()
        if env_path is None:
            raise InternalServerError(
                f"failed to read environment variables from: {self.env_file_path()} file."
            )
        return self._read_file(env_path)

    def get(self, key: str, default: Optional[str] = None) -> str:
        """Retrieve a value, falling back to ``default`` and the defaults table."""
        if self.use_cache:
            with self._cache_lock:
                if key in self._cache:
                    return self._cache[key]

        value = self.environ.get(key, "")
        if value == "" and default:
            value = default

        if value == "" and self.use_defaults:
            value = self.defaults.get(key, "")

        if self.use_cache:
            with self._cache_lock:
                self._cache[key] = value
        return value

    def clear_cache(self) -> None:
        """Drop all memoized values."""
        with self._cache_lock:
            self._cache.clear()
