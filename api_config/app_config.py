"""
Application-level configuration.
"""

import os
from typing import Optional

from api_config import env_manager as keys
from api_config.env_manager import EnvManager
from api_config.errors import BadRequestError
from api_config.utils.root_path import RootPathResolver

REQUIRED_APP_KEYS = [
    keys.APP_NAME_KEY,
    keys.APP_ENV_KEY,
    keys.APP_URL_KEY,
    keys.APP_DEBUG_KEY,
]


class AppConfig:
    """Application settings (name, environment, URL, debug flag)"""

    def __init__(
        self,
        env: EnvManager,
        path_resolver: Optional[RootPathResolver] = None,
        working_dir: Optional[str] = None,
    ):
        self.env = env
        self.path_resolver = path_resolver or env.path_resolver
        self.working_dir = working_dir or os.getcwd()

    def get(self, key: str, default: Optional[str] = None) -> str:
        return self.env.get(key, default)

    @property
    def name(self) -> str:
        return self.get(keys.APP_NAME_KEY)

    @property
    def environment(self) -> str:
        return self.get(keys.APP_ENV_KEY)

    @property
    def url(self) -> str:
        return self.get(keys.APP_URL_KEY)

    @property
    def debug(self) -> bool:
        return self.get(keys.APP_DEBUG_KEY).strip().lower() in ("1", "true", "yes", "on")

    def base_path(self) -> str:
        """Project root, resolved from the parent of the working directory."""
        parent_dir = os.path.dirname(os.path.abspath(self.working_dir))
        return self.path_resolver.resolve(parent_dir)

    def validate(self) -> None:
        """Raise on the first required application key that is empty."""
        for key in REQUIRED_APP_KEYS:
            if self.get(key) == "":
                raise BadRequestError(f"{key} is required")
