"""
Shared test fixtures for the api_config test suite.
"""
import pytest

import api_config.logger
from api_config.env_manager import EnvManager

DB_ENV = {
    "DB_HOST": "localhost",
    "DB_PORT": "",
    "DB_USERNAME": "user",
    "DB_PASSWORD": "password",
    "DB_DATABASE": "testdb",
}

APP_ENV = {
    "APP_NAME": "diabuddy",
    "APP_ENV": "test",
    "APP_URL": "http://localhost:8080",
    "APP_DEBUG": "true",
}


@pytest.fixture(autouse=True)
def reset_config_logger():
    yield
    api_config.logger.set_config_logger(None)


@pytest.fixture
def project_dir(tmp_path):
    """A project root identified by its pyproject.toml marker, with an empty .env."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'sample'\n", encoding="utf-8")
    (tmp_path / ".env").write_text("", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_env(project_dir):
    """Factory for an EnvManager over a dict-backed environment."""

    def _make_env(environ=None, **kwargs):
        kwargs.setdefault("start_dir", str(project_dir))
        return EnvManager(environ={} if environ is None else dict(environ), **kwargs)

    return _make_env
