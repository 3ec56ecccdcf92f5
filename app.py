#!/usr/bin/env python3
"""
API Config check

Loads the service configuration the way the application does at startup,
validates it and prints the database connection string.

Usage:
    python app.py                         # .env, postgres
    python app.py --env test              # .env.test
    python app.py --db-type mysql         # render a MySQL connection string
    python app.py --show-secrets          # do not mask the password
"""

import argparse
import sys

from api_config.config_manager import ApiConfig
from api_config.dsn import Backend
from api_config.env_manager import DEFAULT_ENVIRONMENT, EnvManager
from api_config.errors import ConfigurationError
from api_config.services.logging_service import LoggingService
from api_config.utils.environment_utils import mask_connection_string


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate service configuration")
    parser.add_argument(
        "--env",
        default=DEFAULT_ENVIRONMENT,
        help="environment name selecting the .env file (default: production)",
    )
    parser.add_argument(
        "--db-type",
        default=Backend.POSTGRES.value,
        choices=[backend.value for backend in Backend],
        help="database backend (default: postgres)",
    )
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="print the connection string without masking the password",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    logging_service = LoggingService()

    try:
        env = EnvManager(environment=args.env)
        api_config = ApiConfig(env, db_type=args.db_type)
        logging_service.log_config_summary(api_config.summary())

        connection_string = api_config.db.connection_string()
        if not args.show_secrets:
            connection_string = mask_connection_string(
                connection_string, api_config.db.dsn.password
            )
        print(connection_string)
        return 0

    except ConfigurationError as e:
        logging_service.error(f"Configuration invalid: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
