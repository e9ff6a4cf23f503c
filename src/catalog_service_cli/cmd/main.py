"""Entrypoints to the catalog-service-cli tool."""

import logging
import sys

from catalog_service_cli.internal import config, handlers, repositories

log = logging.getLogger("catalog-service-cli")


def parse_env() -> config.CatalogEnv | None:
    """Parse from the environment."""
    try:
        return config.CatalogEnv()
    except (OSError, ValueError) as e:
        log.error(f"Invalid environment configuration: {e}")
        return None


def run_cli() -> None:
    """Entrypoint for the CLI handler."""
    env = parse_env()
    if env is None:
        sys.exit(1)
    c = handlers.CLIHandler(
        management_adaptor=repositories.management_repositories.HTTPManagementRepository,
        env=env,
    )
    returncode: int = c.run()
    sys.exit(returncode)
