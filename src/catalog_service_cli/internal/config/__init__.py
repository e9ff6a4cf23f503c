"""Configuration for the service."""

__all__ = [
    "EnvParser",
    "CatalogEnv",
]

from .env import CatalogEnv, EnvParser
