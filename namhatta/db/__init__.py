"""Database migration configuration."""

from .migration import DATABASE_URL_ENV_VAR, Dialect, MigrationConfig

__all__ = ["DATABASE_URL_ENV_VAR", "Dialect", "MigrationConfig"]
