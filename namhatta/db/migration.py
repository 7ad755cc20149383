"""
Migration tool configuration for the two supported database backends.

The schema can be migrated against PostgreSQL or MySQL. Each dialect has its
own migrations output directory and schema module; the connection URL always
comes from DATABASE_URL.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from namhatta.exceptions import ConfigError

DATABASE_URL_ENV_VAR = "DATABASE_URL"


class Dialect(Enum):
    """Supported database backends."""

    POSTGRESQL = "postgresql"
    MYSQL = "mysql"

    @property
    def label(self) -> str:
        return "PostgreSQL" if self is Dialect.POSTGRESQL else "MySQL"

    @property
    def short_name(self) -> str:
        """Name used in migration and schema paths."""
        return "postgres" if self is Dialect.POSTGRESQL else "mysql"

    @classmethod
    def parse(cls, value: str | Dialect) -> Dialect:
        if isinstance(value, Dialect):
            return value
        normalized = value.strip().lower()
        if normalized in ("postgres", "pg"):
            normalized = "postgresql"
        try:
            return cls(normalized)
        except ValueError:
            raise ConfigError("unsupported database dialect", dialect=value) from None


# SQLAlchemy backend names (the part of the scheme before "+driver")
_BACKENDS: dict[str, Dialect] = {
    "postgresql": Dialect.POSTGRESQL,
    "postgres": Dialect.POSTGRESQL,
    "mysql": Dialect.MYSQL,
}


@dataclass(frozen=True)
class MigrationConfig:
    """
    Resolved migration configuration.

    Attributes:
        dialect: Database backend
        url: Parsed connection URL
        out: Directory migrations are written to
        schema: Schema module the migrations are generated from
    """

    dialect: Dialect
    url: URL
    out: str
    schema: str

    @classmethod
    def from_env(
        cls,
        dialect: str | Dialect,
        environ: Mapping[str, str] | None = None,
    ) -> MigrationConfig:
        """
        Resolve the config for dialect from DATABASE_URL.

        Raises:
            ConfigError: If DATABASE_URL is unset, unparsable, or names a
                backend other than dialect
        """
        dialect = Dialect.parse(dialect)
        env = environ if environ is not None else os.environ

        raw_url = env.get(DATABASE_URL_ENV_VAR, "").strip()
        if not raw_url:
            raise ConfigError(
                f"{DATABASE_URL_ENV_VAR} is required. "
                f"Please set your {dialect.label} connection string."
            )

        try:
            url = make_url(raw_url)
        except ArgumentError as e:
            raise ConfigError(f"invalid {DATABASE_URL_ENV_VAR}", error=str(e)) from e

        backend = url.get_backend_name()
        if _BACKENDS.get(backend) is not dialect:
            raise ConfigError(
                f"{DATABASE_URL_ENV_VAR} does not match dialect",
                dialect=dialect.value,
                backend=backend,
            )

        return cls(
            dialect=dialect,
            url=url,
            out=f"./migrations/{dialect.short_name}",
            schema=f"./shared/schema-{dialect.short_name}.ts",
        )

    def masked_url(self) -> str:
        """Connection URL with the password replaced by ***."""
        return self.url.render_as_string(hide_password=True)

    def to_dict(self, mask_password: bool = True) -> dict[str, Any]:
        return {
            "dialect": self.dialect.value,
            "out": self.out,
            "schema": self.schema,
            "url": self.masked_url()
            if mask_password
            else self.url.render_as_string(hide_password=False),
        }
