"""
Operator tooling for the Namhatta Management System.

Process launchers for the dev server and the database seed script, the API
URL builder, migration configuration and the API record types.
"""

from importlib.metadata import PackageNotFoundError, version

from . import models
from .dot_dict import DotDict
from .exceptions import ConfigError, LaunchError, NamhattaError, SpawnError, ValidationError
from .models import Devotee, Namhatta, PaginatedResponse

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("namhatta")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "DotDict",
    "models",
    "Devotee",
    "Namhatta",
    "PaginatedResponse",
    "NamhattaError",
    "ConfigError",
    "LaunchError",
    "SpawnError",
    "ValidationError",
]
