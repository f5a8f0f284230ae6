"""Catalog settings lookup and its error type."""

from .environment import CatalogEnvironment, read_defaults_file
from .errors import ConfigurationError

__all__ = [
    "CatalogEnvironment",
    "ConfigurationError",
    "read_defaults_file",
]
