"""Lookup of ``CATALOG_*`` settings.

A setting comes from the process environment first, then from the first
defaults file that declares it. Defaults files are either ``.env`` style
(``KEY=value`` lines, optional ``export``) or a flat JSON object. Only keys
carrying the ``CATALOG_`` prefix are kept, so a shared ``.env`` cannot leak
unrelated values into the feed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

import orjson

from .errors import ConfigurationError

ENV_PREFIX = "CATALOG_"
DEFAULTS_FILES: Tuple[Path, ...] = (
    Path(".env"),
    Path("config/catalog.json"),
    Path.home() / ".catalog_feed.json",
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _dotenv_entries(text: str) -> Iterable[Tuple[str, str]]:
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip().removeprefix("export ").strip()
        yield key, value.strip().strip("'\"")


def _json_entries(raw: bytes, path: Path) -> Iterable[Tuple[str, str]]:
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ConfigurationError(f"Catalog defaults file {path} is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Catalog defaults file {path} must hold a JSON object")

    entries = []
    for key, value in payload.items():
        if isinstance(value, (dict, list)):
            raise ConfigurationError.invalid(str(key), value, f"{path} may only hold scalar values")
        entries.append((str(key), "" if value is None else str(value)))
    return entries


def read_defaults_file(path: Path) -> Dict[str, str]:
    """Return the ``CATALOG_*`` entries declared in *path*, or nothing when it is absent."""
    if not path.is_file():
        return {}
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read catalog defaults from {path}") from exc

    if path.suffix == ".json":
        entries = _json_entries(raw, path)
    else:
        entries = _dotenv_entries(raw.decode("utf-8"))
    return {key: value for key, value in entries if key.startswith(ENV_PREFIX)}


class CatalogEnvironment:
    """Resolve catalog settings by short name, e.g. ``PAGE_SIZE`` for ``CATALOG_PAGE_SIZE``.

    Blank values count as unset. Defaults files are read once, on the first
    lookup that misses the environment.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        defaults_files: Optional[Sequence[Path]] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._defaults_files = DEFAULTS_FILES if defaults_files is None else tuple(defaults_files)
        self._file_values: Optional[Dict[str, str]] = None

    @staticmethod
    def variable(name: str) -> str:
        return ENV_PREFIX + name

    def _file_defaults(self) -> Dict[str, str]:
        if self._file_values is None:
            merged: Dict[str, str] = {}
            for path in self._defaults_files:
                for key, value in read_defaults_file(path).items():
                    merged.setdefault(key, value)
            self._file_values = merged
        return self._file_values

    def lookup(self, name: str) -> Optional[str]:
        variable = self.variable(name)
        value = self._environ.get(variable)
        if value is None or not value.strip():
            value = self._file_defaults().get(variable)
        if value is None or not value.strip():
            return None
        return value.strip()

    def text(self, name: str, default: Optional[str] = None, *, required: bool = False) -> Optional[str]:
        value = self.lookup(name)
        if value is None:
            if required:
                raise ConfigurationError.missing(name.lower(), self.variable(name))
            return default
        return value

    def integer(self, name: str, default: int, *, minimum: Optional[int] = None) -> int:
        value = self.lookup(name)
        if value is None:
            return default
        try:
            number = int(value)
        except ValueError as exc:
            raise ConfigurationError.invalid(self.variable(name), value, "Must be an integer") from exc
        if minimum is not None and number < minimum:
            raise ConfigurationError.invalid(self.variable(name), number, f"Must be at least {minimum}")
        return number

    def flag(self, name: str, default: bool = False) -> bool:
        value = self.lookup(name)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigurationError.invalid(self.variable(name), value, "Must be true or false")

    def items(self, name: str, default: Sequence[str] = ()) -> Tuple[str, ...]:
        """Comma-separated values with blanks and repeats dropped."""
        value = self.lookup(name)
        if value is None:
            return tuple(default)
        items: list[str] = []
        for item in value.split(","):
            stripped = item.strip()
            if stripped and stripped not in items:
                items.append(stripped)
        return tuple(items)


__all__ = ["CatalogEnvironment", "DEFAULTS_FILES", "ENV_PREFIX", "read_defaults_file"]
