"""Exception type for catalog settings."""

from __future__ import annotations

from typing import Any, Optional


class ConfigurationError(RuntimeError):
    """A catalog setting is absent or unusable.

    ``setting`` names the offending field or environment variable so callers
    can point the operator at it.
    """

    def __init__(self, message: str, *, setting: Optional[str] = None) -> None:
        super().__init__(message)
        self.setting = setting

    @classmethod
    def missing(cls, setting: str, env_var: str = "") -> "ConfigurationError":
        message = f"{setting} is required"
        if env_var:
            message += f"; set {env_var}"
        return cls(message, setting=setting)

    @classmethod
    def invalid(cls, setting: str, value: Any, reason: str = "") -> "ConfigurationError":
        message = f"Invalid {setting} {value!r}"
        if reason:
            message += f": {reason}"
        return cls(message, setting=setting)


__all__ = ["ConfigurationError"]
