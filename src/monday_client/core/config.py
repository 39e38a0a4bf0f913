"""
Client configuration.

A process-wide default Configuration is read by every MondayClient built
without its own settings. Set it once at startup with configure(); changing
it while requests are in flight on other threads is not supported.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_HOST = "https://api.monday.com/v2"
DEFAULT_FILES_HOST = "https://api.monday.com/v2/file"
DEFAULT_TOKEN = None
DEFAULT_VERSION = "2023-07"
DEFAULT_OPEN_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 30

ENV_VARS = {
    "token": "MONDAY_TOKEN",
    "host": "MONDAY_HOST",
    "files_host": "MONDAY_FILES_HOST",
    "version": "MONDAY_API_VERSION",
    "open_timeout": "MONDAY_OPEN_TIMEOUT",
    "read_timeout": "MONDAY_READ_TIMEOUT",
}


class Configuration(BaseModel):
    token: Optional[str] = DEFAULT_TOKEN
    host: str = DEFAULT_HOST
    files_host: str = DEFAULT_FILES_HOST
    version: Optional[str] = DEFAULT_VERSION
    open_timeout: float = Field(default=DEFAULT_OPEN_TIMEOUT, gt=0)
    read_timeout: float = Field(default=DEFAULT_READ_TIMEOUT, gt=0)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @model_validator(mode="before")
    @classmethod
    def _reject_unknown_keys(cls, data: Any) -> Any:
        # extra="forbid" also rejects these; this names them all in one message
        if isinstance(data, dict):
            unknown = sorted(set(data) - set(cls.model_fields))
            if unknown:
                raise ValueError(f"Unknown configuration keys: {unknown}")
        return data

    def merged(self, **overrides: Any) -> "Configuration":
        """A new Configuration with overrides applied on top of this one."""
        return Configuration(**{**self.model_dump(), **overrides})

    def reset(self) -> None:
        defaults = Configuration()
        for name in type(self).model_fields:
            setattr(self, name, getattr(defaults, name))


_default_config = Configuration()


def get_config() -> Configuration:
    return _default_config


def configure(**settings: Any) -> Configuration:
    """Update the process-wide default configuration and return it."""
    validated = _default_config.merged(**settings)
    for name in settings:
        setattr(_default_config, name, getattr(validated, name))
    return _default_config


def reset_config() -> Configuration:
    _default_config.reset()
    return _default_config


def load_env_config(*, use_dotenv: bool = True) -> Dict[str, str]:
    """Read MONDAY_* settings from the environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    settings: Dict[str, str] = {}
    for name, env_var in ENV_VARS.items():
        value = os.getenv(env_var, "").strip()
        if value:
            settings[name] = value
    return settings


__all__ = [
    "Configuration",
    "DEFAULT_HOST",
    "DEFAULT_FILES_HOST",
    "DEFAULT_VERSION",
    "DEFAULT_OPEN_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",
    "ENV_VARS",
    "get_config",
    "configure",
    "reset_config",
    "load_env_config",
]
