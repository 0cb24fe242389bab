"""
DocumentStack: Client configuration.

ClientConfig is what callers hand to the client. resolve() applies defaults;
load_config() reads the same settings from the environment (and a .env file).
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from documentstack.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.documentstack.dev"
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ClientConfig:
    """DocumentStack API settings. Only api_key is required."""
    api_key: str
    base_url: str = ""
    timeout: int = 0
    headers: Mapping[str, str] = field(default_factory=dict)
    debug: bool = False

    def resolve(self) -> "ClientConfig":
        """Return a copy with defaults applied. Raises ConfigurationError without an API key."""
        if not self.api_key:
            raise ConfigurationError("API key is required")

        base_url = self.base_url or DEFAULT_BASE_URL
        if base_url.endswith("/"):
            base_url = base_url[:-1]

        return replace(
            self,
            base_url=base_url,
            timeout=self.timeout if self.timeout > 0 else DEFAULT_TIMEOUT,
            headers=MappingProxyType(dict(self.headers or {})),
        )


def _env_bool(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in ("1", "true", "yes", "on")


def load_config(
    env_file: str | Path | None = None,
    *,
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: int | None = None,
    headers: Mapping[str, str] | None = None,
    debug: bool | None = None,
) -> ClientConfig:
    """
    Build a ClientConfig from DOCUMENTSTACK_* environment variables.

    A .env file (the given path, or one found from the working directory) is
    loaded first without overriding variables already set. Keyword arguments
    that are not None win over the environment.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    if timeout is None:
        raw_timeout = os.getenv("DOCUMENTSTACK_TIMEOUT", "").strip()
        try:
            timeout = int(raw_timeout) if raw_timeout else 0
        except ValueError:
            raise ConfigurationError(
                f"DOCUMENTSTACK_TIMEOUT must be an integer number of seconds, got {raw_timeout!r}"
            ) from None

    return ClientConfig(
        api_key=api_key if api_key is not None else os.getenv("DOCUMENTSTACK_API_KEY", ""),
        base_url=base_url if base_url is not None else os.getenv("DOCUMENTSTACK_BASE_URL", ""),
        timeout=timeout,
        headers=dict(headers or {}),
        debug=debug if debug is not None else _env_bool("DOCUMENTSTACK_DEBUG"),
    )
