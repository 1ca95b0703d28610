"""
Environment configuration for the Perfex MCP server.

Required:
- PERFEX_API_URL: Perfex REST API base URL (e.g. https://crm.example.com/api)
- PERFEX_API_KEY: API token sent in the ``authtoken`` header

Optional:
- MCP_HTTP_MODE: run the streamable HTTP transport instead of stdio
- MCP_HOST / MCP_PORT (or PORT): HTTP bind address
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class PerfexSettings:
    api_url: str
    api_key: str
    http_mode: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def redacted_key(self) -> str:
        """First five characters of the key, for startup logs."""
        return f"{self.api_key[:5]}..."


def _env_bool(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PerfexSettings:
    """Read settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Raises:
        ConfigError: If PERFEX_API_URL or PERFEX_API_KEY is missing, or the
            port is not an integer.
    """
    if environ is None:
        environ = os.environ

    api_url = (environ.get("PERFEX_API_URL") or "").strip()
    api_key = (environ.get("PERFEX_API_KEY") or "").strip()

    missing = [name for name, value in (("PERFEX_API_URL", api_url), ("PERFEX_API_KEY", api_key)) if not value]
    if missing:
        raise ConfigError(
            f"{' and '.join(missing)} environment variable{'s are' if len(missing) > 1 else ' is'} required"
        )

    raw_port = environ.get("MCP_PORT") or environ.get("PORT") or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"Invalid port: '{raw_port}'. Must be an integer.")

    return PerfexSettings(
        api_url=api_url,
        api_key=api_key,
        http_mode=_env_bool(environ, "MCP_HTTP_MODE"),
        host=environ.get("MCP_HOST", DEFAULT_HOST),
        port=port,
    )
