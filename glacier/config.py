"""
Centralized configuration for the Glacier client.

All configuration is loaded from environment variables with sensible defaults.
GLACIER_* variables win over the standard AWS_* ones.

Usage:
    from glacier.config import get_config
    cfg = get_config()
    print(cfg.host)          # "glacier.eu-west-1.amazonaws.com"
    print(cfg.base_url)      # "https://glacier.eu-west-1.amazonaws.com"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

API_VERSION = "2012-06-01"


@dataclass(frozen=True)
class GlacierConfig:
    """Region, credentials and endpoint parameters for one client."""

    region: str = ""
    account_id: str = ""
    secret: str = field(default="", repr=False)
    service: str = "glacier"
    domain: str = "amazonaws.com"
    scheme: str = "https"
    api_version: str = API_VERSION
    endpoint_url: str = ""  # e.g. http://127.0.0.1:4566 for a local emulator

    @property
    def host(self) -> str:
        if self.endpoint_url:
            return self.endpoint_url.split("://", 1)[-1].split("/", 1)[0]
        return f"{self.service}.{self.region}.{self.domain}"

    @property
    def base_url(self) -> str:
        if self.endpoint_url:
            return self.endpoint_url.rstrip("/")
        return f"{self.scheme}://{self.host}"

    @property
    def has_credentials(self) -> bool:
        return bool(self.account_id and self.secret)


# Singleton
_config: GlacierConfig | None = None


def get_config() -> GlacierConfig:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _env(*names: str, default: str = "") -> str:
    """Return the first non-empty variable among names."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default


def _load_from_env() -> GlacierConfig:
    """Load configuration from environment variables."""
    return GlacierConfig(
        region=_env("GLACIER_REGION", "AWS_REGION", "AWS_DEFAULT_REGION"),
        account_id=_env("GLACIER_ACCOUNT_ID", "AWS_ACCESS_KEY_ID"),
        secret=_env("GLACIER_SECRET", "AWS_SECRET_ACCESS_KEY"),
        domain=_env("GLACIER_DOMAIN", default="amazonaws.com"),
        scheme=_env("GLACIER_SCHEME", default="https"),
        endpoint_url=_env("GLACIER_ENDPOINT_URL"),
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
