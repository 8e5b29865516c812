"""
glacier — a client for the vault operations of the Amazon Glacier RESTful API.

Public API:
    GlacierClient(region, account_id, secret)
        .create_vault(name)                 → bool
        .delete_vault(name)                 → bool
        .describe_vault(name)               → dict or None
        .list_vaults(limit=1000, marker=None) → dict or None
"""

from __future__ import annotations

from glacier.client import GlacierClient
from glacier.config import GlacierConfig, get_config
from glacier.errors import (
    ConfigurationError,
    DecodeError,
    GlacierError,
    ServiceError,
    TransportError,
)
from glacier.response import Outcome

__version__ = "0.3.0"

__all__ = [
    "GlacierClient",
    "GlacierConfig",
    "get_config",
    "Outcome",
    "GlacierError",
    "ConfigurationError",
    "TransportError",
    "ServiceError",
    "DecodeError",
]
