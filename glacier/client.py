"""
Glacier vault client.

Implements the vault operations of the Amazon Glacier RESTful API, version
2012-06-01. Each call builds a request, signs it, sends it and interprets the
response; failures come back as False/None and are logged, never raised.

Usage:
    from glacier import GlacierClient

    with GlacierClient("eu-west-1", "AKIMYACCOUNTID", "MYSECRET") as glacier:
        glacier.create_vault("a_vault")
        info = glacier.describe_vault("a_vault")   # {"VaultName": "a_vault", ...}
        page = glacier.list_vaults(limit=10)       # {"VaultList": [...], "Marker": ...}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from glacier.config import GlacierConfig, get_config
from glacier.errors import ConfigurationError, TransportError
from glacier.request import Clock, Credentials, HttpMethod, RequestBuilder, vault_path
from glacier.response import Outcome, interpret
from glacier.signing import Signer, SigV4Signer
from glacier.transport import HttpTransport

logger = logging.getLogger(__name__)

MAX_LIST_LIMIT = 1000


class GlacierClient:
    """Synchronous client for one region and one set of credentials."""

    def __init__(
        self,
        region: str,
        account_id: str,
        secret: str,
        *,
        config: GlacierConfig | None = None,
        signer: Signer | None = None,
        transport: HttpTransport | None = None,
        clock: Clock | None = None,
    ) -> None:
        if not region:
            raise ConfigurationError("region is required")

        base = config or GlacierConfig()
        self.config = replace(base, region=region, account_id=account_id, secret=secret)
        if not self.config.has_credentials:
            raise ConfigurationError("account id and secret are required")
        self._credentials = Credentials(account_id, secret)
        self._builder = RequestBuilder(self.config, clock=clock)
        self._signer = signer or SigV4Signer(region, self.config.service)
        self._transport = transport or HttpTransport()

    @classmethod
    def from_config(cls, config: GlacierConfig | None = None, **kwargs: Any) -> GlacierClient:
        """Build a client from a GlacierConfig, by default the one in the environment."""
        cfg = config or get_config()
        return cls(cfg.region, cfg.account_id, cfg.secret, config=cfg, **kwargs)

    @property
    def region(self) -> str:
        return self.config.region

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> GlacierClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GlacierClient(region={self.region!r}, host={self.config.host!r})"

    # -- Vault operations --------------------------------------------------

    def create_vault(self, vault_name: str) -> bool:
        """PUT /-/vaults/{name} — True if the vault was created (or already existed)."""
        return self.call(HttpMethod.PUT, vault_path(vault_name), decode=False).ok

    def delete_vault(self, vault_name: str) -> bool:
        """DELETE /-/vaults/{name} — True on success."""
        return self.call(HttpMethod.DELETE, vault_path(vault_name), decode=False).ok

    def describe_vault(self, vault_name: str) -> dict[str, Any] | None:
        """GET /-/vaults/{name} — vault description dict, or None on failure.

        Keys are the service's: VaultARN, VaultName, CreationDate,
        LastInventoryDate, NumberOfArchives, SizeInBytes.
        """
        return self.call(HttpMethod.GET, vault_path(vault_name)).value

    def list_vaults(self, limit: int = MAX_LIST_LIMIT, marker: str | None = None) -> dict[str, Any] | None:
        """GET /-/vaults — {"VaultList": [...], "Marker": str | None}, or None on failure.

        Pass the returned Marker back to fetch the next page; a null Marker
        means there are no more vaults.
        """
        return self.call(HttpMethod.GET, vault_path(), params={"limit": limit, "marker": marker}).value

    # -- Plumbing ----------------------------------------------------------

    def call(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, object] | None = None,
        decode: bool = True,
    ) -> Outcome:
        """Build, sign, send and interpret one request.

        Never raises for transport, service or decode failures; inspect
        Outcome.error to tell them apart.
        """
        request = self._builder.build(method, path, params)
        signed = self._signer.sign(request, self._credentials)
        try:
            response = self._transport.send(signed)
        except TransportError as e:
            return Outcome(error=e)
        return interpret(response, decode=decode)
