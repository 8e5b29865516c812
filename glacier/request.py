"""
Request descriptors and the builder that stamps them.

Every request leaving the client carries the API version header, a Host
header and a Date header taken from the clock at build time, so the
timestamp is always fresh when the signer sees it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import StrEnum
from urllib.parse import quote, urlencode

from glacier.config import API_VERSION, GlacierConfig

TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as YYYYMMDDTHHMMSSZ in UTC. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def vault_path(name: str | None = None) -> str:
    """/-/vaults or /-/vaults/{name}, with the name encoded as one path segment."""
    if name is None:
        return "/-/vaults"
    return f"/-/vaults/{quote(name, safe='')}"


class HttpMethod(StrEnum):
    GET = "GET"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Credentials:
    """Access key id and secret used to sign requests."""

    access_key_id: str
    secret_access_key: str = field(repr=False)


@dataclass(frozen=True)
class GlacierRequest:
    """An HTTP request ready to be signed and sent."""

    method: HttpMethod
    base_url: str
    path: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def url(self) -> str:
        url = self.base_url + self.path
        if self.params:
            url += "?" + urlencode(sorted(self.params.items()), quote_via=quote)
        return url

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def with_headers(self, extra: Mapping[str, str]) -> GlacierRequest:
        """Return a copy with extra headers merged in."""
        return replace(self, headers={**self.headers, **extra})


class RequestBuilder:
    """Builds GlacierRequest objects for one endpoint."""

    def __init__(self, config: GlacierConfig, clock: Clock | None = None) -> None:
        self.host = config.host
        self.base_url = config.base_url
        self.api_version = config.api_version or API_VERSION
        self.clock = clock or utc_now

    def build(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, object] | None = None,
    ) -> GlacierRequest:
        # None-valued params are dropped so optional cursors can be passed through as-is
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        return GlacierRequest(
            method=HttpMethod(method),
            base_url=self.base_url,
            path=path,
            params=query,
            headers={
                "x-amz-glacier-version": self.api_version,
                "Host": self.host,
                "Date": format_timestamp(self.clock()),
            },
        )
