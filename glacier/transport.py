"""
HTTP transport for signed Glacier requests.

Wraps httpx.Client. One call sends one request: no retries, no redirects
beyond httpx defaults, and the body is kept whatever the status code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from glacier.errors import TransportError
from glacier.request import GlacierRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlacierResponse:
    """Status, headers and raw body of one HTTP exchange."""

    status_code: int
    reason: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpTransport:
    """Sends GlacierRequest objects with a private httpx.Client."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client()

    def close(self) -> None:
        self._client.close()

    def send(self, request: GlacierRequest) -> GlacierResponse:
        """Send one request. Raises TransportError if no response arrives."""
        logger.debug("%s %s", request.method, request.url)
        try:
            resp = self._client.request(
                str(request.method),
                request.url,
                headers=request.headers,
                content=request.body or None,
            )
        except httpx.HTTPError as e:
            logger.warning("Request %s %s failed: %s", request.method, request.path, e)
            raise TransportError(f"{request.method} {request.path}: {e}") from e

        logger.debug("%s %s -> %s", request.method, request.path, resp.status_code)
        return GlacierResponse(
            status_code=resp.status_code,
            reason=resp.reason_phrase,
            headers=dict(resp.headers),
            body=resp.content,
        )
