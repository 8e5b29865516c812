"""
Failure kinds reported by the Glacier client.

The facade collapses every failure into False/None. The variants below are
carried on ``Outcome.error`` for callers that want to tell them apart:

    TransportError   network unreachable, timeout, protocol error
    ServiceError     the service answered with a non-2xx status
    DecodeError      2xx status but the body is not a JSON object

ConfigurationError is the only one raised to the caller, from the client
constructor.
"""

from __future__ import annotations

import json
from typing import Any


class GlacierError(Exception):
    """Base class for all client errors."""


class ConfigurationError(GlacierError, ValueError):
    """The client cannot be built from the given region or credentials."""


class TransportError(GlacierError):
    """The request never produced an HTTP response."""


class ServiceError(GlacierError):
    """The service returned a non-successful status code."""

    def __init__(self, status: int, reason: str = "", body: bytes = b"") -> None:
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"{self.status_line}: {self.text}")

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}".strip()

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def document(self) -> dict[str, Any]:
        """The service's JSON error document ({code, message, type}), if any."""
        try:
            doc = json.loads(self.body)
        except ValueError:
            return {}
        return doc if isinstance(doc, dict) else {}

    @property
    def code(self) -> str | None:
        return self.document.get("code")

    @property
    def message(self) -> str | None:
        return self.document.get("message")


class DecodeError(GlacierError):
    """A successful response carried a body that could not be decoded."""

    def __init__(self, status: int, body: bytes, detail: str) -> None:
        self.status = status
        self.body = body
        self.detail = detail
        super().__init__(f"Undecodable response body (HTTP {status}): {detail}")
