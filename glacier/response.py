"""Turns GlacierResponse objects into decoded values or tagged failures."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from glacier.errors import DecodeError, GlacierError, ServiceError
from glacier.transport import GlacierResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of one operation: a decoded value, or the error that prevented it."""

    value: dict[str, Any] | None = None
    error: GlacierError | None = None
    response: GlacierResponse | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def interpret(response: GlacierResponse, decode: bool = True) -> Outcome:
    """Decode a 2xx JSON body; report anything else as a failure."""
    if not response.is_success:
        logger.warning("Non-successful response: %s (%s)", response.status_line, response.text)
        error = ServiceError(response.status_code, response.reason, response.body)
        return Outcome(error=error, response=response)

    if not decode:
        return Outcome(response=response)

    try:
        value = json.loads(response.body)
    except (ValueError, RecursionError) as e:
        logger.warning("Could not decode %s response body: %s", response.status_code, e)
        return Outcome(error=DecodeError(response.status_code, response.body, str(e)), response=response)

    if not isinstance(value, dict):
        detail = f"expected a JSON object, got {type(value).__name__}"
        logger.warning("Could not decode %s response body: %s", response.status_code, detail)
        return Outcome(error=DecodeError(response.status_code, response.body, detail), response=response)

    return Outcome(value=value, response=response)
