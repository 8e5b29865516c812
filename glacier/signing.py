"""
AWS Signature Version 4 request signing.

The client only depends on the Signer protocol; SigV4Signer is the default
implementation for the region-scoped AWS4-HMAC-SHA256 scheme. Any object
with a compatible ``sign`` method can be passed to GlacierClient instead.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import replace
from typing import Protocol
from urllib.parse import quote

from glacier.request import Credentials, GlacierRequest

ALGORITHM = "AWS4-HMAC-SHA256"


class Signer(Protocol):
    def sign(self, request: GlacierRequest, credentials: Credentials) -> GlacierRequest: ...


def canonical_uri(path: str) -> str:
    """Encode the (already encoded) request path once more, as non-S3 services expect."""
    return quote(path or "/", safe="/")


def canonical_query_string(params: dict[str, str]) -> str:
    """Sorted key=value pairs, both percent-encoded with nothing left safe."""
    return "&".join(
        f"{quote(key, safe='')}={quote(value, safe='')}"
        for key, value in sorted(params.items())
    )


def canonical_headers(headers: dict[str, str]) -> tuple[str, str]:
    """Return (canonical header block, signed header list) for all headers."""
    normalized = {name.lower(): " ".join(value.split()) for name, value in headers.items()}
    names = sorted(normalized)
    block = "".join(f"{name}:{normalized[name]}\n" for name in names)
    return block, ";".join(names)


def create_canonical_request(request: GlacierRequest) -> tuple[str, str]:
    """
    Build the canonical request and return it with its signed header list.

    Format:
    HTTPMethod\\n
    CanonicalURI\\n
    CanonicalQueryString\\n
    CanonicalHeaders\\n
    SignedHeaders\\n
    HashedPayload
    """
    header_block, signed_headers = canonical_headers(request.headers)
    canonical = "\n".join([
        str(request.method),
        canonical_uri(request.path),
        canonical_query_string(request.params),
        header_block,
        signed_headers,
        hashlib.sha256(request.body).hexdigest(),
    ])
    return canonical, signed_headers


def create_string_to_sign(canonical_request: str, amz_date: str, scope: str) -> str:
    hashed_canonical = hashlib.sha256(canonical_request.encode("utf-8")).hexdigest()
    return "\n".join([ALGORITHM, amz_date, scope, hashed_canonical])


class SigV4Signer:
    """Signs requests for one (region, service) pair."""

    def __init__(self, region: str, service: str = "glacier") -> None:
        self.region = region
        self.service = service

    def credential_scope(self, date_stamp: str) -> str:
        return f"{date_stamp}/{self.region}/{self.service}/aws4_request"

    def signing_key(self, secret_key: str, date_stamp: str) -> bytes:
        """Chain HMACs of the date, region, service and terminator over AWS4+secret."""
        key = ("AWS4" + secret_key).encode("utf-8")
        for part in (date_stamp, self.region, self.service, "aws4_request"):
            key = hmac.new(key, part.encode("utf-8"), hashlib.sha256).digest()
        return key

    def sign(self, request: GlacierRequest, credentials: Credentials) -> GlacierRequest:
        amz_date = request.header("x-amz-date") or request.header("Date")
        if not amz_date:
            raise ValueError("request has no x-amz-date or Date header to sign")
        date_stamp = amz_date[:8]
        scope = self.credential_scope(date_stamp)

        # Authorization is never part of its own signature
        to_sign = replace(
            request,
            headers={k: v for k, v in request.headers.items() if k.lower() != "authorization"},
        )

        canonical, signed_headers = create_canonical_request(to_sign)
        string_to_sign = create_string_to_sign(canonical, amz_date, scope)
        key = self.signing_key(credentials.secret_access_key, date_stamp)
        signature = hmac.new(key, string_to_sign.encode("utf-8"), hashlib.sha256).hexdigest()

        authorization = (
            f"{ALGORITHM} Credential={credentials.access_key_id}/{scope}, "
            f"SignedHeaders={signed_headers}, Signature={signature}"
        )
        return to_sign.with_headers({"Authorization": authorization})
