"""
common/signing.py

SigV4 signing of outbound JSON-RPC requests.

Signatures are time-bound, so the request template built here re-signs
every request right before it is dispatched instead of caching headers.
"""

import hashlib
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

from botocore.auth import SIGV4_TIMESTAMP, SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError, ClientError
from requests.structures import CaseInsensitiveDict

from .exceptions import SigningError
from .nodes import get_node_url
from .types import Preflight, RequestDescriptor

logger = logging.getLogger(__name__)

AMB_SERVICE_NAME = "managedblockchain"
JSON_HEADERS = {"Content-Type": "application/json"}


class _DatedSigV4Auth(SigV4Auth):
    """SigV4Auth that signs at a caller-supplied instant instead of reading the clock itself."""

    def __init__(self, credentials: Any, service_name: str, region_name: str, signing_date: datetime):
        super().__init__(credentials, service_name, region_name)
        self.signing_date = signing_date

    def add_auth(self, request: AWSRequest) -> None:
        request.context["timestamp"] = self.signing_date.strftime(SIGV4_TIMESTAMP)
        self._modify_request_before_signing(request)
        canonical_request = self.canonical_request(request)
        string_to_sign = self.string_to_sign(request, canonical_request)
        signature = self.signature(string_to_sign, request)
        self._inject_signature_to_request(request, signature)


def _utc(signing_date: Optional[datetime]) -> datetime:
    if signing_date is None:
        return datetime.now(timezone.utc)
    if signing_date.tzinfo is None:
        return signing_date.replace(tzinfo=timezone.utc)
    return signing_date.astimezone(timezone.utc)


def sign_request(
    descriptor: RequestDescriptor,
    credentials: Any,
    region: str,
    service: str = AMB_SERVICE_NAME,
    signing_date: Optional[datetime] = None,
) -> Dict[str, str]:
    """
    Compute the SigV4 headers for an outbound request.

    Only the ``host`` header and a SHA-256 content hash are signed alongside
    the method, path, query string and body; the caller's other headers are
    left out of the signature. Returns exactly the headers produced by the
    signer (Authorization, X-Amz-Date, X-Amz-Content-SHA256, host and, for
    temporary credentials, X-Amz-Security-Token).
    """
    parts = urlsplit(descriptor.url)
    if not parts.scheme or not parts.hostname:
        raise SigningError(f"Cannot sign request to malformed URL: {descriptor.url!r}")
    if credentials is None:
        raise SigningError("Cannot sign request without AWS credentials")

    body = descriptor.body
    aws_request = AWSRequest(
        method=descriptor.method,
        url=descriptor.url,
        headers={
            "host": parts.netloc,
            "X-Amz-Content-SHA256": hashlib.sha256(body or b"").hexdigest(),
        },
        data=body,
    )

    try:
        if hasattr(credentials, "get_frozen_credentials"):
            credentials = credentials.get_frozen_credentials()
        auth = _DatedSigV4Auth(credentials, service, region, _utc(signing_date))
        auth.add_auth(aws_request)
    except (BotoCoreError, ClientError, AttributeError, TypeError, ValueError) as exc:
        raise SigningError(f"SigV4 signing failed for {descriptor.url}: {exc}") from exc

    return dict(aws_request.headers.items())


class SigV4Preflight:
    """
    Pre-dispatch interceptor that attaches a fresh SigV4 signature.

    Returns a copy of the descriptor whose headers are the originals with
    the signed headers merged over them.
    """

    def __init__(self, credentials: Any, region: str, service: str = AMB_SERVICE_NAME) -> None:
        self.credentials = credentials
        self.region = region
        self.service = service

    def __call__(self, descriptor: RequestDescriptor) -> RequestDescriptor:
        signed_headers = sign_request(descriptor, self.credentials, self.region, self.service)
        headers = CaseInsensitiveDict(descriptor.headers)
        headers.update(signed_headers)
        return replace(descriptor, headers=headers)


class SignedRequest:
    """
    Reusable request template bound to a node endpoint.

    ``prepare`` turns the template plus a request body into a descriptor
    ready to send, running the preflight interceptor on every call.
    """

    def __init__(
        self,
        url: str,
        method: str = "POST",
        headers: Optional[Mapping[str, str]] = None,
        preflight: Optional[Preflight] = None,
    ) -> None:
        self.url = url
        self.method = method
        self.headers = CaseInsensitiveDict(headers or {})
        self.preflight = preflight

    def prepare(self, body: Optional[bytes] = None, headers: Optional[Mapping[str, str]] = None) -> RequestDescriptor:
        merged = CaseInsensitiveDict(self.headers)
        merged.update(headers or {})
        descriptor = RequestDescriptor(self.method, self.url, merged, body)
        if self.preflight is not None:
            descriptor = self.preflight(descriptor)
        return descriptor


def build_signed_request(
    credentials: Any,
    node_id: str,
    node_region: str,
    billing_token: Optional[str] = None,
) -> SignedRequest:
    """Return a request template for the node whose every dispatch is SigV4-signed."""
    url = get_node_url(node_id, node_region, billing_token)
    logger.debug(f"Building signed request template. Node: {node_id}, Region: {node_region}")
    return SignedRequest(url, headers=JSON_HEADERS, preflight=SigV4Preflight(credentials, node_region))
