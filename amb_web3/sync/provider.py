"""
sync/provider.py

This module defines the SignedHTTPProvider for synchronous calls.
It extends Web3's HTTPProvider so that every request is SigV4-signed right before it is sent.
"""

import logging
from typing import Any, Dict, List, NoReturn, Optional, Tuple

import requests
from web3 import HTTPProvider
from web3.types import RPCEndpoint, RPCResponse

from ..common.exceptions import UnsupportedRequestError
from ..common.signing import SignedRequest


class SignedHTTPProvider(HTTPProvider):
    """
    An HTTPProvider bound to a SignedRequest template.

    Each call encodes the JSON-RPC payload, lets the template's preflight
    sign it, and posts it with the resulting headers.
    """
    logger = logging.getLogger("web3.providers.SignedHTTPProvider")

    def __init__(
        self,
        signed_request: SignedRequest,
        request_kwargs: Optional[Dict[str, Any]] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(signed_request.url, request_kwargs)
        self.signed_request = signed_request
        self.session = session or requests.Session()
        self._session_kwargs = dict(request_kwargs or {})

    def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        self.logger.debug(f"Making signed HTTP request. URI: {self.endpoint_uri}, Method: {method}")
        request_data = self.encode_rpc_request(method, params)
        session_kwargs = dict(self._session_kwargs)
        headers = {**self.get_request_headers(), **session_kwargs.pop("headers", {})}
        descriptor = self.signed_request.prepare(request_data, headers)
        response = self.session.request(
            method=descriptor.method,
            url=descriptor.url,
            data=descriptor.body,
            headers=dict(descriptor.headers),
            **session_kwargs
        )
        response.raise_for_status()
        decoded_response = self.decode_rpc_response(response.content)
        self.logger.debug(f"Response received. Method: {method}, Response: {decoded_response}")
        return decoded_response

    def make_batch_request(self, batch_requests: List[Tuple[RPCEndpoint, Any]]) -> NoReturn:
        raise UnsupportedRequestError("Batch requests are not supported by the signed transport")
