"""
aio/provider.py

This module defines the asynchronous SignedHTTPProvider.
It extends AsyncHTTPProvider so that every request is SigV4-signed right before it is sent.
It expects an asynchronous HTTP session (e.g. from aiohttp) and opens one on first use if none is given.
"""

import logging
from typing import Any, Dict, List, NoReturn, Optional, Tuple

import aiohttp
from web3 import AsyncHTTPProvider
from web3.types import RPCEndpoint, RPCResponse

from ..common.exceptions import UnsupportedRequestError
from ..common.signing import SignedRequest


class AsyncSignedHTTPProvider(AsyncHTTPProvider):
    """
    An asynchronous HTTP provider bound to a SignedRequest template.

    Every call is signed independently, so concurrent requests share no signing state.
    """
    logger = logging.getLogger("web3.providers.AsyncSignedHTTPProvider")

    def __init__(
        self,
        signed_request: SignedRequest,
        request_kwargs: Optional[Dict[str, Any]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        super().__init__(signed_request.url, request_kwargs)
        self.signed_request = signed_request
        self.session = session
        self._owns_session = session is None
        self._session_kwargs = dict(request_kwargs or {})

    def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = aiohttp.ClientSession()
        return self.session

    async def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        self.logger.debug(f"Making signed async HTTP request. URI: {self.endpoint_uri}, Method: {method}")
        request_data = self.encode_rpc_request(method, params)
        session_kwargs = dict(self._session_kwargs)
        headers = {**self.get_request_headers(), **session_kwargs.pop("headers", {})}
        descriptor = self.signed_request.prepare(request_data, headers)
        response = await self._get_session().request(
            method=descriptor.method,
            url=descriptor.url,
            data=descriptor.body,
            headers=dict(descriptor.headers),
            **session_kwargs
        )
        response.raise_for_status()
        raw_response = await response.read()
        decoded_response = self.decode_rpc_response(raw_response)
        self.logger.debug(f"Async response. Method: {method}, Response: {decoded_response}")
        return decoded_response

    async def make_batch_request(self, batch_requests: List[Tuple[RPCEndpoint, Any]]) -> NoReturn:
        raise UnsupportedRequestError("Batch requests are not supported by the signed transport")

    async def disconnect(self) -> None:
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
