"""
aio/aws.py

This module implements the asynchronous AwsProvider for AsyncWeb3.
Construction resolves the node and credentials up front; all network I/O happens on request.
"""

import logging
from typing import Any, Dict, Optional

from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.types import RPCEndpoint, RPCResponse

from ..common.config import get_env_provider_kwargs
from ..common.exceptions import AmbProviderError
from ..common.networks import Networkish
from ..common.state import build_provider_state
from ..common.types import ProviderDerivation
from .middleware import AsyncStaticNetworkMiddleware
from .provider import AsyncSignedHTTPProvider


class AsyncAwsProvider:
    """
    Asynchronous counterpart of AwsProvider, backed by aiohttp.
    """
    logger = logging.getLogger("web3.providers.AsyncAwsProvider")

    def __init__(
        self,
        node_id: Optional[str] = None,
        node_region: Optional[str] = None,
        billing_token: Optional[str] = None,
        network: Optional[Networkish] = None,
        credentials: Optional[Any] = None,
        request_kwargs: Optional[Dict[str, Any]] = None,
        session: Optional[Any] = None,
    ):
        state = build_provider_state(node_id, node_region, billing_token, network, credentials)
        self.network = state.network
        self.aws = state.aws
        self.billing_token = billing_token
        self._request_kwargs = request_kwargs
        self._session = session

        self.transport = AsyncSignedHTTPProvider(state.request, request_kwargs, session)
        self.w3 = AsyncWeb3(self.transport)
        self.w3.middleware_onion.add(AsyncStaticNetworkMiddleware(self.network), "Static network middleware")

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncAwsProvider":
        return cls(**{**get_env_provider_kwargs(), **kwargs})

    async def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        return await self.transport.make_request(method, params)

    async def is_connected(self, show_traceback: bool = False) -> bool:
        return await self.transport.is_connected(show_traceback)

    async def disconnect(self) -> None:
        await self.transport.disconnect()

    def for_chain(self, chain_id: int) -> ProviderDerivation:
        """Derive a provider for another chain; see AwsProvider.for_chain."""
        try:
            provider = type(self)(
                node_id=self.aws.node_id,
                node_region=self.aws.node_region,
                billing_token=self.billing_token,
                network=chain_id,
                credentials=self.aws.credentials,
                request_kwargs=self._request_kwargs,
                session=self._session,
            )
        except AmbProviderError as error:
            self.logger.exception(f"Could not derive a signed provider for chain {chain_id}")
            return ProviderDerivation(chain_id, self._get_generic_provider(chain_id), signed=False, error=error)
        return ProviderDerivation(chain_id, provider, signed=True)

    def _get_generic_provider(self, chain_id: int) -> AsyncHTTPProvider:
        self.logger.warning(f"Falling back to an unsigned async provider for chain {chain_id}")
        return AsyncHTTPProvider(self.aws.node_http_endpoint, self._request_kwargs)
