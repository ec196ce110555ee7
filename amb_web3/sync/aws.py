"""
sync/aws.py

This module implements the AwsProvider for synchronous Web3.py.
It resolves the Amazon Managed Blockchain node and AWS credentials, and composes
a Web3 client around a SigV4-signing HTTP transport.
"""

import logging
from typing import Any, Dict, Optional

from web3 import HTTPProvider, Web3
from web3.types import RPCEndpoint, RPCResponse

from ..common.config import get_env_provider_kwargs
from ..common.exceptions import AmbProviderError
from ..common.networks import Networkish
from ..common.state import build_provider_state
from ..common.types import ProviderDerivation
from .middleware import StaticNetworkMiddleware
from .provider import SignedHTTPProvider


class AwsProvider:
    """
    Connects to an Amazon Managed Blockchain Access node over JSON-RPC.

    Requests are signed with the AWS credentials given or, when none are,
    with those found by botocore's default credential chain. The node is
    addressed explicitly by ``node_id`` and ``node_region``; no community
    node is available for any network yet.

    Example:
        >>> provider = AwsProvider(node_id="nd-abc123", node_region="us-east-1")
        >>> provider.w3.eth.block_number
    """
    logger = logging.getLogger("web3.providers.AwsProvider")

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

        self.transport = SignedHTTPProvider(state.request, request_kwargs, session)
        self.w3 = Web3(self.transport)
        self.w3.middleware_onion.add(StaticNetworkMiddleware(self.network), "Static network middleware")
        self.logger.debug(
            f"Connected to node {self.aws.node_id} in {self.aws.node_region} on {self.network.name}"
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AwsProvider":
        """Build a provider from AMB_* environment variables; keyword arguments take precedence."""
        return cls(**{**get_env_provider_kwargs(), **kwargs})

    def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        return self.transport.make_request(method, params)

    def is_connected(self, show_traceback: bool = False) -> bool:
        return self.transport.is_connected(show_traceback)

    def for_chain(self, chain_id: int) -> ProviderDerivation:
        """
        Derive a provider for another chain on the same node and credentials.

        If the signed provider cannot be built, the failure is logged and an
        unsigned HTTPProvider for the node endpoint is returned instead.
        """
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

    def _get_generic_provider(self, chain_id: int) -> HTTPProvider:
        self.logger.warning(f"Falling back to an unsigned provider for chain {chain_id}")
        return HTTPProvider(self.aws.node_http_endpoint, self._request_kwargs)
