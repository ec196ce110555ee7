"""
aio/middleware.py

This module defines the asynchronous static-network middleware for AsyncWeb3.
It answers chain-identity RPC calls from the pinned network instead of asking the node.
"""

from typing import Any, Callable
from web3 import AsyncWeb3
from web3.middleware.base import Web3Middleware
from web3.types import RPCEndpoint, RPCResponse

from ..common.networks import Network

STATIC_NETWORK_METHODS = {
    "eth_chainId": hex,
    "net_version": str,
}

class AsyncStaticNetworkMiddleware(Web3Middleware):
    """
    An asynchronous middleware pinning an AsyncWeb3 instance to a single network.
    """
    def __init__(self, network: Network) -> None:
        self.network = network

    def __call__(self, w3: AsyncWeb3) -> "AsyncStaticNetworkMiddleware":
        return self

    async def async_wrap_make_request(
        self,
        make_request: Callable[[RPCEndpoint, Any], Any]
    ) -> Callable[[RPCEndpoint, Any], RPCResponse]:
        async def middleware(method: RPCEndpoint, params: Any) -> RPCResponse:
            if method in STATIC_NETWORK_METHODS:
                render = STATIC_NETWORK_METHODS[method]
                return {"jsonrpc": "2.0", "id": 0, "result": render(self.network.chain_id)}
            else:
                return await make_request(method, params)
        return middleware
