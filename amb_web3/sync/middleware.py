"""
sync/middleware.py

This module defines the synchronous static-network middleware.
It answers chain-identity RPC calls from the network the provider was pinned to,
so the chain id is never re-detected from the node.
"""

from typing import Any, Callable
from web3 import Web3
from web3.middleware.base import Web3Middleware
from web3.types import RPCEndpoint, RPCResponse

from ..common.networks import Network

# RPC methods answered locally, mapped to how the chain id is rendered.
STATIC_NETWORK_METHODS = {
    "eth_chainId": hex,
    "net_version": str,
}

class StaticNetworkMiddleware(Web3Middleware):
    """
    Synchronous middleware pinning a Web3 instance to a single network.

    Calls in STATIC_NETWORK_METHODS are answered from the pinned network;
    everything else is passed through to the next layer.
    """
    def __init__(self, network: Network) -> None:
        self.network = network

    def __call__(self, w3: Web3) -> "StaticNetworkMiddleware":
        return self

    def wrap_make_request(
        self, make_request: Callable[[RPCEndpoint, Any], RPCResponse]
    ) -> Callable[[RPCEndpoint, Any], RPCResponse]:
        def middleware(method: RPCEndpoint, params: Any) -> RPCResponse:
            if method in STATIC_NETWORK_METHODS:
                render = STATIC_NETWORK_METHODS[method]
                return {"jsonrpc": "2.0", "id": 0, "result": render(self.network.chain_id)}
            else:
                return make_request(method, params)
        return middleware
