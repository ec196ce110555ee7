"""
sync/__init__.py

Synchronous Amazon Managed Blockchain provider for Web3.py 7.
"""

from typing import Any

from web3 import Web3

from .aws import AwsProvider
from .middleware import StaticNetworkMiddleware
from .provider import SignedHTTPProvider


def aws_web3(**kwargs: Any) -> Web3:
    """
    Build an AwsProvider and return its Web3 client.

    Args:
        **kwargs: Passed to AwsProvider (node_id, node_region, billing_token,
            network, credentials, request_kwargs, session).

    Returns:
        A Web3 instance whose requests are SigV4-signed for the node.

    Example:
        >>> w3 = aws_web3(node_id="nd-abc123", node_region="us-east-1")
        >>> w3.eth.chain_id
        1
    """
    return AwsProvider(**kwargs).w3
