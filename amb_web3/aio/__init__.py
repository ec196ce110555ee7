"""
aio/__init__.py

Asynchronous Amazon Managed Blockchain provider for AsyncWeb3 (Web3.py 7).
"""

from typing import Any

from web3 import AsyncWeb3

from .aws import AsyncAwsProvider
from .middleware import AsyncStaticNetworkMiddleware
from .provider import AsyncSignedHTTPProvider


def async_aws_web3(**kwargs: Any) -> AsyncWeb3:
    """
    Build an AsyncAwsProvider and return its AsyncWeb3 client.

    Args:
        **kwargs: Passed to AsyncAwsProvider.

    Returns:
        An AsyncWeb3 instance whose requests are SigV4-signed for the node.
    """
    return AsyncAwsProvider(**kwargs).w3
