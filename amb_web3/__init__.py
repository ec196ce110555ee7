"""
amb_web3

Web3.py providers for Amazon Managed Blockchain Access nodes, signing
every JSON-RPC request with AWS Signature Version 4.
"""

from .aio import AsyncAwsProvider, async_aws_web3
from .common import (
    AmbProviderError,
    ArgumentError,
    AwsMeta,
    CommunityNodeNotFoundError,
    CredentialError,
    Network,
    NodeLookupError,
    ProviderDerivation,
    SigningError,
    UnsupportedNetworkError,
    UnsupportedRequestError,
)
from .sync import AwsProvider, aws_web3

__version__ = "0.1.0"
