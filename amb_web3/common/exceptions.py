"""
common/exceptions.py

Exception hierarchy for the Amazon Managed Blockchain provider.
"""

from typing import Any


class AmbProviderError(Exception):
    """Base exception for all provider errors"""
    pass


class ArgumentError(AmbProviderError, ValueError):
    """
    Raised when construction inputs are malformed or inconsistent.

    Carries the offending argument name and value.
    """
    def __init__(self, message: str, argument: str, value: Any) -> None:
        super().__init__(f"{message} (argument={argument!r}, value={value!r})")
        self.argument = argument
        self.value = value


class NodeLookupError(AmbProviderError, LookupError):
    """No node could be found for a network"""
    def __init__(self, message: str, network: str) -> None:
        super().__init__(f"{message}: {network}")
        self.network = network


class CommunityNodeNotFoundError(NodeLookupError):
    """The network is recognized but has no community node"""
    pass


class UnsupportedNetworkError(NodeLookupError):
    """The network is not served by Amazon Managed Blockchain"""
    pass


class CredentialError(AmbProviderError):
    """No AWS credentials could be resolved"""
    pass


class SigningError(AmbProviderError):
    """SigV4 signing of an outbound request failed"""
    pass


class UnsupportedRequestError(AmbProviderError):
    """The transport cannot sign this kind of request"""
    pass
