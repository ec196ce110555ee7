"""
common/__init__.py

Transport-independent core: networks, node lookup, credentials and SigV4 signing.
"""

from .credentials import get_default_credentials, resolve_credentials
from .exceptions import (
    AmbProviderError,
    ArgumentError,
    CommunityNodeNotFoundError,
    CredentialError,
    NodeLookupError,
    SigningError,
    UnsupportedRequestError,
    UnsupportedNetworkError,
)
from .networks import DEFAULT_NETWORK, NETWORKS, Network
from .nodes import get_community_node_props, get_node_url, resolve_node_location
from .signing import SignedRequest, SigV4Preflight, build_signed_request, sign_request
from .types import AwsMeta, NodeLocation, ProviderDerivation, RequestDescriptor
