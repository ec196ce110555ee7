"""
common/state.py

Construction pipeline shared by the sync and async providers.
"""

from typing import Any, NamedTuple, Optional

from .credentials import resolve_credentials
from .networks import DEFAULT_NETWORK, Network, Networkish
from .nodes import resolve_node_location
from .signing import SignedRequest, build_signed_request
from .types import AwsMeta


class ProviderState(NamedTuple):
    network: Network
    request: SignedRequest
    aws: AwsMeta


def build_provider_state(
    node_id: Optional[str] = None,
    node_region: Optional[str] = None,
    billing_token: Optional[str] = None,
    network: Optional[Networkish] = None,
    credentials: Optional[Any] = None,
) -> ProviderState:
    """
    Resolve network, node location and credentials into a signed request template.

    Argument validation happens before credential discovery, so inconsistent
    node coordinates fail without touching the environment.
    """
    if network is None:
        network = DEFAULT_NETWORK
    network = Network.from_identifier(network)

    location = resolve_node_location(network, node_id, node_region)
    credentials = resolve_credentials(credentials)
    request = build_signed_request(credentials, location.node_id, location.node_region, billing_token)

    aws = AwsMeta(
        node_region=location.node_region,
        node_id=location.node_id,
        node_http_endpoint=request.url,
        credentials=credentials,
    )
    return ProviderState(network, request, aws)
