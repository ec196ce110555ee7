"""
common/nodes.py

Resolves Amazon Managed Blockchain node locations and endpoint URLs.
"""

from typing import Optional

from .exceptions import (
    ArgumentError,
    CommunityNodeNotFoundError,
    UnsupportedNetworkError,
)
from .networks import Network
from .types import NodeLocation

AMB_DOMAIN_SUFFIX = "amazonaws.com"

COMMUNITY_NODE_NOT_FOUND = "No Amazon Managed Blockchain community node found for network"


def get_community_node_props(network: Network) -> NodeLocation:
    """
    Return the community node ID and region for the given network.

    Each recognized network has its own branch so a community node can be
    added for it; none of them has one yet.
    """
    if network.name == "mainnet":
        raise CommunityNodeNotFoundError(COMMUNITY_NODE_NOT_FOUND, network.name)
    elif network.name == "goerli":
        raise CommunityNodeNotFoundError(COMMUNITY_NODE_NOT_FOUND, network.name)
    elif network.name == "matic":
        raise CommunityNodeNotFoundError(COMMUNITY_NODE_NOT_FOUND, network.name)
    elif network.name == "matic-mumbai":
        raise CommunityNodeNotFoundError(COMMUNITY_NODE_NOT_FOUND, network.name)
    else:
        raise UnsupportedNetworkError("Unsupported network", network.name)


def resolve_node_location(
    network: Network,
    node_id: Optional[str] = None,
    node_region: Optional[str] = None,
) -> NodeLocation:
    """
    Validate explicit node coordinates or fall back to the community node.

    node_id and node_region must be given together or not at all.
    """
    if not node_id and node_region:
        raise ArgumentError("node_id required with node_region", "node_id", node_id)
    if node_id and not node_region:
        raise ArgumentError("node_region required with node_id", "node_region", node_region)
    if not node_id:
        return get_community_node_props(network)
    return NodeLocation(node_id, node_region)


def get_node_url(node_id: str, node_region: str, billing_token: Optional[str] = None) -> str:
    """Return the HTTPS JSON-RPC endpoint of an Amazon Managed Blockchain node."""
    url = f"https://{node_id}.ethereum.managedblockchain.{node_region}.{AMB_DOMAIN_SUFFIX}"
    if billing_token:
        url += f"?billingToken={billing_token}"
    return url
