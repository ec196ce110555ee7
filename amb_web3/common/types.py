"""
common/types.py

Value types shared by the sync and async providers.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple, Optional

from requests.structures import CaseInsensitiveDict


class NodeLocation(NamedTuple):
    node_id: str
    node_region: str


@dataclass(frozen=True)
class RequestDescriptor:
    """
    An outbound HTTP request as seen by the signer.

    Built fresh for every call and discarded once sent.
    """
    method: str
    url: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: Optional[bytes] = None


Preflight = Callable[[RequestDescriptor], RequestDescriptor]


@dataclass(frozen=True)
class AwsMeta:
    """Read-only view of the node and credentials a provider is bound to."""
    node_region: str
    node_id: str
    node_http_endpoint: str
    credentials: Any = field(repr=False)


@dataclass(frozen=True)
class ProviderDerivation:
    """
    Result of deriving a provider for another chain.

    ``signed`` is False when derivation failed and ``provider`` is the
    generic unsigned fallback; ``error`` then holds the failure.
    """
    chain_id: int
    provider: Any
    signed: bool
    error: Optional[Exception] = None
