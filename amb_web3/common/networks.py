"""
common/networks.py

Registry of the EVM networks the provider knows by name.
"""

from dataclasses import dataclass
from typing import Dict, Union

from eth_typing import ChainId

from .exceptions import ArgumentError

DEFAULT_NETWORK = "mainnet"


@dataclass(frozen=True)
class Network:
    """A logical blockchain network: a canonical name and its chain id."""
    name: str
    chain_id: int

    @classmethod
    def from_identifier(cls, network: "Networkish") -> "Network":
        """
        Normalize a network name, chain id or Network into a Network.

        Known chain ids resolve to their registered name; unknown chain ids
        become an "unknown" network so that explicit node coordinates can
        still target them. Unknown names are rejected.
        """
        if isinstance(network, Network):
            return network
        if isinstance(network, bool):
            raise ArgumentError("invalid network", "network", network)
        if isinstance(network, int):
            return _BY_CHAIN_ID.get(network) or cls("unknown", network)
        if isinstance(network, str):
            if network.isdigit():
                return cls.from_identifier(int(network))
            if network in _BY_NAME:
                return _BY_NAME[network]
            raise ArgumentError("unknown network", "network", network)
        raise ArgumentError("invalid network", "network", network)


Networkish = Union[Network, str, int, ChainId]

NETWORKS = (
    Network("mainnet", 1),
    Network("goerli", 5),
    Network("sepolia", 11155111),
    Network("holesky", 17000),
    Network("matic", 137),
    Network("matic-mumbai", 80001),
    Network("matic-amoy", 80002),
    Network("arbitrum", 42161),
    Network("optimism", 10),
    Network("base", 8453),
)

_BY_NAME: Dict[str, Network] = {network.name: network for network in NETWORKS}
_BY_CHAIN_ID: Dict[int, Network] = {network.chain_id: network for network in NETWORKS}
