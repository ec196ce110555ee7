"""
Tests for the network registry
"""

import pytest

from amb_web3.common.exceptions import ArgumentError
from amb_web3.common.networks import Network


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("mainnet", Network("mainnet", 1)),
        (1, Network("mainnet", 1)),
        ("137", Network("matic", 137)),
        (80001, Network("matic-mumbai", 80001)),
    ],
)
def test_from_identifier_known(identifier, expected):
    assert Network.from_identifier(identifier) == expected


def test_from_identifier_passes_network_through():
    network = Network("goerli", 5)
    assert Network.from_identifier(network) is network


def test_unknown_chain_id_is_unknown_network():
    network = Network.from_identifier(424242)
    assert network.name == "unknown"
    assert network.chain_id == 424242


@pytest.mark.parametrize("identifier", ["not-a-network", True, 1.5, None])
def test_unrecognized_identifier_raises(identifier):
    with pytest.raises(ArgumentError) as exc_info:
        Network.from_identifier(identifier)
    assert exc_info.value.argument == "network"
