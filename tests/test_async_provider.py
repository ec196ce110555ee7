"""
Tests for the asynchronous AsyncAwsProvider
"""

import json

import pytest
from web3 import AsyncHTTPProvider, AsyncWeb3

from amb_web3.aio import AsyncAwsProvider, AsyncSignedHTTPProvider, async_aws_web3
from amb_web3.common.exceptions import (
    ArgumentError,
    CommunityNodeNotFoundError,
    UnsupportedRequestError,
)

ENDPOINT = "https://n1.ethereum.managedblockchain.r1.amazonaws.com"


@pytest.fixture
def provider(credentials, fake_async_session):
    return AsyncAwsProvider(node_id="n1", node_region="r1", credentials=credentials, session=fake_async_session)


def test_construct(provider, credentials):
    assert provider.network.name == "mainnet"
    assert provider.aws.node_http_endpoint == ENDPOINT
    assert provider.aws.credentials is credentials
    assert isinstance(provider.transport, AsyncSignedHTTPProvider)
    assert isinstance(provider.w3, AsyncWeb3)


def test_construct_validates_node_coordinates(credentials):
    with pytest.raises(ArgumentError):
        AsyncAwsProvider(node_id="n1", credentials=credentials)
    with pytest.raises(CommunityNodeNotFoundError):
        AsyncAwsProvider(credentials=credentials)


@pytest.mark.asyncio
async def test_make_request_is_signed(provider, fake_async_session):
    response = await provider.make_request("eth_blockNumber", [])
    assert response["result"] == "0x10"

    (call,) = fake_async_session.calls
    assert call["url"] == ENDPOINT
    assert json.loads(call["data"])["method"] == "eth_blockNumber"
    assert call["headers"]["Authorization"].startswith("AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/")
    assert "X-Amz-Content-SHA256" in call["headers"]


@pytest.mark.asyncio
async def test_w3_block_number(provider, fake_async_session):
    assert await provider.w3.eth.block_number == 16
    assert len(fake_async_session.calls) == 1


@pytest.mark.asyncio
async def test_chain_id_is_static(credentials, fake_async_session):
    provider = AsyncAwsProvider(
        node_id="n1", node_region="r1", network="matic-mumbai", credentials=credentials, session=fake_async_session
    )
    assert await provider.w3.eth.chain_id == 80001
    assert fake_async_session.calls == []


@pytest.mark.asyncio
async def test_disconnect_keeps_caller_session(provider, fake_async_session):
    await provider.disconnect()
    assert provider.transport.session is fake_async_session


def test_for_chain(provider, credentials):
    derivation = provider.for_chain(137)
    assert derivation.signed
    assert isinstance(derivation.provider, AsyncAwsProvider)
    assert derivation.provider.network.chain_id == 137
    assert derivation.provider.aws.node_id == "n1"
    assert derivation.provider.aws.credentials is credentials


def test_for_chain_falls_back_on_failure(provider, monkeypatch):
    def fail(*args, **kwargs):
        raise ArgumentError("boom", "network", 5)

    monkeypatch.setattr("amb_web3.aio.aws.build_provider_state", fail)
    derivation = provider.for_chain(5)
    assert not derivation.signed
    assert isinstance(derivation.error, ArgumentError)
    assert isinstance(derivation.provider, AsyncHTTPProvider)
    assert not isinstance(derivation.provider, AsyncSignedHTTPProvider)


def test_async_aws_web3(credentials):
    w3 = async_aws_web3(node_id="n1", node_region="r1", credentials=credentials)
    assert isinstance(w3, AsyncWeb3)


@pytest.mark.asyncio
async def test_batch_requests_are_refused(provider, fake_async_session):
    with pytest.raises(UnsupportedRequestError):
        await provider.transport.make_batch_request([("eth_blockNumber", [])])
    assert fake_async_session.calls == []


@pytest.mark.asyncio
async def test_owned_session_opened_lazily_and_closed(credentials, fake_async_session, monkeypatch):
    monkeypatch.setattr("amb_web3.aio.provider.aiohttp.ClientSession", lambda: fake_async_session)
    provider = AsyncAwsProvider(node_id="n1", node_region="r1", credentials=credentials)
    assert provider.transport.session is None

    await provider.make_request("eth_blockNumber", [])
    session = provider.transport.session
    assert session is fake_async_session
    assert "Authorization" in session.calls[0]["headers"]

    await provider.disconnect()
    assert session.closed
    assert provider.transport.session is None
