from unittest.mock import AsyncMock, MagicMock

import pytest

from assets.providers.static_chain_id_provider import StaticChainIdAsyncProvider


@pytest.fixture
def mock_inner_provider():
    inner = MagicMock()
    inner.make_request = AsyncMock(return_value={"jsonrpc": "2.0", "id": 1, "result": "0x01"})
    inner.disconnect = AsyncMock()
    return inner


@pytest.mark.asyncio
async def test_chain_id_is_answered_locally(mock_inner_provider):
    provider = StaticChainIdAsyncProvider(mock_inner_provider, chain_id=137)

    response = await provider.make_request("eth_chainId", [])

    assert response["result"] == "0x89"
    assert response["jsonrpc"] == "2.0"
    mock_inner_provider.make_request.assert_not_called()


@pytest.mark.asyncio
async def test_net_version_is_answered_locally(mock_inner_provider):
    provider = StaticChainIdAsyncProvider(mock_inner_provider, chain_id=1)

    first = await provider.make_request("net_version", [])
    second = await provider.make_request("net_version", [])

    assert first["result"] == "1"
    assert first["id"] != second["id"]
    mock_inner_provider.make_request.assert_not_called()


@pytest.mark.asyncio
async def test_other_methods_are_delegated(mock_inner_provider):
    provider = StaticChainIdAsyncProvider(mock_inner_provider, chain_id=1)
    params = [{"to": "0x0000000000000000000000000000000000000001", "data": "0x"}, "latest"]

    response = await provider.make_request("eth_call", params)

    assert response["result"] == "0x01"
    mock_inner_provider.make_request.assert_awaited_once_with("eth_call", params)


@pytest.mark.asyncio
async def test_disconnect_is_delegated(mock_inner_provider):
    provider = StaticChainIdAsyncProvider(mock_inner_provider, chain_id=1)

    await provider.disconnect()

    mock_inner_provider.disconnect.assert_awaited_once()
