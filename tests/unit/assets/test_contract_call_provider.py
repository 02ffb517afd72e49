from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_abi import encode
from eth_abi.exceptions import EncodingError
from hexbytes import HexBytes

from abi.erc20_abi import ERC20_ABI
from assets.providers.contract_call_provider import Web3ContractCallProvider

DAI_ADDRESS = "0x6b175474e89094c44da98b954eedeac495271d0f"
DAI_CHECKSUM_ADDRESS = "0x6B175474E89094C44Da98b954EedeAC495271d0F"


@pytest.fixture
def mock_w3():
    w3 = MagicMock()
    w3.eth.call = AsyncMock(return_value=HexBytes(encode(["uint8"], [6])))
    w3.provider.disconnect = AsyncMock()
    return w3


@pytest.mark.asyncio
async def test_call_checksums_address_and_defaults_to_latest(mock_w3):
    provider = Web3ContractCallProvider(mock_w3)

    result = await provider.call(DAI_ADDRESS, "0x313ce567")

    assert result == HexBytes(encode(["uint8"], [6]))
    mock_w3.eth.call.assert_awaited_once_with({"to": DAI_CHECKSUM_ADDRESS, "data": "0x313ce567"}, "latest")


@pytest.mark.asyncio
async def test_call_contract_function_encodes_and_decodes(mock_w3):
    provider = Web3ContractCallProvider(mock_w3)

    decimals = await provider.call_contract_function(DAI_ADDRESS, ERC20_ABI, "decimals")

    assert decimals == 6
    args, _ = mock_w3.eth.call.call_args
    assert args[0]["data"] == "0x313ce567"


@pytest.mark.asyncio
async def test_call_contract_function_unknown_function(mock_w3):
    provider = Web3ContractCallProvider(mock_w3)

    with pytest.raises(ValueError, match="totalSupply"):
        await provider.call_contract_function(DAI_ADDRESS, ERC20_ABI, "totalSupply")

    mock_w3.eth.call.assert_not_called()


@pytest.mark.asyncio
async def test_call_contract_function_rejects_malformed_address(mock_w3):
    provider = Web3ContractCallProvider(mock_w3)

    with pytest.raises(EncodingError):
        await provider.call_contract_function(DAI_ADDRESS, ERC20_ABI, "balanceOf", "0xnot-an-address")

    mock_w3.eth.call.assert_not_called()


@pytest.mark.asyncio
async def test_close_disconnects_provider(mock_w3):
    provider = Web3ContractCallProvider(mock_w3)

    await provider.close()

    mock_w3.provider.disconnect.assert_awaited_once()
