import pytest
from web3 import AsyncWeb3
from web3.providers.async_base import AsyncBaseProvider

from assets.providers.contract_call_provider import Web3ContractCallProvider
from assets.providers.static_chain_id_provider import StaticChainIdAsyncProvider
from assets.standards.collectible_standards.erc1155_standard import ERC1155Standard

ERC1155_ADDRESS = "0xfaafdc07907ff5120a76b34b731b278c38d6043c"
SUPPORTS_URI_CALLDATA = "0x01ffc9a70e89341c00000000000000000000000000000000000000000000000000000000"


class RecordingJsonRpcProvider(AsyncBaseProvider):
    """Answers JSON-RPC requests from canned results, without any network I/O."""

    def __init__(self, results):
        super().__init__()
        self.results = results
        self.requests = []

    async def make_request(self, method, params):
        self.requests.append((method, params))
        return {"jsonrpc": "2.0", "id": len(self.requests), "result": self.results[method]}

    async def is_connected(self, show_traceback=False):
        return True

    async def disconnect(self):
        pass


@pytest.fixture
def rpc():
    return RecordingJsonRpcProvider(
        {"eth_call": "0x0000000000000000000000000000000000000000000000000000000000000001"}
    )


@pytest.fixture
def erc1155_standard(rpc):
    w3 = AsyncWeb3(StaticChainIdAsyncProvider(rpc, chain_id=1))
    return ERC1155Standard(Web3ContractCallProvider(w3))


@pytest.mark.asyncio
async def test_contract_supports_uri_metadata_interface_over_json_rpc(rpc, erc1155_standard):
    supports_uri = await erc1155_standard.contract_supports_uri_metadata_interface(ERC1155_ADDRESS)

    assert supports_uri is True

    eth_calls = [params for method, params in rpc.requests if method == "eth_call"]
    assert len(eth_calls) == 1
    transaction, block_identifier = eth_calls[0][0], eth_calls[0][1]
    assert transaction["to"].lower() == ERC1155_ADDRESS
    assert transaction["data"] == SUPPORTS_URI_CALLDATA
    assert block_identifier == "latest"

    # The chain id is static and never requested from the node
    assert all(method != "eth_chainId" for method, _ in rpc.requests)


@pytest.mark.asyncio
async def test_contract_reports_no_uri_metadata_support(rpc, erc1155_standard):
    rpc.results["eth_call"] = "0x" + "00" * 32

    assert await erc1155_standard.contract_supports_uri_metadata_interface(ERC1155_ADDRESS) is False
