import pytest
from hexbytes import HexBytes

from assets.providers.contract_call_provider import ContractCallProvider


class StubContractCallProvider(ContractCallProvider):
    """In-memory provider answering eth_call by function selector."""

    def __init__(self, responses):
        # selector -> raw bytes, or an exception to raise
        self.responses = responses
        self.calls = []

    async def call(self, to, data, block_identifier="latest"):
        self.calls.append((to, data, block_identifier))
        response = self.responses[data[:10]]
        if isinstance(response, Exception):
            raise response
        return HexBytes(response)

    @property
    def called_selectors(self):
        return [data[:10] for _, data, _ in self.calls]


@pytest.fixture
def stub_provider_factory():
    return StubContractCallProvider
