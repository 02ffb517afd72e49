from typing import Any

from web3.providers.async_base import AsyncBaseProvider
from web3.types import RPCEndpoint, RPCResponse

from utils.logger_utils import get_logger

logger = get_logger("Static Chain Id Async Provider")

# Requests answered from the configured chain id instead of the node
STATIC_METHODS = ("eth_chainId", "net_version")


class StaticChainIdAsyncProvider(AsyncBaseProvider):
    """
    A Web3 AsyncProvider bound to a single, known chain.
    web3 validates the chain id before every ``eth_call``; this provider answers
    ``eth_chainId``/``net_version`` locally and forwards everything else to the
    wrapped provider.
    """

    def __init__(self, provider: AsyncBaseProvider, chain_id: int):
        super().__init__()
        self._provider = provider
        self._chain_id = chain_id
        self.id_counter = 0

    @property
    def chain_id(self) -> int:
        return self._chain_id

    def _generate_id(self) -> int:
        self.id_counter += 1
        return self.id_counter

    async def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        if method in STATIC_METHODS:
            result = hex(self._chain_id) if method == "eth_chainId" else str(self._chain_id)
            return {"jsonrpc": "2.0", "id": self._generate_id(), "result": result}

        # Delegate to the underlying provider
        return await self._provider.make_request(method, params)

    async def is_connected(self, show_traceback: bool = False) -> bool:
        return await self._provider.is_connected(show_traceback)

    async def disconnect(self) -> None:
        logger.debug(f"Disconnecting provider for chain {self._chain_id}")
        await self._provider.disconnect()
