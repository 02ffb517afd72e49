from abc import ABC, abstractmethod
from typing import Any, Dict, List

from eth_abi import decode, encode
from eth_utils import encode_hex, function_abi_to_4byte_selector
from web3 import AsyncWeb3
from web3.types import BlockIdentifier

from constants.contract_function_selectors import get_function_signature
from utils.logger_utils import get_logger

logger = get_logger("Contract Call Provider")


class ContractCallProvider(ABC):
    """
    Read-only gateway to a chain: anything that can execute an ``eth_call``.

    Implementations only provide :meth:`call`. :meth:`call_contract_function`
    builds ABI-driven contract calls on top of it, so test doubles never need
    a network.
    """

    @abstractmethod
    async def call(self, to: str, data: str, block_identifier: BlockIdentifier = "latest") -> bytes:
        """Executes ``eth_call`` for ``{to, data}`` and returns the raw ABI encoded result."""

    async def call_contract_function(self, address: str, abi: List[Dict[str, Any]], fn_name: str, *args: Any) -> Any:
        """
        Encodes a call to ``fn_name`` of ``abi`` with ``args``, executes it and decodes the output.
        A single output is returned as-is, several outputs as a tuple.
        """
        fn_abi = _find_function_abi(abi, fn_name, len(args))
        input_types = [arg["type"] for arg in fn_abi["inputs"]]
        output_types = [output["type"] for output in fn_abi["outputs"]]

        data = encode_hex(function_abi_to_4byte_selector(fn_abi) + encode(input_types, list(args)))
        result = await self.call(address, data)

        decoded = decode(output_types, result)
        return decoded[0] if len(decoded) == 1 else decoded


class Web3ContractCallProvider(ContractCallProvider):
    """ContractCallProvider backed by an AsyncWeb3 instance."""

    def __init__(self, w3: AsyncWeb3):
        self._w3 = w3

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    async def call(self, to: str, data: str, block_identifier: BlockIdentifier = "latest") -> bytes:
        logger.debug(f"eth_call {get_function_signature(data[:10])} on {to} at {block_identifier}")
        transaction = {"to": AsyncWeb3.to_checksum_address(to), "data": data}
        return await self._w3.eth.call(transaction, block_identifier)

    async def close(self):
        """Closes the underlying provider's connections."""
        await self._w3.provider.disconnect()


def _find_function_abi(abi: List[Dict[str, Any]], fn_name: str, num_args: int) -> Dict[str, Any]:
    for item in abi:
        if item.get("type") == "function" and item.get("name") == fn_name and len(item.get("inputs", [])) == num_args:
            return item
    raise ValueError(f"Function {fn_name} with {num_args} argument(s) not found in ABI")
