from eth_abi import decode, encode
from eth_utils import encode_hex, to_bytes

from abi.erc1155_abi import ERC1155_ABI
from assets.providers.contract_call_provider import ContractCallProvider
from constants.contract_function_selectors import SUPPORTS_INTERFACE_SELECTOR
from constants.contract_interface_id import ERC1155_INTERFACE_ID, ERC1155_METADATA_URI_INTERFACE_ID
from utils.logger_utils import get_logger

logger = get_logger("ERC1155 Standard")


class ERC1155Standard(object):
    def __init__(self, provider: ContractCallProvider):
        self._provider = provider

    async def contract_supports_uri_metadata_interface(self, address: str) -> bool:
        """
        Query if a contract implements the ERC1155 metadata URI extension.

        :param address: ERC1155 contract address.
        :return: True if the contract reports support for interface 0x0e89341c.
        """
        return await self.contract_supports_interface(address, ERC1155_METADATA_URI_INTERFACE_ID)

    async def contract_supports_base_1155_interface(self, address: str) -> bool:
        """Query if a contract implements the base ERC1155 interface (0xd9b67a26)."""
        return await self.contract_supports_interface(address, ERC1155_INTERFACE_ID)

    async def contract_supports_interface(self, address: str, interface_id: str) -> bool:
        """
        EIP-165 probe: calls ``supportsInterface(interface_id)`` on ``address``.

        An empty result is read as "not supported". A failing call (e.g. the
        contract has no ``supportsInterface`` at all) is raised, not turned into False.
        """
        data = encode_hex(to_bytes(hexstr=SUPPORTS_INTERFACE_SELECTOR) + encode(["bytes4"], [to_bytes(hexstr=interface_id)]))
        result = await self._provider.call(address, data)
        if not result:
            logger.debug(f"Empty supportsInterface({interface_id}) result from {address}")
            return False
        return decode(["uint256"], result)[0] != 0

    async def get_balance_of(self, address: str, owner_address: str, token_id: int) -> int:
        """Get the balance of ``token_id`` held by ``owner_address``."""
        return await self._provider.call_contract_function(address, ERC1155_ABI, "balanceOf", owner_address, token_id)

    async def get_token_uri(self, address: str, token_id: int) -> str:
        """Query the metadata URI of ``token_id``. The ``{id}`` placeholder is returned unsubstituted."""
        return await self._provider.call_contract_function(address, ERC1155_ABI, "uri", token_id)
