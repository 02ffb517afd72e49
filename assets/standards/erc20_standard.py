# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified By: token-standard-adapters maintainers
# Change Description:
# - Reduced `get_token` metadata extraction to the ERC20 read queries (balance, decimals, symbol, name).
# - Replaced the `_get_first_result` function fallbacks with an ordered list of decode strategies
#   applied to the raw `symbol()` / `name()` call result (ABI string first, UTF-8 bytes second).
# - Added `get_details`, which fetches decimals and symbol concurrently.

import asyncio
from typing import Optional

from abi.erc20_abi import ERC20_ABI
from assets.enums.token_standard import TokenStandard
from assets.models.token_details import TokenDetails
from assets.providers.contract_call_provider import ContractCallProvider
from constants.contract_function_selectors import NAME_SELECTOR, SYMBOL_SELECTOR
from utils.abi_decode_utils import decode_first_match
from utils.exceptions import TokenNameParseError, TokenSymbolParseError
from utils.logger_utils import get_logger

logger = get_logger("ERC20 Standard")


class ERC20Standard(object):
    def __init__(self, provider: ContractCallProvider):
        self._provider = provider

    async def get_balance_of(self, address: str, owner_address: str) -> int:
        """
        Get balance for ``owner_address`` on a specific ERC20 contract.

        :param address: ERC20 contract address.
        :param owner_address: Account public address.
        :return: Raw token balance (not scaled by decimals).
        """
        return await self._provider.call_contract_function(address, ERC20_ABI, "balanceOf", owner_address)

    async def get_token_decimals(self, address: str) -> str:
        """
        Query for the decimals of a given ERC20 asset.

        :param address: ERC20 contract address.
        :return: The 'decimals' value as a string.
        """
        decimals = await self._provider.call_contract_function(address, ERC20_ABI, "decimals")
        return str(decimals)

    async def get_token_symbol(self, address: str) -> str:
        """
        Query for the symbol of a given ERC20 asset.
        Some tokens return ``bytes32`` instead of ``string``, so the raw result is
        decoded as an ABI string first and as UTF-8 bytes second.

        :param address: ERC20 contract address.
        :return: The 'symbol'.
        :raises TokenSymbolParseError: if neither decoding succeeds.
        """
        symbol = await self._get_string_or_bytes(address, SYMBOL_SELECTOR)
        if symbol is None:
            raise TokenSymbolParseError()
        return symbol

    async def get_token_name(self, address: str) -> str:
        """
        Query for the name of a given ERC20 asset, decoded the same way as the symbol.

        :raises TokenNameParseError: if neither decoding succeeds.
        """
        name = await self._get_string_or_bytes(address, NAME_SELECTOR)
        if name is None:
            raise TokenNameParseError()
        return name

    async def get_details(self, address: str, owner_address: Optional[str] = None) -> TokenDetails:
        """
        Query the standard, decimals, symbol and (optionally) balance of the given contract/owner pair.

        :param address: ERC20 contract address.
        :param owner_address: Account public address. The balance is only queried when given.
        :return: TokenDetails for the contract.
        """
        decimals, symbol = await asyncio.gather(
            self.get_token_decimals(address),
            self.get_token_symbol(address),
        )

        balance = None
        if owner_address:
            balance = await self.get_balance_of(address, owner_address)

        return TokenDetails(
            standard=TokenStandard.ERC20,
            decimals=decimals,
            symbol=symbol,
            balance=balance,
        )

    async def _get_string_or_bytes(self, address: str, selector: str) -> Optional[str]:
        result = await self._provider.call(address, selector)
        decoded = decode_first_match(result)
        if decoded is None:
            logger.debug(f"Could not decode result of {selector} for {address}")
        return decoded
