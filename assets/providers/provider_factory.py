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
# Change Description: Reduced to async HTTP providers pinned to a static chain id, wrapped
# into a ContractCallProvider for read-only token queries.

from urllib.parse import urlparse

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.providers.async_base import AsyncBaseProvider

from assets.providers.contract_call_provider import Web3ContractCallProvider
from assets.providers.static_chain_id_provider import StaticChainIdAsyncProvider

DEFAULT_TIMEOUT = 60


def get_async_provider_from_uri(uri_string: str, chain_id: int, timeout: int = DEFAULT_TIMEOUT) -> AsyncBaseProvider:
    """
    Creates an asynchronous Web3 provider for ``chain_id`` based on the URI scheme.
    Currently supports HTTP/HTTPS.
    """
    uri = urlparse(uri_string)

    if uri.scheme == "http" or uri.scheme == "https":
        request_kwargs = {"timeout": aiohttp.ClientTimeout(total=timeout)}
        return StaticChainIdAsyncProvider(AsyncHTTPProvider(uri_string, request_kwargs=request_kwargs), chain_id)
    else:
        raise ValueError(f"Unknown uri scheme {uri_string}. Supported: http, https")


def get_contract_call_provider_from_uri(
    uri_string: str, chain_id: int, timeout: int = DEFAULT_TIMEOUT
) -> Web3ContractCallProvider:
    """
    Creates the ContractCallProvider consumed by the token standard adapters.
    """
    return Web3ContractCallProvider(AsyncWeb3(get_async_provider_from_uri(uri_string, chain_id, timeout)))
