import asyncio
import json

import click

from assets.providers.provider_factory import get_contract_call_provider_from_uri
from assets.standards.collectible_standards.erc1155_standard import ERC1155Standard
from config.settings import settings
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Check ERC1155 URI Support CLI")


@click.command()
@click.option("-a", "--address", required=True, type=str, help="ERC1155 contract address.")
@click.option(
    "-p",
    "--provider-uri",
    default=settings.ethereum.provider_uri,
    show_default=True,
    type=str,
    help="Ethereum node JSON-RPC URL.",
)
@click.option("--chain-id", default=settings.ethereum.chain_id, show_default=True, type=int, help="Chain id of the node.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def check_erc1155_uri_support(address: str, provider_uri: str, chain_id: int, log_file: str):
    """
    Checks (via EIP-165) whether an ERC1155 contract implements the metadata URI extension.
    """
    configure_logging(log_file, settings.app.log_level)

    try:
        supported = asyncio.run(_check(address, provider_uri, chain_id))
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(json.dumps({"address": address, "supports_uri_metadata": supported}))


async def _check(address: str, provider_uri: str, chain_id: int) -> bool:
    provider = get_contract_call_provider_from_uri(provider_uri, chain_id, settings.ethereum.rpc_timeout)
    try:
        return await ERC1155Standard(provider).contract_supports_uri_metadata_interface(address)
    finally:
        await provider.close()
