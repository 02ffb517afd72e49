import asyncio
import json
from typing import Optional

import click

from assets.providers.provider_factory import get_contract_call_provider_from_uri
from assets.standards.erc20_standard import ERC20Standard
from config.settings import settings
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Get ERC20 Token Details CLI")


@click.command()
@click.option("-a", "--address", required=True, type=str, help="ERC20 contract address.")
@click.option("--owner", default=None, type=str, help="Account address to query the balance for.")
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
def get_erc20_token_details(address: str, owner: Optional[str], provider_uri: str, chain_id: int, log_file: str):
    """
    Prints the standard, symbol, decimals and (with --owner) balance of an ERC20 token as JSON.
    """
    configure_logging(log_file, settings.app.log_level)
    logger.info(f"Fetching ERC20 details for {address}")

    try:
        details = asyncio.run(_fetch_details(address, owner, provider_uri, chain_id))
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(json.dumps(details.model_dump(exclude_none=True), indent=2))


async def _fetch_details(address: str, owner: Optional[str], provider_uri: str, chain_id: int):
    provider = get_contract_call_provider_from_uri(provider_uri, chain_id, settings.ethereum.rpc_timeout)
    try:
        return await ERC20Standard(provider).get_details(address, owner)
    finally:
        await provider.close()
