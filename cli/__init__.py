import click

from cli.check_erc1155_uri_support import check_erc1155_uri_support
from cli.get_erc20_token_details import get_erc20_token_details


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    pass


# ERC20 token details
cli.add_command(get_erc20_token_details, "get_erc20_token_details")

# ERC1155 metadata URI support
cli.add_command(check_erc1155_uri_support, "check_erc1155_uri_support")
