import asyncio
import json
from typing import Tuple

import click

from config.settings import settings
from governance.governance_client import GovernanceClient
from governance.providers.key_provider import KeyProvider
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Get Voting Powers CLI")


@click.command()
@click.option(
    "-v",
    "--validator",
    "validators",
    required=True,
    multiple=True,
    type=str,
    help="Validator address. Repeat the option to query several validators.",
)
@click.option("-p", "--provider-uri", default=settings.ethereum.provider_uri, show_default=True, type=str,
              help="JSON-RPC URL of the chain node.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def get_voting_powers(validators: Tuple[str, ...], provider_uri: str, log_file: str):
    """
    Prints the voting power of each validator and the total voting supply.
    """
    configure_logging(log_file, settings.app.log_level)
    logger.info(f"Fetching voting powers for {len(validators)} validator(s)")

    try:
        voting_powers = asyncio.run(_fetch_voting_powers(list(validators), provider_uri))
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(json.dumps({k: v.model_dump() for k, v in voting_powers.items()}, indent=2))


async def _fetch_voting_powers(validators, provider_uri):
    key_provider = KeyProvider.from_settings(settings, provider_uri)
    try:
        return await GovernanceClient(key_provider).get_voting_powers(validators)
    finally:
        await key_provider.close()
