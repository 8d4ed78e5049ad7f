import asyncio
import json

import click

from config.settings import settings
from governance.governance_client import GovernanceClient
from governance.models.event_filter_options import EventFilterOptions
from governance.providers.key_provider import KeyProvider
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Get Proposals CLI")


def parse_block(value: str):
    """Block numbers are passed as ints, tags like 'latest' as is."""
    return int(value) if value.isdigit() else value


@click.command()
@click.option("-s", "--from-block", default="0", show_default=True, type=str,
              help="First block to scan for ProposalCreated events (number or tag).")
@click.option("-e", "--to-block", default="latest", show_default=True, type=str,
              help="Last block to scan (number or tag).")
@click.option("-p", "--provider-uri", default=settings.ethereum.provider_uri, show_default=True, type=str,
              help="JSON-RPC URL of the chain node.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def get_proposals(from_block: str, to_block: str, provider_uri: str, log_file: str):
    """
    Lists governance proposals with their current status.
    """
    configure_logging(log_file, settings.app.log_level)

    try:
        options = EventFilterOptions(from_block=parse_block(from_block), to_block=parse_block(to_block))
    except ValueError as e:
        raise click.BadParameter(str(e))

    try:
        proposals = asyncio.run(_fetch_proposals(options, provider_uri))
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(json.dumps([proposal.model_dump() for proposal in proposals], indent=2))


async def _fetch_proposals(options: EventFilterOptions, provider_uri: str):
    key_provider = KeyProvider.from_settings(settings, provider_uri)
    try:
        return await GovernanceClient(key_provider).get_proposals(options)
    finally:
        await key_provider.close()
