import asyncio

import click

from config.settings import settings
from governance.governance_client import GovernanceClient
from governance.providers.key_provider import KeyProvider
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Vote Proposal CLI")


@click.command()
@click.argument("proposal_id", type=int)
@click.option("--against", is_flag=True, default=False, help="Vote against the proposal instead of for it.")
@click.option("-p", "--provider-uri", default=settings.ethereum.provider_uri, show_default=True, type=str,
              help="JSON-RPC URL of the chain node.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def vote_proposal(proposal_id: int, against: bool, provider_uri: str, log_file: str):
    """
    Casts a vote on PROPOSAL_ID from the configured sender.
    """
    configure_logging(log_file, settings.app.log_level)

    try:
        tx_hash = asyncio.run(_vote(proposal_id, against, provider_uri))
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(tx_hash)


async def _vote(proposal_id: int, against: bool, provider_uri: str) -> str:
    key_provider = KeyProvider.from_settings(settings, provider_uri)
    try:
        client = GovernanceClient(key_provider)
        if against:
            pending_tx = await client.vote_against_proposal(proposal_id)
        else:
            pending_tx = await client.vote_for_proposal(proposal_id)
        return pending_tx.transaction_hash
    finally:
        await key_provider.close()
