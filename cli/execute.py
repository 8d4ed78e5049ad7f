import asyncio

import click

from config.settings import settings
from governance.governance_client import GovernanceClient
from governance.models.event_filter_options import EventFilterOptions
from governance.providers.key_provider import KeyProvider
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Execute Proposal CLI")


@click.command()
@click.argument("proposal_id", type=int)
@click.option("-s", "--from-block", default=0, show_default=True, type=int,
              help="First block to scan when looking the proposal up.")
@click.option("-p", "--provider-uri", default=settings.ethereum.provider_uri, show_default=True, type=str,
              help="JSON-RPC URL of the chain node.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def execute_proposal(proposal_id: int, from_block: int, provider_uri: str, log_file: str):
    """
    Executes PROPOSAL_ID. The proposal actions are read back from its ProposalCreated event.
    """
    configure_logging(log_file, settings.app.log_level)

    try:
        tx_hash = asyncio.run(_execute(proposal_id, from_block, provider_uri))
    except LookupError as e:
        raise click.BadParameter(str(e), param_hint="PROPOSAL_ID")
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(tx_hash)


async def _execute(proposal_id: int, from_block: int, provider_uri: str) -> str:
    key_provider = KeyProvider.from_settings(settings, provider_uri)
    try:
        client = GovernanceClient(key_provider)
        proposals = await client.get_proposals(EventFilterOptions(from_block=from_block))
        proposal = next((p for p in proposals if p.id == proposal_id), None)
        if proposal is None:
            raise LookupError(f"Proposal {proposal_id} not found")
        logger.info(f"Proposal {proposal_id} is {proposal.status}")
        pending_tx = await client.execute_proposal(proposal)
        return pending_tx.transaction_hash
    finally:
        await key_provider.close()
