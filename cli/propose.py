import asyncio
from pathlib import Path
from typing import List, Optional, Tuple

import click

from config.settings import settings
from governance.exceptions import PreconditionError
from governance.governance_client import GovernanceClient
from governance.providers.key_provider import KeyProvider
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Send Proposal CLI")

# --action KIND -> builder coroutine
ACTION_METHODS = {
    "add-deployer": "add_deployer",
    "remove-deployer": "remove_deployer",
    "add-validator": "add_validator",
    "remove-validator": "remove_validator",
    "activate-validator": "activate_validator",
    "disable-validator": "disable_validator",
    "upgrade-runtime": "upgrade_runtime",
}


def parse_runtime_upgrade(value: str) -> Tuple[str, str]:
    """
    Parses 'SYSTEM_CONTRACT=BYTECODE_FILE' into the contract address and the hex bytecode
    read from the file.
    """
    system_contract, sep, bytecode_file = value.partition("=")
    if not sep or not system_contract or not bytecode_file:
        raise click.BadParameter(f"Expected SYSTEM_CONTRACT=BYTECODE_FILE, got '{value}'")
    try:
        byte_code = Path(bytecode_file).read_text().strip()
    except OSError as e:
        raise click.BadParameter(f"Cannot read bytecode file '{bytecode_file}': {e.strerror or e}")
    return system_contract.strip(), byte_code


def parse_actions(ctx, param, values: Tuple[str, ...]) -> List[Tuple[str, tuple]]:
    """
    Turns each 'KIND=ARG' value into a (builder method, args) step, keeping command line order.
    """
    steps = []
    for value in values:
        kind, sep, argument = value.partition("=")
        method = ACTION_METHODS.get(kind.strip())
        if not sep or not argument or method is None:
            raise click.BadParameter(
                f"Expected KIND=ARG with KIND one of {', '.join(ACTION_METHODS)}, got '{value}'",
                ctx=ctx, param=param,
            )
        if method == "upgrade_runtime":
            steps.append((method, parse_runtime_upgrade(argument)))
        else:
            steps.append((method, (argument.strip(),)))
    return steps


@click.command()
@click.option("-d", "--description", default=None, type=str, help="Free text describing the proposal.")
@click.option("--voting-period", default=None, type=str, help="Custom voting period in blocks, decimal or 0x-hex.")
@click.option("-a", "--action", "steps", multiple=True, type=str, callback=parse_actions,
              help="KIND=ARG, repeatable and queued in the given order. KIND is one of add-deployer, "
                   "remove-deployer, add-validator, remove-validator, activate-validator, disable-validator "
                   "(ARG is the account) or upgrade-runtime (ARG is SYSTEM_CONTRACT=BYTECODE_FILE).")
@click.option("-p", "--provider-uri", default=settings.ethereum.provider_uri, show_default=True, type=str,
              help="JSON-RPC URL of the chain node.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def send_proposal(
    description: Optional[str],
    voting_period: Optional[str],
    steps: List[Tuple[str, tuple]],
    provider_uri: str,
    log_file: str,
):
    """
    Builds a proposal from the given actions and submits it to the governance contract.
    """
    configure_logging(log_file, settings.app.log_level)

    if not steps:
        raise click.UsageError("At least one --action is required.")

    try:
        tx_hash = asyncio.run(_build_and_send(steps, description, voting_period, provider_uri))
    except PreconditionError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        logger.exception("An error occurred:")
        raise e

    click.echo(tx_hash)


async def _build_and_send(steps, description, voting_period, provider_uri) -> str:
    key_provider = KeyProvider.from_settings(settings, provider_uri)
    try:
        client = GovernanceClient(key_provider)
        builder = client.create_proposal(description, voting_period)
        for method, args in steps:
            await getattr(builder, method)(*args)
        pending_tx = await client.send_proposal(builder)
        return pending_tx.transaction_hash
    finally:
        await key_provider.close()
