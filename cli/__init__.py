import click

from cli.execute import execute_proposal
from cli.proposals import get_proposals
from cli.propose import send_proposal
from cli.vote import vote_proposal
from cli.voting_powers import get_voting_powers


@click.group()
@click.version_option(version="1.0.0")
@click.pass_context
def cli(ctx):
    pass


# Read side
cli.add_command(get_voting_powers, "get_voting_powers")
cli.add_command(get_proposals, "get_proposals")

# Transactions
cli.add_command(send_proposal, "send_proposal")
cli.add_command(vote_proposal, "vote_proposal")
cli.add_command(execute_proposal, "execute_proposal")
