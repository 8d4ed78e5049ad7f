from typing import Dict, List, Optional

from web3 import Web3

from governance.enums.proposal_status import ProposalStatus
from governance.enums.vote_support import VoteSupport
from governance.models.event_filter_options import EventFilterOptions
from governance.models.proposal import GovernanceProposal
from governance.models.voting_power import VotingPower
from governance.proposal_builder import ProposalBuilder
from governance.providers.key_provider import KeyProvider
from governance.providers.pending_tx import PendingTx
from utils.formatter_utils import from_fixed_point, hex_to_bytes, parse_quantity, to_hex_data, to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Governance Client")

PROPOSAL_CREATED_EVENT = "ProposalCreated"


class GovernanceClient:
    """
    Creates, lists, votes on and executes proposals of the governance contract.
    Mutating calls return as soon as the node accepted the transaction.
    """

    def __init__(self, key_provider: KeyProvider):
        self._key_provider = key_provider

    @property
    def key_provider(self) -> KeyProvider:
        return self._key_provider

    def create_proposal(self, description: Optional[str] = None, voting_period: Optional[str] = None) -> ProposalBuilder:
        builder = ProposalBuilder(self._key_provider)
        if description:
            builder.set_description(description)
        if voting_period:
            builder.set_voting_period(voting_period)
        return builder

    async def get_voting_powers(self, validators: List[str]) -> Dict[str, VotingPower]:
        """
        Fetches the voting power of each validator next to the total voting supply,
        both scaled down from 18 decimals. One round trip per validator, in order.
        """
        governance = self._key_provider.governance_contract
        voting_supply = await governance.call("getVotingSupply")

        result: Dict[str, VotingPower] = {}
        for validator in validators:
            voting_power = await governance.call("getVotingPower", to_normalized_address(validator))
            result[validator] = VotingPower(
                voting_supply=from_fixed_point(voting_supply),
                voting_power=from_fixed_point(voting_power),
            )
        return result

    async def get_proposals(self, options: Optional[EventFilterOptions] = None) -> List[GovernanceProposal]:
        """
        Replays ProposalCreated events and resolves the current status of each proposal.
        Proposals come back in the order they were created.
        """
        options = options or EventFilterOptions()
        governance = self._key_provider.governance_contract

        events = await governance.get_past_events(
            PROPOSAL_CREATED_EVENT,
            from_block=options.from_block,
            to_block=options.to_block,
            argument_filters=options.argument_filters,
        )
        logger.info(f"Found {len(events)} {PROPOSAL_CREATED_EVENT} events in [{options.from_block}, {options.to_block}]")

        result: List[GovernanceProposal] = []
        for event in events:
            args = event["args"]
            state = await governance.call("state", args["proposalId"])
            result.append(
                GovernanceProposal(
                    id=args["proposalId"],
                    status=ProposalStatus.from_code(state),
                    proposer=args["proposer"],
                    targets=list(args["targets"]),
                    values=list(args["values"]),
                    signatures=list(args["signatures"]),
                    inputs=[to_hex_data(calldata) for calldata in args["calldatas"]],
                    start_block=args["startBlock"],
                    end_block=args["endBlock"],
                    description=args["description"],
                )
            )
        return result

    async def send_proposal(self, builder: ProposalBuilder) -> PendingTx:
        """
        Submits the builder's actions as one proposal.
        An empty action list is sent as is; the governance contract decides whether to accept it.
        """
        governance = self._key_provider.governance_contract
        targets = [action.target for action in builder.actions]
        values = [parse_quantity(action.value) for action in builder.actions]
        inputs = [hex_to_bytes(action.input_data) for action in builder.actions]
        description = builder.description or ""

        if builder.voting_period:
            voting_period = parse_quantity(builder.voting_period)
            data = governance.encode(
                "proposeWithCustomVotingPeriod", targets, values, inputs, description, voting_period
            )
        else:
            data = governance.encode("propose", targets, values, inputs, description)

        logger.info(f"Sending proposal with {len(builder.actions)} action(s)")
        return await self._key_provider.send_tx(to=self._key_provider.governance_address, data=data)

    async def vote_for_proposal(self, proposal_id: int) -> PendingTx:
        return await self._cast_vote(proposal_id, VoteSupport.FOR)

    async def vote_against_proposal(self, proposal_id: int) -> PendingTx:
        return await self._cast_vote(proposal_id, VoteSupport.AGAINST)

    async def execute_proposal(self, proposal: GovernanceProposal) -> PendingTx:
        """
        Executes a succeeded proposal. The contract identifies the proposal by
        its actions plus the keccak256 hash of the description, not the text itself.
        """
        description_hash = Web3.keccak(text=proposal.description)
        data = self._key_provider.governance_contract.encode(
            "execute",
            [to_normalized_address(target) for target in proposal.targets],
            [int(value) for value in proposal.values],
            [hex_to_bytes(calldata) for calldata in proposal.inputs],
            description_hash,
        )
        logger.info(f"Executing proposal {proposal.id}")
        return await self._key_provider.send_tx(to=self._key_provider.governance_address, data=data)

    async def _cast_vote(self, proposal_id: int, support: VoteSupport) -> PendingTx:
        data = self._key_provider.governance_contract.encode("castVote", int(proposal_id), int(support))
        logger.info(f"Voting {support.name} proposal {proposal_id}")
        return await self._key_provider.send_tx(to=self._key_provider.governance_address, data=data)
