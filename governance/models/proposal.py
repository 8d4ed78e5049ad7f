from typing import List

from pydantic import BaseModel, ConfigDict, Field

from governance.enums.proposal_status import ProposalStatus


class GovernanceProposal(BaseModel):
    """
    Read model rebuilt from a ProposalCreated event plus the current `state` of the proposal.
    Action fields are the raw event fields, kept in the order the contract emitted them.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: int
    status: ProposalStatus
    proposer: str
    targets: List[str] = Field(default_factory=list)
    values: List[int] = Field(default_factory=list)
    signatures: List[str] = Field(default_factory=list)
    inputs: List[str] = Field(default_factory=list)
    start_block: int
    end_block: int
    description: str = ""
