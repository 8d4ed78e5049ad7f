from enum import Enum


class ProposalStatus(str, Enum):
    # Declaration order is the on-chain ordinal of IGovernor.ProposalState
    PENDING = "Pending"                 # 0
    ACTIVE = "Active"                   # 1
    CANCELED = "Canceled"               # 2
    DEFEATED = "Defeated"               # 3
    SUCCEEDED = "Succeeded"             # 4
    QUEUED = "Queued"                   # 5
    EXPIRED = "Expired"                 # 6
    EXECUTED = "Executed"               # 7

    @classmethod
    def from_code(cls, code: int) -> "ProposalStatus":
        """Maps the integer returned by `state(proposalId)` to a status."""
        members = list(cls)
        code = int(code)
        if not 0 <= code < len(members):
            raise ValueError(f"Unknown proposal state code: {code}")
        return members[code]
