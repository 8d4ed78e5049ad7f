from typing import Any, Dict, List, Optional

from governance.exceptions import AlreadyDeployer, AlreadyValidator, NotDeployer, NotValidator
from governance.models.action import GovernanceAction
from governance.providers.contract_handle import ContractHandle
from governance.providers.key_provider import KeyProvider
from utils.formatter_utils import ZERO_VALUE_HEX, hex_to_bytes, to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Proposal Builder")


class ProposalBuilder:
    """
    Accumulates the actions of one governance proposal.

    Every `add_*`/`remove_*` coroutine first reads the current state of the target contract
    and refuses actions that would be rejected or be a no-op, then appends the encoded call.
    Membership changes already queued in this builder are layered over the on-chain answer,
    so adding the same deployer twice fails even though the chain has not changed yet.
    The check is advisory: state can change before the proposal is executed, and the
    check and the append are not atomic, so a builder must have a single owner.

    Usage:
        builder = client.create_proposal("Onboard validator")
        await builder.add_validator(account)
        await builder.add_deployer(account)
        await client.send_proposal(builder)
    """

    def __init__(self, key_provider: KeyProvider):
        self._key_provider = key_provider
        self.actions: List[GovernanceAction] = []
        self.description: Optional[str] = None
        self.voting_period: Optional[str] = None
        # account -> membership once the queued actions are executed
        self._queued_deployers: Dict[str, bool] = {}
        self._queued_validators: Dict[str, bool] = {}

    def set_description(self, description: str) -> "ProposalBuilder":
        self.description = description
        return self

    def set_voting_period(self, voting_period: str) -> "ProposalBuilder":
        self.voting_period = voting_period
        return self

    async def add_deployer(self, account: str) -> "ProposalBuilder":
        account = to_normalized_address(account)
        if await self._is_deployer(account):
            raise AlreadyDeployer(account)
        self._append_action(self._key_provider.deployer_proxy_contract, "addDeployer", account)
        self._queued_deployers[account] = True
        return self

    async def remove_deployer(self, account: str) -> "ProposalBuilder":
        account = to_normalized_address(account)
        if not await self._is_deployer(account):
            raise NotDeployer(account)
        self._append_action(self._key_provider.deployer_proxy_contract, "removeDeployer", account)
        self._queued_deployers[account] = False
        return self

    async def add_validator(self, account: str) -> "ProposalBuilder":
        account = to_normalized_address(account)
        if await self._is_validator(account):
            raise AlreadyValidator(account)
        self._append_action(self._key_provider.staking_contract, "addValidator", account)
        self._queued_validators[account] = True
        return self

    async def remove_validator(self, account: str) -> "ProposalBuilder":
        account = await self._require_validator(account)
        self._append_action(self._key_provider.staking_contract, "removeValidator", account)
        self._queued_validators[account] = False
        return self

    async def activate_validator(self, account: str) -> "ProposalBuilder":
        account = await self._require_validator(account)
        self._append_action(self._key_provider.staking_contract, "activateValidator", account)
        return self

    async def disable_validator(self, account: str) -> "ProposalBuilder":
        account = await self._require_validator(account)
        self._append_action(self._key_provider.staking_contract, "disableValidator", account)
        return self

    async def upgrade_runtime(self, system_contract: str, byte_code: str) -> "ProposalBuilder":
        # No precondition: the runtime upgrade contract accepts any system contract bytecode
        self._append_action(
            self._key_provider.runtime_upgrade_contract,
            "upgradeSystemSmartContract",
            to_normalized_address(system_contract),
            hex_to_bytes(byte_code),
        )
        return self

    async def _is_deployer(self, account: str) -> bool:
        is_deployer = await self._key_provider.deployer_proxy_contract.call("isDeployer", account)
        return self._queued_deployers.get(account, is_deployer)

    async def _is_validator(self, account: str) -> bool:
        is_validator = await self._key_provider.staking_contract.call("isValidator", account)
        return self._queued_validators.get(account, is_validator)

    async def _require_validator(self, account: str) -> str:
        account = to_normalized_address(account)
        if not await self._is_validator(account):
            raise NotValidator(account)
        return account

    def _append_action(self, contract: ContractHandle, fn_name: str, *args: Any) -> None:
        action = GovernanceAction(
            target=contract.address,
            input_data=contract.encode(fn_name, *args),
            value=ZERO_VALUE_HEX,
        )
        self.actions.append(action)
        logger.info(f"Action #{len(self.actions)}: {contract.name}.{fn_name} queued")
