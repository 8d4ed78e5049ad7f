from typing import Any, Dict, Optional

from web3 import AsyncWeb3

from abi.deployer_proxy_abi import DEPLOYER_PROXY_ABI
from abi.governance_abi import GOVERNANCE_ABI
from abi.runtime_upgrade_abi import RUNTIME_UPGRADE_ABI
from abi.staking_abi import STAKING_ABI
from config.settings import Settings
from governance.providers.contract_handle import ContractHandle
from governance.providers.pending_tx import PendingTx
from utils.formatter_utils import parse_quantity, to_normalized_address
from utils.logger_utils import get_logger
from utils.rpc_provider_utils import get_async_provider_from_uri

logger = get_logger("Key Provider")


class KeyProvider:
    """
    Access point to the chain for the governance client.

    All four system contract handles are resolved here, at construction time, so the
    builder and the client never deal with a missing handle. Signing is left to the
    node: transactions go out through `eth_sendTransaction` from an unlocked account.
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        governance_address: str,
        staking_address: str,
        deployer_proxy_address: str,
        runtime_upgrade_address: str,
        from_address: Optional[str] = None,
    ):
        self.w3 = w3
        self.from_address = to_normalized_address(from_address) if from_address else None

        self.governance_contract = ContractHandle(w3, governance_address, GOVERNANCE_ABI, "Governance")
        self.staking_contract = ContractHandle(w3, staking_address, STAKING_ABI, "Staking")
        self.deployer_proxy_contract = ContractHandle(w3, deployer_proxy_address, DEPLOYER_PROXY_ABI, "DeployerProxy")
        self.runtime_upgrade_contract = ContractHandle(
            w3, runtime_upgrade_address, RUNTIME_UPGRADE_ABI, "RuntimeUpgrade"
        )

    @classmethod
    def from_settings(cls, settings: Settings, provider_uri: Optional[str] = None) -> "KeyProvider":
        uri = provider_uri or settings.ethereum.provider_uri
        w3 = AsyncWeb3(get_async_provider_from_uri(uri, timeout=settings.ethereum.rpc_timeout))
        return cls(
            w3,
            governance_address=settings.contracts.governance_address,
            staking_address=settings.contracts.staking_address,
            deployer_proxy_address=settings.contracts.deployer_proxy_address,
            runtime_upgrade_address=settings.contracts.runtime_upgrade_address,
            from_address=settings.ethereum.from_address,
        )

    @property
    def governance_address(self) -> str:
        return self.governance_contract.address

    @property
    def staking_address(self) -> str:
        return self.staking_contract.address

    @property
    def deployer_proxy_address(self) -> str:
        return self.deployer_proxy_contract.address

    @property
    def runtime_upgrade_address(self) -> str:
        return self.runtime_upgrade_contract.address

    async def get_sender(self) -> str:
        if self.from_address:
            return self.from_address
        if self.w3.eth.default_account:
            return self.w3.eth.default_account
        accounts = await self.w3.eth.accounts
        if not accounts:
            raise ValueError("No sender configured and the node exposes no unlocked account")
        return accounts[0]

    async def send_tx(self, to: str, data: str, value: Optional[str] = None) -> PendingTx:
        """Submits `data` to `to`; value defaults to zero when omitted and a malformed value raises."""
        tx: Dict[str, Any] = {
            "from": await self.get_sender(),
            "to": to_normalized_address(to),
            "data": data,
            "value": parse_quantity(value) if value else 0,
        }
        tx_hash = await self.w3.eth.send_transaction(tx)
        pending_tx = PendingTx(self.w3, tx_hash)
        logger.info(f"Submitted transaction {pending_tx.transaction_hash} to {tx['to']}")
        return pending_tx

    async def close(self) -> None:
        provider = self.w3.provider
        if hasattr(provider, "disconnect"):
            await provider.disconnect()
