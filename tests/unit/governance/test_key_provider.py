import pytest
from unittest.mock import AsyncMock, MagicMock
from eth_utils import to_checksum_address
from hexbytes import HexBytes

from config.settings import ContractSettings, EthereumSettings, Settings
from constants.system_contract_addresses import GOVERNANCE_ADDRESS, STAKING_ADDRESS
from governance.enums.proposal_status import ProposalStatus
from governance.models.event_filter_options import EventFilterOptions
from governance.providers.key_provider import KeyProvider
from governance.providers.pending_tx import PendingTx

TX_HASH = HexBytes("0x" + "cd" * 32)


def test_contract_handles_resolved_at_construction(key_provider):
    assert key_provider.governance_address == to_checksum_address(GOVERNANCE_ADDRESS)
    assert key_provider.staking_address == to_checksum_address(STAKING_ADDRESS)
    assert key_provider.governance_contract.name == "Governance"
    assert key_provider.deployer_proxy_contract.contract.address == key_provider.deployer_proxy_address
    assert key_provider.runtime_upgrade_contract.contract.address == key_provider.runtime_upgrade_address


def test_from_settings_uses_configured_addresses():
    settings = Settings(
        ethereum=EthereumSettings(PROVIDER_URI="http://node:8545", FROM_ADDRESS="0x" + "ab" * 20),
        contracts=ContractSettings(STAKING_ADDRESS="0x" + "12" * 20),
    )

    provider = KeyProvider.from_settings(settings)

    assert provider.staking_address == to_checksum_address("0x" + "12" * 20)
    assert provider.from_address == to_checksum_address("0x" + "ab" * 20)
    assert provider.w3.provider.endpoint_uri == "http://node:8545"


def test_from_settings_rejects_unsupported_scheme():
    with pytest.raises(ValueError, match="Unknown uri scheme"):
        KeyProvider.from_settings(Settings(), provider_uri="ftp://node")


@pytest.mark.asyncio
async def test_send_tx_defaults_value_to_zero(w3):
    provider = KeyProvider(w3, GOVERNANCE_ADDRESS, STAKING_ADDRESS, STAKING_ADDRESS, STAKING_ADDRESS,
                           from_address="0x" + "ab" * 20)
    provider.w3 = MagicMock()
    provider.w3.eth.send_transaction = AsyncMock(return_value=TX_HASH)

    pending_tx = await provider.send_tx(to=GOVERNANCE_ADDRESS, data="0x1234")

    assert isinstance(pending_tx, PendingTx)
    assert pending_tx.transaction_hash == "0x" + "cd" * 32
    provider.w3.eth.send_transaction.assert_awaited_once_with({
        "from": to_checksum_address("0x" + "ab" * 20),
        "to": to_checksum_address(GOVERNANCE_ADDRESS),
        "data": "0x1234",
        "value": 0,
    })


@pytest.mark.asyncio
async def test_send_tx_rejects_malformed_value(w3):
    provider = KeyProvider(w3, GOVERNANCE_ADDRESS, STAKING_ADDRESS, STAKING_ADDRESS, STAKING_ADDRESS,
                           from_address="0x" + "ab" * 20)
    provider.w3 = MagicMock()
    provider.w3.eth.send_transaction = AsyncMock(return_value=TX_HASH)

    with pytest.raises(ValueError):
        await provider.send_tx(to=GOVERNANCE_ADDRESS, data="0x", value="0xzz")

    provider.w3.eth.send_transaction.assert_not_awaited()


@pytest.mark.asyncio
async def test_send_tx_parses_hex_value(w3):
    provider = KeyProvider(w3, GOVERNANCE_ADDRESS, STAKING_ADDRESS, STAKING_ADDRESS, STAKING_ADDRESS,
                           from_address="0x" + "ab" * 20)
    provider.w3 = MagicMock()
    provider.w3.eth.send_transaction = AsyncMock(return_value=TX_HASH)

    await provider.send_tx(to=GOVERNANCE_ADDRESS, data="0x", value="0x0a")

    assert provider.w3.eth.send_transaction.await_args.args[0]["value"] == 10


@pytest.mark.asyncio
async def test_pending_tx_waits_only_when_asked():
    w3 = MagicMock()
    w3.eth.wait_for_transaction_receipt = AsyncMock(return_value={"status": 1})
    pending_tx = PendingTx(w3, TX_HASH)

    w3.eth.wait_for_transaction_receipt.assert_not_awaited()
    receipt = await pending_tx.wait_for_receipt(timeout=5)

    assert receipt == {"status": 1}
    w3.eth.wait_for_transaction_receipt.assert_awaited_once_with("0x" + "cd" * 32, timeout=5)


def test_proposal_status_ordinals():
    assert [ProposalStatus.from_code(code).value for code in range(8)] == [
        "Pending", "Active", "Canceled", "Defeated", "Succeeded", "Queued", "Expired", "Executed",
    ]
    with pytest.raises(ValueError):
        ProposalStatus.from_code(-1)


def test_event_filter_options_validation():
    assert EventFilterOptions().from_block == 0
    assert EventFilterOptions().to_block == "latest"
    with pytest.raises(ValueError):
        EventFilterOptions(from_block=20, to_block=10)
    with pytest.raises(ValueError):
        EventFilterOptions(from_block="yesterday")
