import pytest
from unittest.mock import AsyncMock
from web3 import AsyncHTTPProvider, AsyncWeb3

from constants.system_contract_addresses import (
    DEPLOYER_PROXY_ADDRESS,
    GOVERNANCE_ADDRESS,
    RUNTIME_UPGRADE_ADDRESS,
    STAKING_ADDRESS,
)
from governance.providers.key_provider import KeyProvider
from governance.providers.pending_tx import PendingTx

SENDER = "0x1111111111111111111111111111111111111111"
TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def w3():
    # Never connected: handles only encode/decode, remote calls are mocked per test
    return AsyncWeb3(AsyncHTTPProvider("http://127.0.0.1:8545"))


@pytest.fixture
def key_provider(w3):
    provider = KeyProvider(
        w3,
        governance_address=GOVERNANCE_ADDRESS,
        staking_address=STAKING_ADDRESS,
        deployer_proxy_address=DEPLOYER_PROXY_ADDRESS,
        runtime_upgrade_address=RUNTIME_UPGRADE_ADDRESS,
        from_address=SENDER,
    )
    provider.send_tx = AsyncMock(return_value=PendingTx(w3, TX_HASH))
    return provider
