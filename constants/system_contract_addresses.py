# constants/system_contract_addresses.py

# Genesis-deployed system contracts of the application sidechain.
# The governance contract is the only caller allowed to mutate the other three,
# which is why every change to them goes through a proposal.
STAKING_ADDRESS = "0x0000000000000000000000000000000000001000"
GOVERNANCE_ADDRESS = "0x0000000000000000000000000000000000007002"
RUNTIME_UPGRADE_ADDRESS = "0x0000000000000000000000000000000000007004"
DEPLOYER_PROXY_ADDRESS = "0x0000000000000000000000000000000000007005"
