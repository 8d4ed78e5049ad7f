# --- DEPLOYER PROXY (Whitelist of accounts allowed to deploy contracts) ---
DEPLOYER_PROXY_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "isDeployer",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "addDeployer",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "removeDeployer",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
