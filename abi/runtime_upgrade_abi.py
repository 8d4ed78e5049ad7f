# --- RUNTIME UPGRADE (Replaces the bytecode of a system contract) ---
RUNTIME_UPGRADE_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "systemContractAddress", "type": "address"},
            {"internalType": "bytes", "name": "newByteCode", "type": "bytes"}
        ],
        "name": "upgradeSystemSmartContract",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
