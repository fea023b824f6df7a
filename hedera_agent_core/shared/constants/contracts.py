from hedera_agent_core.shared.errors import ResolutionError
from hedera_agent_core.shared.utils import LedgerId

ERC20_FACTORY_ADDRESSES: dict[LedgerId, str] = {
    LedgerId.TESTNET: "0.0.6471814",
}

ERC721_FACTORY_ADDRESSES: dict[LedgerId, str] = {
    LedgerId.TESTNET: "0.0.6510666",
}

FACTORY_DEPLOY_GAS = 3_000_000
CONTRACT_CALL_GAS = 100_000

ERC20_FACTORY_FUNCTION_NAME = "deployToken"
ERC20_FACTORY_ABI = [
    {
        "type": "function",
        "name": "deployToken",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "name_", "type": "string"},
            {"name": "symbol_", "type": "string"},
            {"name": "decimals_", "type": "uint8"},
            {"name": "initialSupply_", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "address"}],
    }
]

ERC721_FACTORY_FUNCTION_NAME = "deployToken"
ERC721_FACTORY_ABI = [
    {
        "type": "function",
        "name": "deployToken",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "name_", "type": "string"},
            {"name": "symbol_", "type": "string"},
            {"name": "baseURI_", "type": "string"},
        ],
        "outputs": [{"name": "", "type": "address"}],
    }
]

ERC20_TRANSFER_FUNCTION_NAME = "transfer"
ERC20_TRANSFER_FUNCTION_ABI = [
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    }
]

ERC721_TRANSFER_FUNCTION_NAME = "transferFrom"
ERC721_TRANSFER_FUNCTION_ABI = [
    {
        "type": "function",
        "name": "transferFrom",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
    }
]

ERC721_MINT_FUNCTION_NAME = "safeMint"
ERC721_MINT_FUNCTION_ABI = [
    {
        "type": "function",
        "name": "safeMint",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "to", "type": "address"}],
        "outputs": [],
    }
]


def get_erc20_factory_address(ledger_id: LedgerId) -> str:
    address = ERC20_FACTORY_ADDRESSES.get(ledger_id)
    if not address:
        raise ResolutionError(f"Network type {ledger_id.value} not supported for ERC20 factory")
    return address


def get_erc721_factory_address(ledger_id: LedgerId) -> str:
    address = ERC721_FACTORY_ADDRESSES.get(ledger_id)
    if not address:
        raise ResolutionError(f"Network type {ledger_id.value} not supported for ERC721 factory")
    return address
