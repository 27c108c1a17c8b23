"""Shared constants for the Renegade CLI."""

BINARY_NAME = "renegade"

SETUP_COMMAND = "setup"
CONFIG_COMMAND = "config"
WALLET_COMMAND = "wallet"
ORDER_HISTORY_COMMAND = "order-history"
TASK_HISTORY_COMMAND = "task-history"

ARBITRUM_ONE = 42161
ARBITRUM_SEPOLIA = 421614

CHAIN_NAMES: dict[int, str] = {
    ARBITRUM_ONE: "Arbitrum One",
    ARBITRUM_SEPOLIA: "Arbitrum Sepolia",
}

DEFAULT_CHAIN_ID = ARBITRUM_ONE
DEFAULT_WALLET_FILE = "wallet.json"

SETUP_DOCS_URL = (
    "https://docs.renegade.fi/technical-reference/typescript-sdk#generating-wallet-secrets"
)


__all__ = [
    "ARBITRUM_ONE",
    "ARBITRUM_SEPOLIA",
    "BINARY_NAME",
    "CHAIN_NAMES",
    "CONFIG_COMMAND",
    "DEFAULT_CHAIN_ID",
    "DEFAULT_WALLET_FILE",
    "ORDER_HISTORY_COMMAND",
    "SETUP_COMMAND",
    "SETUP_DOCS_URL",
    "TASK_HISTORY_COMMAND",
    "WALLET_COMMAND",
]
