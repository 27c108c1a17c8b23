"""Minimal read-only client for the Renegade relayer."""

from .config import ExternalKeyConfig, create_external_key_config
from .relayer import RelayerClient
from .schemas import Balance, Order, OrderMetadata, Task, TaskInfo, Wallet
from .token_mapping import Token, TokenMapping, TokenMappingClient, load_token_mapping

__all__ = [
    "Balance",
    "ExternalKeyConfig",
    "Order",
    "OrderMetadata",
    "RelayerClient",
    "Task",
    "TaskInfo",
    "Token",
    "TokenMapping",
    "TokenMappingClient",
    "Wallet",
    "create_external_key_config",
    "load_token_mapping",
]
