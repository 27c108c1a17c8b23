"""Static network profiles for the supported Arbitrum chains."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ..errors import ConfigError, ErrorCode
from ..utils.constants import ARBITRUM_ONE, ARBITRUM_SEPOLIA, CHAIN_NAMES

TOKEN_MAPPING_BASE_URL = "https://raw.githubusercontent.com/renegade-fi/token-mappings/main"


@dataclass(frozen=True, slots=True)
class ChainProfile:
    """Relayer endpoints and contract address for one chain."""

    chain_id: int
    name: str
    http_url: str
    websocket_url: str
    dark_pool_address: str
    token_mapping_url: str


CHAIN_PROFILES: Mapping[int, ChainProfile] = MappingProxyType(
    {
        ARBITRUM_ONE: ChainProfile(
            chain_id=ARBITRUM_ONE,
            name=CHAIN_NAMES[ARBITRUM_ONE],
            http_url="https://mainnet.cluster0.renegade.fi:3000",
            websocket_url="wss://mainnet.cluster0.renegade.fi:4000",
            dark_pool_address="0x30bd8eab29181f790d7e495786d4b96d7afdc518",
            token_mapping_url=f"{TOKEN_MAPPING_BASE_URL}/arbitrum-one.json",
        ),
        ARBITRUM_SEPOLIA: ChainProfile(
            chain_id=ARBITRUM_SEPOLIA,
            name=CHAIN_NAMES[ARBITRUM_SEPOLIA],
            http_url="https://testnet.cluster0.renegade.fi:3000",
            websocket_url="wss://testnet.cluster0.renegade.fi:4000",
            dark_pool_address="0x9af58f1ff20ab22e819e40b57ffd784d115a9ef5",
            token_mapping_url=f"{TOKEN_MAPPING_BASE_URL}/arbitrum-sepolia.json",
        ),
    }
)

SUPPORTED_CHAIN_IDS: tuple[int, ...] = tuple(CHAIN_PROFILES)


def describe_supported_chains() -> str:
    return ", ".join(f"{chain_id} ({profile.name})" for chain_id, profile in CHAIN_PROFILES.items())


def _coerce_chain_id(chain_id: Any) -> int | None:
    if isinstance(chain_id, bool):
        return None
    if isinstance(chain_id, int):
        return chain_id
    if isinstance(chain_id, str) and chain_id.strip().isdigit():
        return int(chain_id.strip())
    return None


def is_supported_chain(chain_id: Any) -> bool:
    return _coerce_chain_id(chain_id) in CHAIN_PROFILES


def resolve_chain_profile(chain_id: Any) -> ChainProfile:
    """Return the profile for ``chain_id`` or raise ``CHAIN_CONFIG_ERROR``."""

    profile = CHAIN_PROFILES.get(_coerce_chain_id(chain_id))  # type: ignore[arg-type]
    if profile is None:
        supported = describe_supported_chains()
        raise ConfigError(
            f"Unsupported chain ID: {chain_id}. Supported chains: {supported}",
            ErrorCode.CHAIN_CONFIG_ERROR,
            [f"Use one of the supported chain IDs: {supported}"],
        )
    return profile


def chain_name(chain_id: Any) -> str:
    return resolve_chain_profile(chain_id).name


__all__ = [
    "CHAIN_PROFILES",
    "ChainProfile",
    "SUPPORTED_CHAIN_IDS",
    "chain_name",
    "describe_supported_chains",
    "is_supported_chain",
    "resolve_chain_profile",
]
