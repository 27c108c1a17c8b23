from __future__ import annotations

import pytest

from renegade_cli.config.chains import (
    CHAIN_PROFILES,
    SUPPORTED_CHAIN_IDS,
    chain_name,
    resolve_chain_profile,
)
from renegade_cli.errors import ConfigError, ErrorCode


@pytest.mark.parametrize("chain_id", [42161, 421614])
def test_supported_profiles_are_complete(chain_id: int) -> None:
    profile = resolve_chain_profile(chain_id)
    assert profile.chain_id == chain_id
    assert profile.http_url.startswith("https://")
    assert profile.websocket_url.startswith("wss://")
    assert profile.dark_pool_address.startswith("0x") and len(profile.dark_pool_address) == 42
    assert profile.token_mapping_url
    assert resolve_chain_profile(chain_id) is profile


def test_profiles_use_expected_hosts_and_ports() -> None:
    mainnet = resolve_chain_profile(42161)
    testnet = resolve_chain_profile(421614)
    assert mainnet.http_url.startswith("https://mainnet.") and mainnet.http_url.endswith(":3000")
    assert mainnet.websocket_url.startswith("wss://mainnet.") and mainnet.websocket_url.endswith(":4000")
    assert testnet.http_url.startswith("https://testnet.")
    assert chain_name(42161) == "Arbitrum One"
    assert chain_name(421614) == "Arbitrum Sepolia"


def test_exactly_two_profiles() -> None:
    assert SUPPORTED_CHAIN_IDS == (42161, 421614)
    with pytest.raises(TypeError):
        CHAIN_PROFILES[1] = CHAIN_PROFILES[42161]  # type: ignore[index]


def test_string_chain_id_accepted() -> None:
    assert resolve_chain_profile("421614").chain_id == 421614


@pytest.mark.parametrize("chain_id", [1, 0, -42161, 42162, True, None, "arbitrum"])
def test_unsupported_chain_fails_closed(chain_id) -> None:
    with pytest.raises(ConfigError) as excinfo:
        resolve_chain_profile(chain_id)
    error = excinfo.value
    assert error.code == ErrorCode.CHAIN_CONFIG_ERROR
    assert "42161" in error.message and "421614" in error.message
    assert "Arbitrum One" in error.message and "Arbitrum Sepolia" in error.message
