from __future__ import annotations

import asyncio
import dataclasses

import pytest

from renegade_cli.commands import context as context_module
from renegade_cli.commands.cli import CliArgs
from renegade_cli.commands.context import create_context, run_context
from renegade_cli.config.chains import resolve_chain_profile
from renegade_cli.errors import CLIError, ConfigError, ErrorCode
from renegade_cli.sdk.config import READ_ONLY_PUBLIC_KEY


def test_context_for_arbitrum_one(write_json, token_loader, tokens) -> None:
    path = write_json({"wallet_id": "w1", "blinder_seed": "b", "share_seed": "s", "symmetric_key": "k", "sk_match": "m"})

    ctx = asyncio.run(create_context(CliArgs(chain_id=42161, wallet_path=str(path)), token_loader=token_loader))

    profile = resolve_chain_profile(42161)
    assert ctx.chain_id == 42161
    assert ctx.dark_pool_address == profile.dark_pool_address
    assert ctx.http_url == profile.http_url
    assert ctx.websocket_url == profile.websocket_url
    assert ctx.secrets.wallet_id == "w1"
    assert ctx.token_mapping is tokens
    assert token_loader.calls == [profile.token_mapping_url]


def test_sdk_config_is_read_only(wallet_file, token_loader) -> None:
    ctx = run_context(CliArgs(chain_id=421614, wallet_path=str(wallet_file)), token_loader=token_loader)

    config = ctx.sdk_config
    assert config.relayer_url == resolve_chain_profile(421614).http_url
    assert config.wallet_id == "w1"
    assert config.symmetric_key == ctx.secrets.symmetric_key
    assert config.public_key == READ_ONLY_PUBLIC_KEY == "0x"
    with pytest.raises(CLIError) as excinfo:
        config.sign_message("hello")
    assert excinfo.value.code == ErrorCode.SDK_ERROR


def test_context_is_immutable(wallet_file, token_loader) -> None:
    ctx = run_context(CliArgs(chain_id=42161, wallet_path=str(wallet_file)), token_loader=token_loader)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.chain_id = 421614  # type: ignore[misc]


def test_unsupported_chain_fails_before_io(tmp_path, monkeypatch: pytest.MonkeyPatch, token_loader) -> None:
    def _unexpected(path):
        raise AssertionError("wallet file should not be read")

    monkeypatch.setattr(context_module, "load_wallet_secrets", _unexpected)

    with pytest.raises(ConfigError) as excinfo:
        run_context(CliArgs(chain_id=1, wallet_path=str(tmp_path / "missing.json")), token_loader=token_loader)

    assert excinfo.value.code == ErrorCode.CHAIN_CONFIG_ERROR
    assert token_loader.calls == []


def test_wallet_failure_propagates(tmp_path, token_loader) -> None:
    with pytest.raises(CLIError) as excinfo:
        run_context(CliArgs(chain_id=42161, wallet_path=str(tmp_path / "missing.json")), token_loader=token_loader)
    assert excinfo.value.code == ErrorCode.WALLET_NOT_FOUND


def _failing_loader(url: str, *, session=None):
    raise ConfigError(
        f"Failed to load token mapping from {url}",
        ErrorCode.TOKEN_MAPPING_ERROR,
        ["Check your internet connection"],
    )


def test_token_mapping_failure_propagates(wallet_file) -> None:
    with pytest.raises(CLIError) as excinfo:
        run_context(CliArgs(chain_id=42161, wallet_path=str(wallet_file)), token_loader=_failing_loader)
    assert excinfo.value.code == ErrorCode.TOKEN_MAPPING_ERROR
    assert resolve_chain_profile(42161).token_mapping_url in excinfo.value.message


def test_both_failures_surface_wallet_error(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="renegade_cli.commands.context"):
        with pytest.raises(CLIError) as excinfo:
            run_context(CliArgs(chain_id=42161, wallet_path=str(tmp_path / "missing.json")), token_loader=_failing_loader)

    assert excinfo.value.code == ErrorCode.WALLET_NOT_FOUND
    assert any("token mapping" in record.getMessage() for record in caplog.records)


def test_invalid_secrets_fail_assembly(write_json, token_loader) -> None:
    path = write_json({"wallet_id": "w1", "blinder_seed": "b", "share_seed": "s", "symmetric_key": "k"})
    with pytest.raises(CLIError) as excinfo:
        run_context(CliArgs(chain_id=42161, wallet_path=str(path)), token_loader=token_loader)
    assert excinfo.value.code == ErrorCode.INVALID_WALLET_FORMAT
    assert "sk_match" in excinfo.value.message
