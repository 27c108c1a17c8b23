from __future__ import annotations

from pathlib import Path

from renegade_cli.commands.cli import default_wallet_path, first_configured, resolve_cli_args
from renegade_cli.main import build_parser
from renegade_cli.store.config_store import PersistedConfig


def test_first_configured_skips_missing_values() -> None:
    assert first_configured(None, "", "persisted", default="default") == "persisted"
    assert first_configured(None, None, default="default") == "default"
    assert first_configured("explicit", "persisted", default="default") == "explicit"
    assert first_configured(0, 5) == 0


def test_explicit_arguments_win() -> None:
    persisted = PersistedConfig(wallet_path="/saved.json", chain_id=421614)
    args = resolve_cli_args(42161, "/explicit.json", persisted)
    assert args.chain_id == 42161
    assert args.wallet_path == "/explicit.json"


def test_persisted_config_fills_gaps() -> None:
    persisted = PersistedConfig(wallet_path="/saved.json", chain_id=421614)
    args = resolve_cli_args(None, None, persisted)
    assert args.chain_id == 421614
    assert args.wallet_path == "/saved.json"


def test_hard_defaults_without_config(tmp_path: Path) -> None:
    args = resolve_cli_args(None, None, None)
    assert args.chain_id == 42161
    assert args.wallet_path == default_wallet_path() == str(tmp_path / "wallet.json")


def test_global_options_accepted_before_or_after_command() -> None:
    parser = build_parser()
    before = parser.parse_args(["--chain-id", "421614", "wallet"])
    after = parser.parse_args(["wallet", "--chain-id", "421614", "--wallet-path", "/w.json"])
    neither = parser.parse_args(["wallet"])
    assert before.chain_id == 421614 and before.wallet_path is None
    assert after.chain_id == 421614 and after.wallet_path == "/w.json"
    assert neither.chain_id is None
