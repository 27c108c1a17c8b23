from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from renegade_cli.config import settings
from renegade_cli.sdk import token_mapping as token_mapping_module
from renegade_cli.sdk.token_mapping import Token, TokenMapping

WETH = "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1"
USDC = "0xaf88d065e77c8cC2239327C5EDb3A432268e5831"

VALID_SECRETS = {
    "wallet_id": "w1",
    "blinder_seed": "b",
    "share_seed": "s",
    "symmetric_key": "0x" + "11" * 32,
    "sk_match": "m",
}


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)  # type: ignore[arg-type]

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Records GET calls and serves canned responses keyed by URL suffix."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None) -> None:
        self.routes = routes or {}
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        for suffix, response in self.routes.items():
            if url.split("?")[0].endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                if isinstance(response, FakeResponse):
                    return response
                return FakeResponse(response)
        return FakeResponse({"error": "not found"}, status_code=404)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STORAGE__CONFIG_DIR", str(tmp_path / "config-home"))
    monkeypatch.delenv("RENEGADE_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("MONITORING__LOG_LEVEL", raising=False)
    settings.get_app_config.cache_clear()
    monkeypatch.setattr(token_mapping_module, "_MAPPING_CACHE", None)
    yield
    settings.get_app_config.cache_clear()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    def _write(payload: Any, name: str = "wallet.json") -> Path:
        path = tmp_path / name
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
        return path

    return _write


@pytest.fixture
def wallet_file(write_json) -> Path:
    return write_json(VALID_SECRETS)


@pytest.fixture
def tokens() -> TokenMapping:
    return TokenMapping(
        [
            Token(address=WETH, ticker="WETH", name="Wrapped Ether", decimals=18),
            Token(address=USDC, ticker="USDC", name="USD Coin", decimals=6),
        ],
        source_url="https://example.com/tokens.json",
    )


@pytest.fixture
def token_loader(tokens: TokenMapping):
    calls: List[str] = []

    def _load(url: str, *, session=None) -> TokenMapping:
        calls.append(url)
        return tokens

    _load.calls = calls  # type: ignore[attr-defined]
    return _load
