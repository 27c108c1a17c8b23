"""Authenticated read-only client for the Renegade relayer HTTP API."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import time
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..config.settings import RelayerConfig, get_app_config
from ..errors import CLIError, handle_sdk_error
from ..monitoring.logger import get_logger
from .config import ExternalKeyConfig
from .schemas import OrderMetadata, Task, Wallet

AUTH_HEADER = "x-renegade-auth"
EXPIRATION_HEADER = "x-renegade-auth-expiration"
RENEGADE_HEADER_PREFIX = "x-renegade"


def decode_symmetric_key(symmetric_key: str) -> bytes:
    text = symmetric_key.strip()
    if text.lower().startswith("0x"):
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError:
        pass
    try:
        return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("symmetric_key is neither hex nor base64 encoded") from exc


def sign_request(path: str, headers: Mapping[str, str], body: bytes, key: bytes) -> str:
    """HMAC-SHA256 over the path, the ``x-renegade-*`` headers and the body."""

    mac = hmac.new(key, digestmod=hashlib.sha256)
    mac.update(path.encode("utf-8"))
    renegade_headers = sorted(
        (name.lower(), value)
        for name, value in headers.items()
        if name.lower().startswith(RENEGADE_HEADER_PREFIX) and name.lower() != AUTH_HEADER
    )
    for name, value in renegade_headers:
        mac.update(name.encode("utf-8"))
        mac.update(value.encode("utf-8"))
    mac.update(body)
    return base64.b64encode(mac.digest()).decode("ascii").rstrip("=")


class RelayerClient:
    """Read operations against a wallet held by the relayer."""

    def __init__(
        self,
        config: ExternalKeyConfig,
        *,
        settings: Optional[RelayerConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._settings = settings or get_app_config().relayer
        self._session = session or requests.Session()
        self._logger = get_logger(__name__)

    def _auth_headers(self, path: str, body: bytes) -> Dict[str, str]:
        expiration = int(time.time() * 1000) + self._settings.auth_expiration_ms
        headers = {EXPIRATION_HEADER: str(expiration)}
        key = decode_symmetric_key(self._config.symmetric_key)
        headers[AUTH_HEADER] = sign_request(path, headers, body, key)
        return headers

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        pairs = [f"{key}={value}" for key, value in (params or {}).items() if value is not None]
        query = "?" + "&".join(pairs) if pairs else ""
        signed_path = f"{path}{query}"
        try:
            headers = {"User-Agent": self._settings.user_agent, **self._auth_headers(signed_path, b"")}
            response = self._session.get(
                f"{self._config.relayer_url}{signed_path}",
                headers=headers,
                timeout=self._settings.http_timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except CLIError:
            raise
        except (requests.RequestException, ValueError) as exc:
            self._logger.warning("Relayer request %s failed: %s", path, exc)
            raise handle_sdk_error(exc) from exc
        if not isinstance(payload, dict):
            raise handle_sdk_error(ValueError(f"unexpected response from {path}"))
        return payload

    def _wallet_path(self, suffix: str) -> str:
        return f"/v0/wallet/{self._config.wallet_id}/{suffix}"

    def get_back_of_queue_wallet(self, *, filter_defaults: bool = True) -> Wallet:
        payload = self._get(self._wallet_path("back-of-queue"))
        try:
            return Wallet.from_payload(payload.get("wallet") or {}, filter_defaults=filter_defaults)
        except (TypeError, ValueError) as exc:
            raise handle_sdk_error(exc) from exc

    def get_order_history(self, *, limit: Optional[int] = None) -> List[OrderMetadata]:
        payload = self._get(self._wallet_path("order-history"), {"limit": limit})
        try:
            orders = [OrderMetadata.from_payload(item) for item in payload.get("orders") or []]
        except (TypeError, ValueError) as exc:
            raise handle_sdk_error(exc) from exc
        return orders[:limit] if limit else orders

    def get_task_history(self, *, limit: Optional[int] = None) -> List[Task]:
        payload = self._get(self._wallet_path("task-history"), {"limit": limit})
        try:
            tasks = [Task.from_payload(item) for item in payload.get("tasks") or []]
        except (TypeError, ValueError) as exc:
            raise handle_sdk_error(exc) from exc
        return tasks[:limit] if limit else tasks


__all__ = ["AUTH_HEADER", "EXPIRATION_HEADER", "RelayerClient", "decode_symmetric_key", "sign_request"]
