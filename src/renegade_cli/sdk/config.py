"""Configuration handle consumed by the relayer client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, NoReturn

from ..errors import ConfigError, ErrorCode

READ_ONLY_PUBLIC_KEY = "0x"


def refuse_to_sign(message: str) -> NoReturn:
    """Signing stub for the read-only CLI; it always raises."""

    raise ConfigError(
        "signMessage is not implemented: the CLI is read-only",
        ErrorCode.SDK_ERROR,
        ["Use the Renegade web app or SDK for operations that modify the wallet"],
    )


@dataclass(frozen=True, slots=True)
class ExternalKeyConfig:
    """Connection details and credentials for a wallet whose key is held elsewhere."""

    relayer_url: str
    websocket_url: str
    dark_pool_address: str
    wallet_id: str
    symmetric_key: str
    public_key: str = READ_ONLY_PUBLIC_KEY
    sign_message: Callable[[str], NoReturn] = field(default=refuse_to_sign, repr=False, compare=False)


def create_external_key_config(
    *,
    relayer_url: str,
    websocket_url: str,
    dark_pool_address: str,
    wallet_id: str,
    symmetric_key: str,
) -> ExternalKeyConfig:
    return ExternalKeyConfig(
        relayer_url=relayer_url.rstrip("/"),
        websocket_url=websocket_url,
        dark_pool_address=dark_pool_address,
        wallet_id=wallet_id,
        symmetric_key=symmetric_key,
    )


__all__ = ["ExternalKeyConfig", "READ_ONLY_PUBLIC_KEY", "create_external_key_config", "refuse_to_sign"]
