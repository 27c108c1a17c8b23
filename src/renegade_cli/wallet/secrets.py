"""Loading and validation of Renegade wallet secret files."""

from __future__ import annotations

import json
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from ..errors import ErrorCode, WalletError
from ..monitoring.logger import get_logger

REQUIRED_SECRET_FIELDS: Tuple[str, ...] = (
    "wallet_id",
    "blinder_seed",
    "share_seed",
    "symmetric_key",
    "sk_match",
)

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class WalletSecrets:
    """Read-only key material identifying a wallet on the relayer."""

    wallet_id: str
    blinder_seed: str
    share_seed: str
    symmetric_key: str
    sk_match: str
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def as_dict(self) -> dict[str, Any]:
        payload = dict(self.extras)
        payload.update({name: getattr(self, name) for name in REQUIRED_SECRET_FIELDS})
        return payload


def _read_wallet_file(path: Path) -> str:
    try:
        info = path.stat()
    except PermissionError as exc:
        raise WalletError(
            f"Cannot access {path}",
            ErrorCode.INVALID_PERMISSIONS,
            ["Check if you have permission to open the directories leading to the wallet file"],
        ) from exc
    except OSError:
        info = None
    if info is None:
        raise WalletError(
            f"No valid wallet file found at {path}",
            ErrorCode.WALLET_NOT_FOUND,
            [f"Ensure the file exists at {path}", "Try using an absolute path"],
        )
    if stat.S_ISDIR(info.st_mode):
        raise WalletError(
            f"Wallet path {path} is a directory",
            ErrorCode.WALLET_NOT_FOUND,
            ["Point --wallet-path at the wallet secrets JSON file itself"],
        )
    if not os.access(path, os.R_OK):
        raise WalletError(
            f"Cannot read {path}",
            ErrorCode.INVALID_PERMISSIONS,
            ["Check if you have read permissions"],
        )
    try:
        with path.open("r", encoding="utf-8") as fh:
            return fh.read()
    except PermissionError as exc:
        raise WalletError(
            f"Cannot read {path}",
            ErrorCode.INVALID_PERMISSIONS,
            ["Check if you have read permissions"],
        ) from exc
    except UnicodeDecodeError as exc:
        raise WalletError(
            f"Wallet file at {path} is not valid JSON",
            ErrorCode.INVALID_JSON,
            ["Ensure the file contains valid JSON"],
        ) from exc


def _parse_wallet_file(path: Path) -> Any:
    content = _read_wallet_file(path)
    try:
        return json.loads(content)
    except ValueError as exc:
        raise WalletError(
            f"Wallet file at {path} is not valid JSON",
            ErrorCode.INVALID_JSON,
            ["Ensure the file contains valid JSON"],
        ) from exc


def validate_wallet_path(path: Path | str) -> None:
    """Check that ``path`` exists, is readable and holds JSON.

    Field contents are not inspected, so the setup flow can run this before the
    user has finished generating their secrets.
    """

    _parse_wallet_file(Path(path).expanduser())


def load_wallet_secrets(path: Path | str) -> WalletSecrets:
    """Read ``path`` and return its secrets, failing on the first missing field."""

    resolved = Path(path).expanduser()
    data = _parse_wallet_file(resolved)
    if not isinstance(data, dict):
        raise WalletError(
            f"Wallet file at {resolved} must contain a JSON object",
            ErrorCode.INVALID_WALLET_FORMAT,
            ["Ensure your wallet file is valid JSON and contains the required secrets"],
        )
    for name in REQUIRED_SECRET_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value:
            raise WalletError(
                f"Wallet file at {resolved} is missing required field '{name}'",
                ErrorCode.INVALID_WALLET_FORMAT,
                [
                    f"Add a non-empty '{name}' string to the wallet file",
                    "Regenerate your wallet secrets following the setup instructions",
                ],
            )
    extras = {key: value for key, value in data.items() if key not in REQUIRED_SECRET_FIELDS}
    logger.debug("Loaded wallet secrets", extra={"wallet_path": str(resolved)})
    return WalletSecrets(
        wallet_id=data["wallet_id"],
        blinder_seed=data["blinder_seed"],
        share_seed=data["share_seed"],
        symmetric_key=data["symmetric_key"],
        sk_match=data["sk_match"],
        extras=MappingProxyType(extras),
    )


__all__ = [
    "REQUIRED_SECRET_FIELDS",
    "WalletSecrets",
    "load_wallet_secrets",
    "validate_wallet_path",
]
