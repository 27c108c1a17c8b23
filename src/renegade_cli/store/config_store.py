"""On-disk store for the last-used wallet path and chain id."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.chains import describe_supported_chains, is_supported_chain
from ..config.settings import get_app_config
from ..errors import ConfigError, ErrorCode
from ..monitoring.logger import get_logger
from ..utils.constants import BINARY_NAME


@dataclass(frozen=True, slots=True)
class PersistedConfig:
    """Defaults remembered between invocations."""

    wallet_path: str
    chain_id: int

    def to_payload(self) -> Dict[str, Any]:
        return {"walletPath": self.wallet_path, "chainId": self.chain_id}

    @classmethod
    def from_payload(cls, payload: Any, *, source: Path) -> "PersistedConfig":
        if not isinstance(payload, dict):
            raise _malformed(source, "expected a JSON object")
        wallet_path = payload.get("walletPath")
        if not isinstance(wallet_path, str) or not wallet_path:
            raise _malformed(source, "missing 'walletPath'")
        chain_id = payload.get("chainId")
        if not is_supported_chain(chain_id):
            raise _malformed(
                source,
                f"unsupported 'chainId' {chain_id!r}; expected one of {describe_supported_chains()}",
            )
        return cls(wallet_path=wallet_path, chain_id=int(chain_id))


def _malformed(path: Path, detail: str) -> ConfigError:
    return ConfigError(
        f"Invalid configuration file {path}: {detail}",
        ErrorCode.CONFIG_READ_ERROR,
        [f"Run $ {BINARY_NAME} config reset followed by $ {BINARY_NAME} setup"],
    )


def default_config_path() -> Path:
    return get_app_config().storage.config_file


class ConfigStore:
    """Reads, writes and deletes the single persisted configuration file."""

    def __init__(self, path: Optional[Path | str] = None) -> None:
        self._path = Path(path).expanduser() if path is not None else default_config_path()
        self._logger = get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def _stat(self) -> Optional[os.stat_result]:
        try:
            return self._path.stat()
        except PermissionError as exc:
            raise ConfigError(
                f"Cannot access {self._path}",
                ErrorCode.INVALID_PERMISSIONS,
                ["Check if you have permission to open the configuration directory"],
            ) from exc
        except OSError:
            return None

    def exists(self) -> bool:
        info = self._stat()
        return info is not None and stat.S_ISREG(info.st_mode)

    def would_overwrite(self) -> bool:
        """Whether ``write`` would replace an existing configuration."""

        return self.exists()

    def read(self) -> Optional[PersistedConfig]:
        if self._stat() is None:
            return None
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except PermissionError as exc:
            raise ConfigError(
                f"Cannot read {self._path}",
                ErrorCode.INVALID_PERMISSIONS,
                ["Check if you have read permissions"],
            ) from exc
        except OSError as exc:
            raise ConfigError(
                f"Failed to read configuration at {self._path}: {exc.strerror or exc}",
                ErrorCode.CONFIG_READ_ERROR,
                [f"Ensure {self._path} is a regular, readable file"],
            ) from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(
                "Invalid configuration file format",
                ErrorCode.INVALID_JSON,
                ["Ensure the file contains valid JSON"],
            ) from exc
        try:
            payload = json.loads(content)
        except ValueError as exc:
            raise ConfigError(
                "Invalid configuration file format",
                ErrorCode.INVALID_JSON,
                ["Ensure the file contains valid JSON"],
            ) from exc
        config = PersistedConfig.from_payload(payload, source=self._path)
        self._logger.debug("Loaded configuration", extra={"config_path": str(self._path)})
        return config

    def _ensure_directory(self) -> Path:
        config_dir = self._path.parent
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(
                "Cannot create or write to config directory",
                ErrorCode.INVALID_PERMISSIONS,
                [f"Ensure you have write permissions to {config_dir}"],
            ) from exc
        if not os.access(config_dir, os.W_OK):
            raise ConfigError(
                f"Cannot write {config_dir}",
                ErrorCode.INVALID_PERMISSIONS,
                [f"Ensure you have write permissions to {config_dir}"],
            )
        return config_dir

    def write(self, config: PersistedConfig) -> None:
        config_dir = self._ensure_directory()
        serialized = json.dumps(config.to_payload(), indent=2)
        tmp_name: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=config_dir,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(serialized)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigError(
                "Failed to save configuration",
                ErrorCode.CONFIG_WRITE_ERROR,
                [f"Ensure you have write permissions to {self._path}"],
            ) from exc
        self._logger.info(
            "Saved configuration",
            extra={"config_path": str(self._path), "chain_id": config.chain_id},
        )

    def delete(self) -> None:
        if self._stat() is None:
            return
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise ConfigError(
                "Failed to delete configuration",
                ErrorCode.INVALID_PERMISSIONS,
                [f"Ensure you have write permissions to {self._path}"],
            ) from exc
        self._logger.info("Deleted configuration", extra={"config_path": str(self._path)})


__all__ = ["ConfigStore", "PersistedConfig", "default_config_path"]
