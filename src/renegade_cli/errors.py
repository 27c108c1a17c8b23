"""Structured error taxonomy shared by every CLI command."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from .utils.constants import BINARY_NAME


class ErrorCode(str, Enum):
    """Closed set of failure kinds surfaced to the user."""

    # Persisted configuration and wallet files
    CONFIG_WRITE_ERROR = "CONFIG_WRITE_ERROR"
    CONFIG_READ_ERROR = "CONFIG_READ_ERROR"
    WALLET_NOT_FOUND = "WALLET_NOT_FOUND"
    INVALID_JSON = "INVALID_JSON"
    INVALID_PERMISSIONS = "INVALID_PERMISSIONS"
    # Context assembly
    TOKEN_MAPPING_ERROR = "TOKEN_MAPPING_ERROR"
    INVALID_WALLET_FORMAT = "INVALID_WALLET_FORMAT"
    CHAIN_CONFIG_ERROR = "CHAIN_CONFIG_ERROR"
    # Relayer client
    SDK_ERROR = "SDK_ERROR"


class CLIError(RuntimeError):
    """Base error carrying a code and actionable suggestions."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        suggestions: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestions: List[str] = list(suggestions or [])

    def __str__(self) -> str:
        if not self.suggestions:
            return self.message
        lines = [self.message, "", "Suggestions:"]
        lines.extend(f"- {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)


class ConfigError(CLIError):
    """Raised for configuration, chain and token-mapping failures."""


class WalletError(CLIError):
    """Raised when the wallet secrets file is missing or malformed."""


def handle_sdk_error(error: BaseException) -> CLIError:
    """Wrap a relayer client failure into an ``SDK_ERROR``."""

    if isinstance(error, CLIError):
        return error
    message = str(error) or "Unknown error occurred"
    return ConfigError(
        f"SDK Error: {message}",
        ErrorCode.SDK_ERROR,
        [
            "Ensure your wallet secrets file and chain id are properly configured "
            f"using $ {BINARY_NAME} config view"
        ],
    )


__all__ = ["CLIError", "ConfigError", "ErrorCode", "WalletError", "handle_sdk_error"]
