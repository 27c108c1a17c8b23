"""Client for the per-chain token mapping published by Renegade."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

import requests
from cachetools import TTLCache
from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..config.settings import RelayerConfig, get_app_config
from ..errors import ConfigError, ErrorCode
from ..monitoring.logger import get_logger

UNKNOWN_TICKER = "UNKNOWN"
DEFAULT_DECIMALS = 18

_MAPPING_CACHE: Optional[TTLCache[str, "TokenMapping"]] = None


def shared_mapping_cache(config: RelayerConfig) -> TTLCache[str, "TokenMapping"]:
    """Process-wide cache, sized on first use from ``token_mapping_cache_ttl_seconds``."""

    global _MAPPING_CACHE
    if _MAPPING_CACHE is None:
        _MAPPING_CACHE = TTLCache(maxsize=8, ttl=config.token_mapping_cache_ttl_seconds)
    return _MAPPING_CACHE


@dataclass(frozen=True, slots=True)
class Token:
    """ERC-20 token known to the relayer."""

    address: str
    ticker: str
    name: str
    decimals: int

    def format_amount(self, amount: int) -> str:
        value = Decimal(amount) / (Decimal(10) ** self.decimals)
        text = format(value.normalize(), "f") if value else "0"
        return text


class TokenMapping:
    """Address-indexed registry of tokens for one chain."""

    def __init__(self, tokens: Iterable[Token], *, source_url: str = "") -> None:
        self._by_address: Dict[str, Token] = {token.address.lower(): token for token in tokens}
        self._source_url = source_url

    def __len__(self) -> int:
        return len(self._by_address)

    @property
    def source_url(self) -> str:
        return self._source_url

    @property
    def tokens(self) -> List[Token]:
        return list(self._by_address.values())

    def get(self, address: str) -> Optional[Token]:
        return self._by_address.get(address.lower())

    def find_by_address(self, address: str) -> Token:
        """Return the token at ``address`` or a placeholder when it is unmapped."""

        token = self.get(address)
        if token is not None:
            return token
        return Token(address=address, ticker=UNKNOWN_TICKER, name=UNKNOWN_TICKER, decimals=DEFAULT_DECIMALS)

    @classmethod
    def from_payload(cls, payload: object, *, source_url: str = "") -> "TokenMapping":
        entries = payload.get("tokens") if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            raise ValueError("token mapping payload has no 'tokens' list")
        tokens: List[Token] = []
        for item in entries:
            if not isinstance(item, dict):
                continue
            address = item.get("address")
            if not address:
                continue
            try:
                tokens.append(
                    Token(
                        address=str(address),
                        ticker=str(item.get("ticker") or item.get("symbol") or UNKNOWN_TICKER),
                        name=str(item.get("name") or item.get("ticker") or ""),
                        decimals=int(item.get("decimals", DEFAULT_DECIMALS)),
                    )
                )
            except (TypeError, ValueError):
                continue
        return cls(tokens, source_url=source_url)


class TokenMappingClient:
    """Fetches token mappings over HTTP with retries and a TTL cache."""

    def __init__(
        self,
        config: Optional[RelayerConfig] = None,
        session: Optional[requests.Session] = None,
        *,
        retries: Optional[int] = None,
        backoff_seconds: float = 0.5,
        cache: Optional[TTLCache] = None,
    ) -> None:
        self._config = config or get_app_config().relayer
        self._session = session or requests.Session()
        self._retries = retries or self._config.token_mapping_retries
        self._backoff_seconds = backoff_seconds
        self._cache = cache if cache is not None else shared_mapping_cache(self._config)
        self._logger = get_logger(__name__)

    def _fetch(self, url: str) -> object:
        retrying = Retrying(
            stop=stop_after_attempt(self._retries),
            wait=wait_exponential(multiplier=self._backoff_seconds, max=5),
            retry=retry_if_exception_type(requests.RequestException),
        )
        for attempt in retrying:
            with attempt:
                response = self._session.get(
                    url,
                    timeout=self._config.http_timeout,
                    headers={"User-Agent": self._config.user_agent},
                )
                response.raise_for_status()
                return response.json()
        raise RuntimeError("unreachable")  # pragma: no cover

    def load(self, url: str) -> TokenMapping:
        if url in self._cache:
            return self._cache[url]
        try:
            payload = self._fetch(url)
            mapping = TokenMapping.from_payload(payload, source_url=url)
        except (RetryError, requests.RequestException, ValueError) as exc:
            cause = exc.last_attempt.exception() if isinstance(exc, RetryError) else exc
            self._logger.warning("Failed to load token mapping from %s: %s", url, cause)
            raise ConfigError(
                f"Failed to load token mapping from {url}: {cause}",
                ErrorCode.TOKEN_MAPPING_ERROR,
                [
                    "Check your internet connection",
                    f"Ensure {url} is reachable from this machine",
                ],
            ) from exc
        self._logger.debug("Loaded %d tokens from %s", len(mapping), url)
        self._cache[url] = mapping
        return mapping


def load_token_mapping(url: str, *, session: Optional[requests.Session] = None) -> TokenMapping:
    """Fetch the token mapping at ``url``; the URL is always passed explicitly."""

    return TokenMappingClient(session=session).load(url)


__all__ = [
    "Token",
    "TokenMapping",
    "TokenMappingClient",
    "UNKNOWN_TICKER",
    "load_token_mapping",
    "shared_mapping_cache",
]
