"""Assembly of the per-invocation execution context."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional, cast

import requests

from ..config.chains import resolve_chain_profile
from ..monitoring.logger import get_logger
from ..sdk.config import ExternalKeyConfig, create_external_key_config
from ..sdk.token_mapping import TokenMapping, load_token_mapping
from ..wallet.secrets import WalletSecrets, load_wallet_secrets
from .cli import CliArgs

TokenLoader = Callable[..., TokenMapping]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Everything a read command needs, fully validated."""

    chain_id: int
    http_url: str
    websocket_url: str
    dark_pool_address: str
    secrets: WalletSecrets
    sdk_config: ExternalKeyConfig
    token_mapping: TokenMapping


async def create_context(
    args: CliArgs,
    *,
    token_loader: TokenLoader = load_token_mapping,
    session: Optional[requests.Session] = None,
) -> ExecutionContext:
    """Resolve the chain, load secrets and tokens, and build the SDK handle.

    The chain lookup runs first so an unsupported chain fails before any file or
    network access. Secret loading and the token-mapping fetch then run
    concurrently; the first failure (wallet before token mapping) is raised.
    """

    profile = resolve_chain_profile(args.chain_id)

    results = await asyncio.gather(
        asyncio.to_thread(load_wallet_secrets, args.wallet_path),
        asyncio.to_thread(token_loader, profile.token_mapping_url, session=session),
        return_exceptions=True,
    )
    secrets_result, mapping_result = results
    failures = [result for result in results if isinstance(result, BaseException)]
    if failures:
        for other in failures[1:]:
            logger.warning("Context assembly also failed: %s", other, extra={"chain_id": profile.chain_id})
        raise failures[0]
    secrets = cast(WalletSecrets, secrets_result)
    token_mapping = cast(TokenMapping, mapping_result)

    sdk_config = create_external_key_config(
        relayer_url=profile.http_url,
        websocket_url=profile.websocket_url,
        dark_pool_address=profile.dark_pool_address,
        wallet_id=secrets.wallet_id,
        symmetric_key=secrets.symmetric_key,
    )
    logger.info(
        "Execution context ready",
        extra={"chain_id": profile.chain_id, "wallet_id": secrets.wallet_id},
    )
    return ExecutionContext(
        chain_id=profile.chain_id,
        http_url=profile.http_url,
        websocket_url=profile.websocket_url,
        dark_pool_address=profile.dark_pool_address,
        secrets=secrets,
        sdk_config=sdk_config,
        token_mapping=token_mapping,
    )


def run_context(args: CliArgs, **kwargs) -> ExecutionContext:
    return asyncio.run(create_context(args, **kwargs))


__all__ = ["ExecutionContext", "TokenLoader", "create_context", "run_context"]
