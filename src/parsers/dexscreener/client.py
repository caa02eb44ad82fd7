from __future__ import annotations

import httpx
from loguru import logger
from pydantic import ValidationError

from config.settings import settings
from src.parsers.dexscreener.models import DexScreenerPair
from src.parsers.fetch_result import FetchResult

SOURCE = "dexscreener"


class DexScreenerClient:
    """Async REST client for DexScreener public API (no auth required)."""

    def __init__(
        self,
        base_url: str | None = None,
        chain: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._chain = chain or settings.dexscreener_chain
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.dexscreener_base_url,
            timeout=timeout or settings.provider_timeout_sec,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> DexScreenerClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_primary_pair(self, token_address: str) -> FetchResult[DexScreenerPair]:
        """Get the first pair DexScreener lists for a token.

        DexScreener puts the most liquid pair first; that ordering is theirs.
        """
        try:
            response = await self._client.get(f"/tokens/v1/{self._chain}/{token_address}")
        except httpx.HTTPError as e:
            return _absent(token_address, f"{type(e).__name__}: {e}")

        if response.status_code != 200:
            return _absent(token_address, f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            return _absent(token_address, f"invalid JSON: {e}")

        if not isinstance(data, list):
            return _absent(token_address, f"unexpected payload type {type(data).__name__}")
        if not data:
            return _absent(token_address, "no pairs")

        try:
            pair = DexScreenerPair.model_validate(data[0])
        except ValidationError as e:
            return _absent(token_address, f"malformed pair: {e.error_count()} validation errors")

        return FetchResult.fetched(SOURCE, pair)


def _absent(token_address: str, reason: str) -> FetchResult[DexScreenerPair]:
    logger.warning(f"[DEXSCREENER] No pair for {token_address[:12]}: {reason}")
    return FetchResult.absent(SOURCE, reason)
