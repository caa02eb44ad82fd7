"""Rugcheck.xyz API client — free contract security analysis for Solana tokens."""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import ValidationError

from config.settings import settings
from src.parsers.fetch_result import FetchResult
from src.parsers.rugcheck.models import (
    RugcheckHolder,
    RugcheckMarket,
    RugcheckReport,
    RugcheckRisk,
)

SOURCE = "rugcheck"


class RugcheckClient:
    """Async HTTP client for Rugcheck.xyz (free, no API key).

    One GET per call, no retries: any failure resolves to an absent result.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self._base_url = (base_url or settings.rugcheck_base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.provider_timeout_sec,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RugcheckClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_token_report(self, mint: str) -> FetchResult[RugcheckReport]:
        """Fetch the full token report from Rugcheck."""
        url = f"{self._base_url}/tokens/{mint}/report"

        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as e:
            return _absent(mint, f"{type(e).__name__}: {e}")

        if resp.status_code != 200:
            return _absent(mint, f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            return _absent(mint, f"invalid JSON: {e}")

        if not isinstance(data, dict):
            return _absent(mint, f"unexpected payload type {type(data).__name__}")

        try:
            report = _parse_report(data, mint)
        except ValidationError as e:
            return _absent(mint, f"malformed report: {e.error_count()} validation errors")

        return FetchResult.fetched(SOURCE, report)


def _absent(mint: str, reason: str) -> FetchResult[RugcheckReport]:
    logger.warning(f"[RUGCHECK] No report for {mint[:12]}: {reason}")
    return FetchResult.absent(SOURCE, reason)


def _parse_report(data: dict, mint: str) -> RugcheckReport:
    """Parse raw JSON into RugcheckReport.

    Null lists and non-object entries are dropped rather than rejected.
    """
    risks = [
        RugcheckRisk(
            name=r.get("name") or "unknown",
            description=r.get("description") or "",
            level=r.get("level") or "info",
            score=r.get("score") or 0,
        )
        for r in _dicts(data.get("risks"))
    ]

    markets = []
    for m in _dicts(data.get("markets")):
        lp = m.get("lp") or {}
        markets.append(RugcheckMarket(
            market_type=m.get("marketType") or "",
            lp_locked_usd=lp.get("lpLockedUSD"),
            lp_unlocked_usd=lp.get("lpUnlockedUSD"),
        ))

    holders = [
        RugcheckHolder(
            address=h.get("address") or "",
            pct=h.get("pct") or 0,
            insider=bool(h.get("insider")),
        )
        for h in _dicts(data.get("topHolders"))
    ]

    token_meta = data.get("tokenMeta") or {}
    if not isinstance(token_meta, dict):
        token_meta = {}

    return RugcheckReport(
        mint=data.get("mint") or mint,
        token_name=token_meta.get("name") or "",
        token_symbol=token_meta.get("symbol") or "",
        score=data.get("score") or 0,
        rugged=bool(data.get("rugged")),
        risks=risks,
        markets=markets,
        top_holders=holders,
        mint_authority=data.get("mintAuthority") or None,
        freeze_authority=data.get("freezeAuthority") or None,
    )


def _dicts(value: object) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]
