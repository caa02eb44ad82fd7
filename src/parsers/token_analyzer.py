"""Token analysis pipeline: fetch both providers in parallel, aggregate, classify."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from loguru import logger

from src.parsers.dexscreener.client import DexScreenerClient
from src.parsers.risk_classifier import RiskTier, classify
from src.parsers.rugcheck.client import RugcheckClient
from src.parsers.token_profile import TokenProfile, aggregate


@dataclass(frozen=True)
class TokenAnalysis:
    """Profile + tier for one token, with which upstream reports were present."""

    profile: TokenProfile
    tier: RiskTier
    risk_report_found: bool
    market_report_found: bool


class TokenAnalyzer:
    """Runs one analysis per call. Holds no state between calls besides its clients."""

    def __init__(self, rugcheck: RugcheckClient, dexscreener: DexScreenerClient) -> None:
        self._rugcheck = rugcheck
        self._dexscreener = dexscreener

    @classmethod
    def create(cls) -> TokenAnalyzer:
        """Build an analyzer with fresh provider clients from settings."""
        return cls(RugcheckClient(), DexScreenerClient())

    async def close(self) -> None:
        await asyncio.gather(self._rugcheck.close(), self._dexscreener.close())

    async def __aenter__(self) -> TokenAnalyzer:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def analyze(self, mint: str) -> TokenAnalysis:
        """Analyze a token mint.

        Provider failures come back as absent results and degrade the profile
        to neutral defaults; they never fail the analysis.
        """
        risk_result, market_result = await asyncio.gather(
            self._rugcheck.get_token_report(mint),
            self._dexscreener.get_primary_pair(mint),
        )

        profile = aggregate(risk_result.report, market_result.report)
        tier = classify(profile)

        if not risk_result.found:
            logger.info(f"[ANALYZER] {mint[:12]}: no risk report ({risk_result.reason}), tier unverified")
        logger.debug(
            f"[ANALYZER] {mint[:12]} {profile.symbol}: tier={tier.value} "
            f"score={profile.risk_score} findings={len(profile.findings)} "
            f"rugcheck={risk_result.found} dexscreener={market_result.found}"
        )

        return TokenAnalysis(
            profile=profile,
            tier=tier,
            risk_report_found=risk_result.found,
            market_report_found=market_result.found,
        )
