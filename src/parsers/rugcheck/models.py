"""Pydantic models for Rugcheck.xyz API responses."""

from decimal import Decimal

from pydantic import BaseModel


class RugcheckRisk(BaseModel):
    """Individual risk detected by Rugcheck."""

    name: str
    description: str = ""
    level: str = "info"  # "warn", "danger", "info"
    score: int = 0


class RugcheckMarket(BaseModel):
    """Liquidity market (pool) listed in the report."""

    market_type: str = ""
    lp_locked_usd: Decimal | None = None
    lp_unlocked_usd: Decimal | None = None


class RugcheckHolder(BaseModel):
    """Top holder entry. pct is percent of supply (0-100)."""

    address: str = ""
    pct: Decimal = Decimal(0)
    insider: bool = False


class RugcheckReport(BaseModel):
    """Full token report from Rugcheck.xyz.

    score: 0 = safest, up to ~10000 for the most dangerous tokens.
    top_holders: as ordered by Rugcheck (not re-sorted here).
    mint_authority / freeze_authority: None when revoked.
    """

    mint: str = ""
    token_name: str = ""
    token_symbol: str = ""
    score: int = 0
    rugged: bool = False
    risks: list[RugcheckRisk] = []
    markets: list[RugcheckMarket] = []
    top_holders: list[RugcheckHolder] = []
    mint_authority: str | None = None
    freeze_authority: str | None = None
