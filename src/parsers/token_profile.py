"""Token profile aggregation: merge Rugcheck risk data with DexScreener market data.

Either report may be missing. Every field resolves through an ordered list of
(predicate, extractor) rules: the first rule whose predicate holds supplies
the value, otherwise the field falls back to a neutral default. The profile
is therefore always constructible, even with both reports absent.

Findings are emitted in a fixed order:
1. Rugcheck risks at "danger"/"warn" level, as "<name>: <description>"
2. Mint authority warning
3. Freeze authority warning
4. Top-10 holder concentration warning (> 50% of supply)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from src.parsers.dexscreener.models import DexScreenerPair
from src.parsers.rugcheck.models import RugcheckReport

ZERO = Decimal(0)

UNKNOWN_NAME = "Unknown"
UNKNOWN_SYMBOL = "UNKNOWN"

FINDING_LEVELS = frozenset({"danger", "warn"})
TOP_HOLDERS_COUNT = 10
CONCENTRATION_THRESHOLD_PCT = Decimal(50)
PCT_QUANTUM = Decimal("0.1")

MINT_AUTHORITY_FINDING = "Mint Authority enabled - Team can create unlimited tokens"
FREEZE_AUTHORITY_FINDING = "Freeze Authority enabled - Team can freeze your tokens"


@dataclass(frozen=True)
class TokenProfile:
    """Normalized view of a token built from both providers."""

    name: str = UNKNOWN_NAME
    symbol: str = UNKNOWN_SYMBOL
    price: Decimal = ZERO
    market_cap: Decimal = ZERO
    liquidity: Decimal = ZERO
    volume_24h: Decimal = ZERO
    price_change_24h: Decimal = ZERO
    risk_score: int = 0
    rugged: bool = False
    top_holder_concentration: Decimal = ZERO
    has_mint_authority: bool = False
    has_freeze_authority: bool = False
    findings: tuple[str, ...] = ()


@dataclass(frozen=True)
class _Sources:
    risk: RugcheckReport | None
    market: DexScreenerPair | None


Rule = tuple[Callable[[_Sources], bool], Callable[[_Sources], Any]]


def _resolve(rules: Sequence[Rule], sources: _Sources, default: Any) -> Any:
    for applies, extract in rules:
        if applies(sources):
            return extract(sources)
    return default


# --- predicates -------------------------------------------------------------

def _has_risk(s: _Sources) -> bool:
    return s.risk is not None


def _has_market(s: _Sources) -> bool:
    return s.market is not None


def _market_field(s: _Sources, group: str, key: str) -> Decimal | None:
    if s.market is None:
        return None
    section = getattr(s.market, group)
    return getattr(section, key) if section is not None else None


# --- field rules (first match wins) ----------------------------------------

NAME_RULES: tuple[Rule, ...] = (
    (lambda s: _has_risk(s) and bool(s.risk.token_name), lambda s: s.risk.token_name),
    (
        lambda s: _has_market(s) and s.market.baseToken is not None and bool(s.market.baseToken.name),
        lambda s: s.market.baseToken.name,
    ),
)

SYMBOL_RULES: tuple[Rule, ...] = (
    (lambda s: _has_risk(s) and bool(s.risk.token_symbol), lambda s: s.risk.token_symbol),
    (
        lambda s: _has_market(s) and s.market.baseToken is not None and bool(s.market.baseToken.symbol),
        lambda s: s.market.baseToken.symbol,
    ),
)

PRICE_RULES: tuple[Rule, ...] = (
    (lambda s: _has_market(s) and bool(s.market.priceUsd), lambda s: parse_price(s.market.priceUsd)),
)

MARKET_CAP_RULES: tuple[Rule, ...] = (
    (lambda s: _has_market(s) and s.market.marketCap is not None, lambda s: s.market.marketCap),
    (lambda s: _has_market(s) and s.market.fdv is not None, lambda s: s.market.fdv),
)

LIQUIDITY_RULES: tuple[Rule, ...] = (
    (
        lambda s: _market_field(s, "liquidity", "usd") is not None,
        lambda s: _market_field(s, "liquidity", "usd"),
    ),
)

VOLUME_24H_RULES: tuple[Rule, ...] = (
    (
        lambda s: _market_field(s, "volume", "h24") is not None,
        lambda s: _market_field(s, "volume", "h24"),
    ),
)

PRICE_CHANGE_24H_RULES: tuple[Rule, ...] = (
    (
        lambda s: _market_field(s, "priceChange", "h24") is not None,
        lambda s: _market_field(s, "priceChange", "h24"),
    ),
)

RISK_SCORE_RULES: tuple[Rule, ...] = ((_has_risk, lambda s: s.risk.score),)

RUGGED_RULES: tuple[Rule, ...] = ((_has_risk, lambda s: s.risk.rugged),)

CONCENTRATION_RULES: tuple[Rule, ...] = (
    (lambda s: _has_risk(s) and bool(s.risk.top_holders), lambda s: top_holder_concentration(s.risk)),
)

MINT_AUTHORITY_RULES: tuple[Rule, ...] = (
    (lambda s: _has_risk(s) and bool(s.risk.mint_authority), lambda s: True),
)

FREEZE_AUTHORITY_RULES: tuple[Rule, ...] = (
    (lambda s: _has_risk(s) and bool(s.risk.freeze_authority), lambda s: True),
)


def parse_price(raw: str | None) -> Decimal:
    """Parse DexScreener's priceUsd string. Unusable values become 0."""
    if not raw:
        return ZERO
    try:
        price = Decimal(raw.strip())
    except InvalidOperation:
        return ZERO
    if not price.is_finite() or price < 0:
        return ZERO
    return price


def top_holder_concentration(report: RugcheckReport) -> Decimal:
    """Sum of supply % held by the first 10 holders, in the order Rugcheck lists them."""
    return sum((h.pct for h in report.top_holders[:TOP_HOLDERS_COUNT]), ZERO)


def format_pct(value: Decimal) -> str:
    """One decimal place, ties rounded away from zero (50.25 -> "50.3")."""
    return str(value.quantize(PCT_QUANTUM, rounding=ROUND_HALF_UP))


def _derive_findings(
    risk: RugcheckReport | None,
    has_mint_authority: bool,
    has_freeze_authority: bool,
    concentration: Decimal,
) -> tuple[str, ...]:
    findings: list[str] = []

    if risk is not None:
        for r in risk.risks:
            if r.level in FINDING_LEVELS:
                findings.append(f"{r.name}: {r.description}")

    if has_mint_authority:
        findings.append(MINT_AUTHORITY_FINDING)
    if has_freeze_authority:
        findings.append(FREEZE_AUTHORITY_FINDING)

    if concentration > CONCENTRATION_THRESHOLD_PCT:
        findings.append(f"Top 10 holders own {format_pct(concentration)}% of supply")

    return tuple(findings)


def aggregate(
    risk: RugcheckReport | None,
    market: DexScreenerPair | None,
) -> TokenProfile:
    """Merge the two (optional) reports into one TokenProfile. Never fails on missing data."""
    sources = _Sources(risk=risk, market=market)

    has_mint = _resolve(MINT_AUTHORITY_RULES, sources, False)
    has_freeze = _resolve(FREEZE_AUTHORITY_RULES, sources, False)
    concentration = _resolve(CONCENTRATION_RULES, sources, ZERO)

    return TokenProfile(
        name=_resolve(NAME_RULES, sources, UNKNOWN_NAME),
        symbol=_resolve(SYMBOL_RULES, sources, UNKNOWN_SYMBOL),
        price=_resolve(PRICE_RULES, sources, ZERO),
        market_cap=_resolve(MARKET_CAP_RULES, sources, ZERO),
        liquidity=_resolve(LIQUIDITY_RULES, sources, ZERO),
        volume_24h=_resolve(VOLUME_24H_RULES, sources, ZERO),
        price_change_24h=_resolve(PRICE_CHANGE_24H_RULES, sources, ZERO),
        risk_score=_resolve(RISK_SCORE_RULES, sources, 0),
        rugged=_resolve(RUGGED_RULES, sources, False),
        top_holder_concentration=concentration,
        has_mint_authority=has_mint,
        has_freeze_authority=has_freeze,
        findings=_derive_findings(risk, has_mint, has_freeze, concentration),
    )
