"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest


def _fake_response(status_code: int = 200, payload: object = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


@pytest.fixture
def make_response():
    """Factory for fake httpx.Response objects with a fixed status and JSON body."""
    return _fake_response


@pytest.fixture
def rugcheck_payload() -> dict:
    """Rugcheck /report response for a risky token."""
    return {
        "mint": "RiskyMint1111111111111111111111111111111111",
        "tokenMeta": {"name": "Risky Token", "symbol": "RISK", "uri": ""},
        "score": 6200,
        "rugged": False,
        "risks": [
            {"name": "Low Liquidity", "description": "Pool holds under $1k", "level": "danger", "score": 2000},
            {"name": "Mutable metadata", "description": "Metadata can be changed", "level": "warn", "score": 100},
            {"name": "Low amount of LP Providers", "description": "Few LPs", "level": "info", "score": 10},
        ],
        "markets": [
            {"marketType": "raydium", "lp": {"lpLockedUSD": 120.5, "lpUnlockedUSD": 800}},
        ],
        "topHolders": [
            {"address": "Holder1", "pct": 30, "insider": True},
            {"address": "Holder2", "pct": 25, "insider": False},
            {"address": "Holder3", "pct": 5, "insider": False},
        ],
        "mintAuthority": "AuthMint111",
        "freezeAuthority": None,
    }


@pytest.fixture
def dexscreener_payload() -> list:
    """DexScreener /tokens/v1 response: primary pair first."""
    return [
        {
            "chainId": "solana",
            "dexId": "raydium",
            "url": "https://dexscreener.com/solana/pair1",
            "pairAddress": "Pair1",
            "baseToken": {"address": "MarketMint", "name": "Market Token", "symbol": "MKT"},
            "quoteToken": {"address": "So11111111111111111111111111111111111111112", "name": "Wrapped SOL", "symbol": "SOL"},
            "priceNative": "0.00000002",
            "priceUsd": "0.0000034",
            "liquidity": {"usd": 50000, "base": 1000, "quote": 300},
            "fdv": 1200000,
            "marketCap": 1000000,
            "volume": {"h24": 200000, "h1": 5000},
            "priceChange": {"h1": 1.2, "h24": -12.5},
        },
        {
            "chainId": "solana",
            "dexId": "orca",
            "pairAddress": "Pair2",
            "baseToken": {"address": "MarketMint", "name": "Market Token", "symbol": "MKT"},
            "priceUsd": "0.0000035",
        },
    ]
