"""Tests for TokenProfile aggregation: source precedence, defaults, findings."""

from decimal import Decimal

import pytest

from src.parsers.dexscreener.models import (
    DexScreenerLiquidity,
    DexScreenerPair,
    DexScreenerPriceChange,
    DexScreenerToken,
    DexScreenerVolume,
)
from src.parsers.rugcheck.models import RugcheckHolder, RugcheckReport, RugcheckRisk
from src.parsers.token_profile import (
    FREEZE_AUTHORITY_FINDING,
    MINT_AUTHORITY_FINDING,
    TokenProfile,
    aggregate,
    format_pct,
    parse_price,
)


def _risk(**kwargs) -> RugcheckReport:
    defaults = {"token_name": "Risk Name", "token_symbol": "RSK", "score": 1200}
    defaults.update(kwargs)
    return RugcheckReport(**defaults)


def _market(**kwargs) -> DexScreenerPair:
    defaults = {
        "baseToken": DexScreenerToken(address="M", name="Market Name", symbol="MKT"),
        "priceUsd": "0.0000034",
        "marketCap": Decimal("1000000"),
        "fdv": Decimal("1500000"),
        "liquidity": DexScreenerLiquidity(usd=Decimal("50000")),
        "volume": DexScreenerVolume(h24=Decimal("200000")),
        "priceChange": DexScreenerPriceChange(h24=Decimal("-12.5")),
    }
    defaults.update(kwargs)
    return DexScreenerPair(**defaults)


def _holders(*pcts) -> list[RugcheckHolder]:
    return [RugcheckHolder(address=f"H{i}", pct=Decimal(str(p))) for i, p in enumerate(pcts)]


class TestPresenceCombinations:
    @pytest.mark.parametrize("with_risk", [True, False])
    @pytest.mark.parametrize("with_market", [True, False])
    def test_profile_always_complete(self, with_risk: bool, with_market: bool) -> None:
        profile = aggregate(_risk() if with_risk else None, _market() if with_market else None)

        assert isinstance(profile, TokenProfile)
        for value in vars(profile).values():
            assert value is not None
        assert isinstance(profile.price, Decimal)
        assert isinstance(profile.findings, tuple)

    def test_both_absent_uses_neutral_defaults(self) -> None:
        profile = aggregate(None, None)

        assert profile == TokenProfile()
        assert profile.name == "Unknown"
        assert profile.symbol == "UNKNOWN"
        assert profile.price == 0
        assert profile.market_cap == 0
        assert profile.risk_score == 0
        assert profile.rugged is False
        assert profile.top_holder_concentration == 0
        assert profile.findings == ()

    def test_profile_is_immutable(self) -> None:
        profile = aggregate(None, None)
        with pytest.raises(AttributeError):
            profile.risk_score = 9000  # type: ignore[misc]


class TestFieldPrecedence:
    def test_name_symbol_prefer_risk_report(self) -> None:
        profile = aggregate(_risk(), _market())
        assert (profile.name, profile.symbol) == ("Risk Name", "RSK")

    def test_empty_risk_meta_falls_back_to_market(self) -> None:
        profile = aggregate(_risk(token_name="", token_symbol=""), _market())
        assert (profile.name, profile.symbol) == ("Market Name", "MKT")

    def test_market_without_base_token_falls_back_to_unknown(self) -> None:
        profile = aggregate(None, _market(baseToken=None))
        assert (profile.name, profile.symbol) == ("Unknown", "UNKNOWN")

    def test_market_fields_come_only_from_market(self) -> None:
        profile = aggregate(_risk(), _market())
        assert profile.price == Decimal("0.0000034")
        assert profile.market_cap == Decimal("1000000")
        assert profile.liquidity == Decimal("50000")
        assert profile.volume_24h == Decimal("200000")
        assert profile.price_change_24h == Decimal("-12.5")

    def test_market_cap_falls_back_to_fdv(self) -> None:
        profile = aggregate(None, _market(marketCap=None))
        assert profile.market_cap == Decimal("1500000")

    def test_market_cap_zero_is_kept(self) -> None:
        """A reported market cap of 0 is a value, not a gap."""
        profile = aggregate(None, _market(marketCap=Decimal(0)))
        assert profile.market_cap == 0

    def test_market_cap_neither_present(self) -> None:
        profile = aggregate(None, _market(marketCap=None, fdv=None))
        assert profile.market_cap == 0

    def test_missing_market_sections_default_to_zero(self) -> None:
        profile = aggregate(None, _market(liquidity=None, volume=DexScreenerVolume(), priceChange=None))
        assert profile.liquidity == 0
        assert profile.volume_24h == 0
        assert profile.price_change_24h == 0

    def test_risk_fields_come_only_from_risk(self) -> None:
        profile = aggregate(_risk(score=3100, rugged=True), _market())
        assert profile.risk_score == 3100
        assert profile.rugged is True


class TestParsePrice:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0.0000034", Decimal("0.0000034")),
            (" 1.25 ", Decimal("1.25")),
            (None, Decimal(0)),
            ("", Decimal(0)),
            ("n/a", Decimal(0)),
            ("NaN", Decimal(0)),
            ("Infinity", Decimal(0)),
            ("-3", Decimal(0)),
        ],
    )
    def test_parse_price(self, raw, expected) -> None:
        assert parse_price(raw) == expected

    def test_unparsable_price_in_profile(self) -> None:
        assert aggregate(None, _market(priceUsd="garbage")).price == 0


class TestConcentration:
    def test_sums_first_ten_only(self) -> None:
        holders = _holders(10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 40, 40)
        profile = aggregate(_risk(top_holders=holders), None)
        assert profile.top_holder_concentration == Decimal(55)

    def test_no_resorting(self) -> None:
        """Holders are summed in received order, even if a larger one comes later."""
        holders = _holders(*([1] * 10), 90)
        profile = aggregate(_risk(top_holders=holders), None)
        assert profile.top_holder_concentration == Decimal(10)

    def test_fewer_than_ten_holders(self) -> None:
        profile = aggregate(_risk(top_holders=_holders(12.5, 7.25)), None)
        assert profile.top_holder_concentration == Decimal("19.75")

    def test_exactly_fifty_has_no_finding(self) -> None:
        profile = aggregate(_risk(top_holders=_holders(*([5] * 10))), None)
        assert profile.top_holder_concentration == Decimal(50)
        assert not any("Top 10 holders" in f for f in profile.findings)

    def test_above_fifty_adds_finding(self) -> None:
        profile = aggregate(_risk(top_holders=_holders(30, 20.04)), None)
        assert profile.findings == ("Top 10 holders own 50.0% of supply",)

    def test_finding_uses_one_decimal(self) -> None:
        profile = aggregate(_risk(top_holders=_holders(40, 22.34)), None)
        assert profile.findings[-1] == "Top 10 holders own 62.3% of supply"

    def test_finding_rounds_ties_up(self) -> None:
        profile = aggregate(_risk(top_holders=_holders(30, 20.25)), None)
        assert profile.findings == ("Top 10 holders own 50.3% of supply",)

    @pytest.mark.parametrize(
        "value, expected",
        [("50.25", "50.3"), ("62.35", "62.4"), ("50.04", "50.0"), ("60", "60.0"), ("0", "0.0")],
    )
    def test_format_pct(self, value, expected) -> None:
        assert format_pct(Decimal(value)) == expected


class TestFindings:
    def test_only_danger_and_warn_levels(self) -> None:
        risks = [
            RugcheckRisk(name="A", description="a desc", level="danger"),
            RugcheckRisk(name="B", description="b desc", level="info"),
            RugcheckRisk(name="C", description="c desc", level="warn"),
        ]
        profile = aggregate(_risk(risks=risks), None)
        assert profile.findings == ("A: a desc", "C: c desc")

    def test_order_report_then_mint(self) -> None:
        risks = [
            RugcheckRisk(name="First", description="one", level="danger"),
            RugcheckRisk(name="Second", description="two", level="danger"),
        ]
        profile = aggregate(_risk(risks=risks, mint_authority="Abc"), None)
        assert profile.findings == ("First: one", "Second: two", MINT_AUTHORITY_FINDING)

    def test_full_order_and_no_dedup(self) -> None:
        risks = [
            RugcheckRisk(name="Dup", description="same", level="warn"),
            RugcheckRisk(name="Dup", description="same", level="warn"),
        ]
        profile = aggregate(
            _risk(
                risks=risks,
                mint_authority="MintAuth",
                freeze_authority="FreezeAuth",
                top_holders=_holders(60),
            ),
            None,
        )
        assert profile.findings == (
            "Dup: same",
            "Dup: same",
            MINT_AUTHORITY_FINDING,
            FREEZE_AUTHORITY_FINDING,
            "Top 10 holders own 60.0% of supply",
        )
        assert profile.has_mint_authority is True
        assert profile.has_freeze_authority is True

    def test_revoked_authorities(self) -> None:
        profile = aggregate(_risk(mint_authority=None, freeze_authority=None), None)
        assert profile.has_mint_authority is False
        assert profile.has_freeze_authority is False
        assert profile.findings == ()
