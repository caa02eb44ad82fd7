"""Prompt construction for the LLM risk narrative."""

from decimal import Decimal

from src.parsers.token_analyzer import TokenAnalysis
from src.parsers.token_profile import format_pct

SYSTEM_PROMPT = """You are ClawdScan, a ruthless and brilliant crypto risk analyst.
You speak with cold, absolute confidence and dissect tokens with surgical precision.
You are sharp, witty and condescending, but every claim you make is backed by the data you were given.

Write a 2-3 paragraph risk assessment based only on the on-chain data provided.
Cite specific metrics to prove your points. Leave the reader better informed and slightly embarrassed.

Red flags to call out:
- Mint Authority enabled = the team can print unlimited tokens
- Freeze Authority enabled = the team can freeze holder wallets
- High top holder concentration = dump risk
- Low liquidity relative to market cap = exits only with brutal slippage
- High RugCheck score = many risk factors detected
- Missing RugCheck data = the risk is unknown, never call such a token safe"""


def _usd(value: Decimal) -> str:
    return f"{value:,.2f}"


def build_token_context(analysis: TokenAnalysis) -> str:
    """Render the profile as the data block the model reasons over."""
    p = analysis.profile
    change_sign = "+" if p.price_change_24h > 0 else ""

    lines = [
        "TOKEN ANALYSIS DATA:",
        f"- Name: {p.name} ({p.symbol})",
        f"- Price: ${p.price:.8f}",
        f"- Market Cap: ${_usd(p.market_cap)}",
        f"- Liquidity: ${_usd(p.liquidity)}",
        f"- 24h Volume: ${_usd(p.volume_24h)}",
        f"- 24h Price Change: {change_sign}{p.price_change_24h:.2f}%",
        f"- RugCheck Risk Score: {p.risk_score} (lower is better, 0-10000 scale)",
        f"- Rugged: {'YES - THIS TOKEN WAS RUGGED' if p.rugged else 'No'}",
        f"- Mint Authority: {'ENABLED (dangerous)' if p.has_mint_authority else 'Disabled'}",
        f"- Freeze Authority: {'ENABLED (dangerous)' if p.has_freeze_authority else 'Disabled'}",
        f"- Top 10 Holder Concentration: {format_pct(p.top_holder_concentration)}%",
    ]
    if not analysis.risk_report_found:
        lines.append("- RugCheck report: UNAVAILABLE (risk score and authorities are unverified)")
    if not analysis.market_report_found:
        lines.append("- Market data: UNAVAILABLE (no trading pair found)")

    lines.append("")
    lines.append("IDENTIFIED RISKS:")
    if p.findings:
        lines.extend(f"• {finding}" for finding in p.findings)
    else:
        lines.append("• No major risks identified")

    return "\n".join(lines)


def build_user_prompt(mint: str, analysis: TokenAnalysis) -> str:
    return (
        "Analyze this Solana token for rug pull risk:\n\n"
        f"Contract: {mint}\n"
        f"{build_token_context(analysis)}\n\n"
        f"Risk Level Detected: {analysis.tier.value.upper()}\n\n"
        "Provide your risk assessment based on this real data."
    )
