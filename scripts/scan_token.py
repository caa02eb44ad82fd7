"""Scan one token from the command line: profile, tier and findings, no LLM.

Usage:
    python scripts/scan_token.py <mint>
    python scripts/scan_token.py <mint> --json
"""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.parsers.token_analyzer import TokenAnalyzer  # noqa: E402
from src.parsers.token_profile import format_pct  # noqa: E402
from src.utils.logger import setup_logger  # noqa: E402


def _json_default(value: object) -> object:
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Not JSON serializable: {type(value).__name__}")


async def main() -> None:
    parser = argparse.ArgumentParser(description="Scan a Solana token for rug-pull risk")
    parser.add_argument("mint", help="Token mint address")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    args = parser.parse_args()

    setup_logger(level="WARNING", log_dir=None)

    async with TokenAnalyzer.create() as analyzer:
        analysis = await analyzer.analyze(args.mint.strip())

    if args.json:
        out = {
            "tier": analysis.tier.value,
            "riskReportFound": analysis.risk_report_found,
            "marketReportFound": analysis.market_report_found,
            "profile": asdict(analysis.profile),
        }
        print(json.dumps(out, indent=2, default=_json_default))
        return

    p = analysis.profile
    print(f"{p.name} ({p.symbol}) | {analysis.tier.value.upper()}")
    print(f"  Risk score:     {p.risk_score}{'' if analysis.risk_report_found else ' (no Rugcheck data)'}")
    print(f"  Price:          ${p.price:.8f}")
    print(f"  Market cap:     ${p.market_cap:,.0f}")
    print(f"  Liquidity:      ${p.liquidity:,.0f}")
    print(f"  Top 10 holders: {format_pct(p.top_holder_concentration)}%")
    for finding in p.findings:
        print(f"  - {finding}")


if __name__ == "__main__":
    asyncio.run(main())
