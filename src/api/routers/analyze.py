"""Analyze endpoint — token risk profile, tier and LLM narrative."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field

from config.settings import settings
from src.api.app import limiter
from src.api.dependencies import get_analyzer, get_narrator
from src.parsers.llm_analyzer.client import LLMAnalyzerClient
from src.parsers.token_analyzer import TokenAnalysis, TokenAnalyzer

router = APIRouter(prefix="/api", tags=["analyze"])


class TokenDataResponse(BaseModel):
    """Profile as returned to clients (camelCase keys, findings under "risks")."""

    name: str
    symbol: str
    price: float
    market_cap: float = Field(serialization_alias="marketCap")
    liquidity: float
    volume_24h: float = Field(serialization_alias="volume24h")
    price_change_24h: float = Field(serialization_alias="priceChange24h")
    risk_score: int = Field(serialization_alias="riskScore")
    risks: list[str]
    rugged: bool
    top_holder_concentration: float = Field(serialization_alias="topHolderConcentration")
    has_mint_authority: bool = Field(serialization_alias="hasMintAuthority")
    has_freeze_authority: bool = Field(serialization_alias="hasFreezeAuthority")
    risk_data_available: bool = Field(serialization_alias="riskDataAvailable")
    market_data_available: bool = Field(serialization_alias="marketDataAvailable")

    @classmethod
    def from_analysis(cls, analysis: TokenAnalysis) -> "TokenDataResponse":
        p = analysis.profile
        return cls(
            name=p.name,
            symbol=p.symbol,
            price=float(p.price),
            market_cap=float(p.market_cap),
            liquidity=float(p.liquidity),
            volume_24h=float(p.volume_24h),
            price_change_24h=float(p.price_change_24h),
            risk_score=p.risk_score,
            risks=list(p.findings),
            rugged=p.rugged,
            top_holder_concentration=float(p.top_holder_concentration),
            has_mint_authority=p.has_mint_authority,
            has_freeze_authority=p.has_freeze_authority,
            risk_data_available=analysis.risk_report_found,
            market_data_available=analysis.market_report_found,
        )


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.post("/analyze")
@limiter.limit(settings.analyze_rate_limit)
async def analyze_contract(
    request: Request,
    analyzer: TokenAnalyzer = Depends(get_analyzer),
    narrator: LLMAnalyzerClient = Depends(get_narrator),
) -> JSONResponse:
    """Analyze a token by contract address.

    Body: {"contractAddress": "<mint>"}.
    """
    try:
        body = await request.json()
    except ValueError:
        return _error("Invalid contract address", status.HTTP_400_BAD_REQUEST)

    address = body.get("contractAddress") if isinstance(body, dict) else None
    if not isinstance(address, str) or not address.strip():
        return _error("Invalid contract address", status.HTTP_400_BAD_REQUEST)

    mint = address.strip()

    try:
        analysis = await analyzer.analyze(mint)
        text = await narrator.generate_analysis(mint, analysis)
    except Exception:
        logger.exception(f"[API] Failed to analyze {mint[:12]}")
        return _error("Failed to analyze contract", status.HTTP_500_INTERNAL_SERVER_ERROR)

    token_data = TokenDataResponse.from_analysis(analysis)
    return JSONResponse({
        "analysis": text,
        "rugRisk": analysis.tier.value,
        "tokenData": token_data.model_dump(by_alias=True),
    })
