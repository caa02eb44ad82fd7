"""FastAPI dependency injection: request-scoped analyzer and narrator."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from src.parsers.llm_analyzer.client import LLMAnalyzerClient
from src.parsers.token_analyzer import TokenAnalyzer


async def get_analyzer() -> AsyncGenerator[TokenAnalyzer, None]:
    """Yield a TokenAnalyzer with fresh provider clients (closed after the request)."""
    async with TokenAnalyzer.create() as analyzer:
        yield analyzer


async def get_narrator() -> AsyncGenerator[LLMAnalyzerClient, None]:
    """Yield an LLM narrative client (closed after the request)."""
    async with LLMAnalyzerClient() as narrator:
        yield narrator
