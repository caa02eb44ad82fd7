"""LLM-written risk narrative via OpenRouter chat completions.

The analysis itself (profile, tier, findings) is computed before this step;
the model only turns it into prose.
"""

from __future__ import annotations

import httpx
from loguru import logger

from config.settings import settings
from src.parsers.llm_analyzer.exceptions import LLMAnalysisError
from src.parsers.llm_analyzer.prompts import SYSTEM_PROMPT, build_user_prompt
from src.parsers.token_analyzer import TokenAnalysis


class LLMAnalyzerClient:
    """Narrative generation via OpenRouter."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> None:
        self._model = model or settings.llm_model
        self._temperature = settings.llm_temperature if temperature is None else temperature
        self._max_tokens = max_tokens or settings.llm_max_tokens
        self._client = httpx.AsyncClient(
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout_sec,
            headers={
                "Authorization": f"Bearer {api_key or settings.openrouter_api_key}",
                "Content-Type": "application/json",
            },
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> LLMAnalyzerClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def generate_analysis(self, mint: str, analysis: TokenAnalysis) -> str:
        """Return the model's prose assessment for an analyzed token.

        Raises LLMAnalysisError on transport errors, non-200 status or an empty reply.
        """
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(mint, analysis)},
            ],
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }

        try:
            resp = await self._client.post("/chat/completions", json=payload)
        except httpx.HTTPError as e:
            raise LLMAnalysisError(f"{type(e).__name__}: {e}") from e

        if resp.status_code != 200:
            logger.warning(f"[LLM] API error {resp.status_code} for {mint[:12]}")
            raise LLMAnalysisError(f"HTTP {resp.status_code}")

        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMAnalysisError(f"Unexpected response shape: {e}") from e

        if not isinstance(content, str) or not content.strip():
            raise LLMAnalysisError("Empty completion")

        logger.debug(f"[LLM] {mint[:12]}: {len(content)} chars from {self._model}")
        return content.strip()
