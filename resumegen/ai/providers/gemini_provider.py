from __future__ import annotations

from typing import Any, Optional

import httpx

from resumegen.ai.types import GenerationConfig, ProviderError

_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
_TRANSIENT_STATUS = {408, 429, 500, 502, 503, 504}


class GeminiProvider:
    """Generative Language REST client; one request per ``generate`` call."""

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY is missing")
        self._model = model
        self._api_key = api_key
        self._base_url = (base_url or _BASE_URL).rstrip("/")
        self._timeout = httpx.Timeout(timeout_s, connect=10.0)
        self._transport = transport

    def _payload(self, prompt: str, config: GenerationConfig) -> dict[str, Any]:
        generation_config: dict[str, Any] = {
            "temperature": config.temperature,
            "maxOutputTokens": config.max_output_tokens,
        }
        if config.response_schema is not None:
            generation_config["responseMimeType"] = "application/json"
            generation_config["responseSchema"] = config.response_schema
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        endpoint = f"{self._base_url}/models/{self._model}:generateContent"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    endpoint,
                    params={"key": self._api_key},
                    json=self._payload(prompt, config),
                )
        except httpx.TimeoutException as exc:
            raise ProviderError(f"gemini request timed out: {exc}", transient=True) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"gemini request failed: {exc}", transient=True) from exc

        if response.status_code >= 400:
            raise ProviderError(
                f"gemini status {response.status_code}: {response.text[:200]}",
                transient=response.status_code in _TRANSIENT_STATUS,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError("gemini returned a non-JSON envelope") from exc

        candidates = data.get("candidates") or []
        if not candidates:
            raise ProviderError("gemini response did not include candidates")
        parts = candidates[0].get("content", {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text.strip():
            raise ProviderError("gemini returned an empty response")
        return text
