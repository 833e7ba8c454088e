from __future__ import annotations

import os
from typing import Optional

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    OpenAIError,
    RateLimitError,
)

from resumegen.ai.types import GenerationConfig, ProviderError

SYSTEM_PROMPT = (
    "You are a resume writing assistant. When asked for JSON, reply with a single "
    "valid JSON object and nothing else."
)


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
    ):
        self._model = model
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        # Retries are owned by the orchestrator so the breaker sees every attempt.
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s))),
            max_retries=0,
        )

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        create_kwargs = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": config.temperature,
            "max_tokens": config.max_output_tokens,
        }
        if config.response_schema is not None:
            create_kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**create_kwargs)
        except (APITimeoutError, APIConnectionError) as exc:
            raise ProviderError(f"openai connection failure: {exc}", transient=True) from exc
        except RateLimitError as exc:
            raise ProviderError(f"openai rate limited: {exc}", transient=True, status_code=429) from exc
        except APIStatusError as exc:
            raise ProviderError(
                f"openai status {exc.status_code}: {exc}",
                transient=exc.status_code >= 500,
                status_code=exc.status_code,
            ) from exc
        except OpenAIError as exc:
            raise ProviderError(f"openai error: {exc}") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise ProviderError("openai returned an empty response")
        return str(content)
