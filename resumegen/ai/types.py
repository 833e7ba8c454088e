from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = 0.7
    max_output_tokens: int = 1000
    response_schema: dict[str, Any] | None = None


class ProviderError(RuntimeError):
    """Failure reported by a remote text generator.

    ``transient`` marks failures that are worth retrying (timeouts, overload,
    rate limiting, 5xx). Everything else is treated as permanent for the
    current request.
    """

    def __init__(self, message: str, *, transient: bool = False, status_code: int | None = None):
        super().__init__(message)
        self.transient = transient
        self.status_code = status_code


class TextGenerator(Protocol):
    async def generate(self, prompt: str, config: GenerationConfig) -> str: ...
