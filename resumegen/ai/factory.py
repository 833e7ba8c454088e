import logging

from resumegen.ai.config import load_ai_config
from resumegen.ai.types import TextGenerator
from resumegen.core.config import Settings

from resumegen.ai.providers.openai_provider import OpenAIProvider
from resumegen.ai.providers.gemini_provider import GeminiProvider

logger = logging.getLogger(__name__)


def get_text_generator(source: Settings | None = None) -> TextGenerator | None:
    """Build the configured remote generator, or None when the remote path is off."""
    cfg = load_ai_config(source)
    if not cfg.enabled or not cfg.api_key:
        logger.warning("ai_remote_disabled provider=%s reason=no_credential_or_disabled", cfg.provider)
        return None

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model, api_key=cfg.api_key, base_url=cfg.base_url)

    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model, api_key=cfg.api_key, base_url=cfg.base_url)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
