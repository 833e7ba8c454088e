from dataclasses import dataclass

from resumegen.core.config import Settings, settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    enabled: bool


def load_ai_config(source: Settings | None = None) -> AIConfig:
    cfg = source or settings
    return AIConfig(
        provider=cfg.ai_provider,
        model=cfg.ai_model,
        api_key=cfg.ai_credential,
        base_url=cfg.ai_base_url,
        enabled=cfg.remote_path_configured,
    )
