from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_PLACEHOLDER_PREFIXES = ("your_", "replace_")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith(_PLACEHOLDER_PREFIXES) or lower in {"changeme", "todo"}


def _provider_credential(provider: str) -> str | None:
    env_name = "GEMINI_API_KEY" if provider == "gemini" else "OPENAI_API_KEY"
    value = (_get_env(env_name) or "").strip()
    if not value or _looks_like_placeholder(value):
        return None
    return value


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    api_auth_mode: str
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    ai_enabled: bool
    ai_provider: str
    ai_model: str
    ai_credential: str | None
    ai_base_url: str | None
    ai_daily_call_limit: int
    ai_min_call_interval_s: float
    ai_breaker_failure_threshold: int
    ai_breaker_cooldown_s: float
    ai_timeout_resume_s: float
    ai_timeout_ats_s: float
    ai_timeout_summary_s: float
    ai_timeout_enhance_s: float
    ai_timeout_sections_s: float
    ai_timeout_review_s: float
    ai_max_attempts: int
    ai_enhance_max_attempts: int
    ai_retry_backoff_s: float
    ai_retry_backoff_max_s: float

    @property
    def remote_path_configured(self) -> bool:
        return self.ai_enabled and bool(self.ai_credential)


def validate_settings(value: Settings) -> Settings:
    if value.api_auth_mode not in {"public", "protected"}:
        raise RuntimeError("API_AUTH_MODE must be either 'public' or 'protected'.")
    if value.api_auth_mode == "protected" and not value.api_key:
        raise RuntimeError("API_AUTH_MODE=protected requires API_KEY to be set.")
    if value.ai_provider not in {"openai", "gemini"}:
        raise RuntimeError(f"Unsupported AI_PROVIDER='{value.ai_provider}'")
    if value.ai_daily_call_limit < 1:
        raise RuntimeError("AI_DAILY_CALL_LIMIT must be at least 1.")
    if value.ai_breaker_failure_threshold < 1:
        raise RuntimeError("AI_BREAKER_FAILURE_THRESHOLD must be at least 1.")
    if value.ai_max_attempts < 1 or value.ai_enhance_max_attempts < 1:
        raise RuntimeError("AI_MAX_ATTEMPTS and AI_ENHANCE_MAX_ATTEMPTS must be at least 1.")
    if value.ai_min_call_interval_s < 0 or value.ai_breaker_cooldown_s < 0:
        raise RuntimeError("Intervals and cool-downs cannot be negative.")
    return value


def load_settings() -> Settings:
    provider = (_get_env("AI_PROVIDER", "openai") or "openai").strip().lower()
    default_model = "gemini-2.5-flash" if provider == "gemini" else "gpt-4o-mini"
    return validate_settings(
        Settings(
            api_key=_get_env("API_KEY"),
            api_auth_mode=(_get_env("API_AUTH_MODE", "public") or "public").strip().lower(),
            rate_limit=_get_env("RATE_LIMIT", "100/15minutes") or "100/15minutes",
            rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
            log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
            sentry_dsn=_get_env("SENTRY_DSN"),
            cors_allowed_origins=_get_env_list(
                "CORS_ALLOWED_ORIGINS",
                [
                    "http://localhost:5173",
                    "http://127.0.0.1:5173",
                    "http://localhost:3000",
                ],
            ),
            ai_enabled=_get_env_bool("AI_ENABLED", True),
            ai_provider=provider,
            ai_model=(_get_env("AI_MODEL", default_model) or default_model).strip(),
            ai_credential=_provider_credential(provider),
            ai_base_url=_get_env("AI_BASE_URL"),
            ai_daily_call_limit=_get_env_int("AI_DAILY_CALL_LIMIT", 15),
            ai_min_call_interval_s=_get_env_float("AI_MIN_CALL_INTERVAL_S", 1.0),
            ai_breaker_failure_threshold=_get_env_int("AI_BREAKER_FAILURE_THRESHOLD", 3),
            ai_breaker_cooldown_s=_get_env_float("AI_BREAKER_COOLDOWN_S", 60.0),
            ai_timeout_resume_s=_get_env_float("AI_TIMEOUT_RESUME_S", 25.0),
            ai_timeout_ats_s=_get_env_float("AI_TIMEOUT_ATS_S", 15.0),
            ai_timeout_summary_s=_get_env_float("AI_TIMEOUT_SUMMARY_S", 15.0),
            ai_timeout_enhance_s=_get_env_float("AI_TIMEOUT_ENHANCE_S", 20.0),
            ai_timeout_sections_s=_get_env_float("AI_TIMEOUT_SECTIONS_S", 20.0),
            ai_timeout_review_s=_get_env_float("AI_TIMEOUT_REVIEW_S", 20.0),
            ai_max_attempts=_get_env_int("AI_MAX_ATTEMPTS", 2),
            ai_enhance_max_attempts=_get_env_int("AI_ENHANCE_MAX_ATTEMPTS", 3),
            ai_retry_backoff_s=_get_env_float("AI_RETRY_BACKOFF_S", 1.0),
            ai_retry_backoff_max_s=_get_env_float("AI_RETRY_BACKOFF_MAX_S", 8.0),
        )
    )


settings = load_settings()
