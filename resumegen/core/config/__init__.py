from .scoring import get_scoring_config, get_scoring_value
from .settings import Settings, load_settings, settings, validate_settings

__all__ = [
    "Settings",
    "settings",
    "load_settings",
    "validate_settings",
    "get_scoring_config",
    "get_scoring_value",
]
