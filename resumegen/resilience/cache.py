from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def fingerprint(operation: str, **fields: Any) -> str:
    """Stable, intentionally coarse cache key for a content request."""
    return json.dumps({"operation": operation, **fields}, sort_keys=True, default=str)


class ResponseCache:
    """Process-lifetime result store; grows monotonically, no expiry."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    def put(self, key: str, value: Any) -> None:
        if value is None:
            raise ValueError("Refusing to cache an empty result.")
        self._entries[key] = value
        logger.debug("ai_cache_store size=%s", len(self._entries))

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
