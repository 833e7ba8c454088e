from __future__ import annotations


class ContractError(ValueError):
    """Caller sent a request the service cannot act on; never masked by fallback."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field
