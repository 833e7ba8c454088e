from __future__ import annotations


class RemotePathError(RuntimeError):
    """Base class for failures that route a request to local synthesis."""


class CircuitOpenError(RemotePathError):
    def __init__(self, retry_in_s: float = 0.0):
        super().__init__("AI service temporarily unavailable. Please try again later.")
        self.retry_in_s = retry_in_s


class QuotaExhaustedError(RemotePathError):
    def __init__(self, daily_limit: int):
        super().__init__(f"Daily AI call limit of {daily_limit} reached.")
        self.daily_limit = daily_limit


class MalformedOutputError(RemotePathError):
    """Remote call succeeded but its output could not be used."""
