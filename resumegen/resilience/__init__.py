from .breaker import BreakerState, BreakerStatus, CircuitBreaker
from .cache import ResponseCache, fingerprint
from .errors import CircuitOpenError, MalformedOutputError, QuotaExhaustedError, RemotePathError
from .governor import GovernorState, QuotaGovernor
from .retry import BackoffPolicy, RetryOutcome, is_transient, with_retry

__all__ = [
    "BackoffPolicy",
    "BreakerState",
    "BreakerStatus",
    "CircuitBreaker",
    "CircuitOpenError",
    "GovernorState",
    "MalformedOutputError",
    "QuotaExhaustedError",
    "QuotaGovernor",
    "RemotePathError",
    "ResponseCache",
    "RetryOutcome",
    "fingerprint",
    "is_transient",
    "with_retry",
]
