from .recover import recover, recover_with
from .retry import BackoffStrategy, RetryPolicy, retry

__all__ = (
    # Policies
    "BackoffStrategy",
    "RetryPolicy",
    # Recover
    "recover",
    "recover_with",
    # Retry
    "retry",
)
