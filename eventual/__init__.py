"""
Eventual: composing asynchronous tasks that end in a value or a failure.

Building blocks:
- Outcome: single-assignment result cell, resolved once by its producer
- Deferred task: zero-arg callable that starts work and returns an Outcome
- Combinators take outcomes/tasks and return a new Outcome, so they nest freely

Architecture:
- outcome        Outcome, invoke, join (the pairing primitive)
- lift           starting work (spawn, call, blocking) and lowering results
- transform      transform / transform_error / tap / tap_err
- control        recover / recover_with / retry with RetryPolicy
- compose        sequential / concurrent / pipeline
- classify       which errors are fatal and must never be recovered or retried
"""

# Core types
from ._types import Callback, Deferred, Stage
from .outcome import Outcome, OutcomeState, invoke, join

# Error classification
from .classify import FATAL_TYPES, Classifier, Severity, classify, fatal_on, is_fatal

# Lift helpers (namespace import preferred: `from eventual import lift as L`)
from . import lift
from .lift import blocking, call, fail, failed, from_lazy, from_result, fulfilled, lifted, pure, spawn

# Transform
from .transform import tap, tap_err, transform, transform_error

# Control flow
from .control import BackoffStrategy, RetryPolicy, recover, recover_with, retry

# Composition
from .compose import concurrent, concurrent_all, pipeline, sequential, stage, then

# Errors
from ._errors import AttemptsExhaustedError, OutcomeAlreadyResolvedError, OutcomePendingError

__all__ = (
    # Types
    "Callback",
    "Deferred",
    "Stage",
    # Outcome
    "Outcome",
    "OutcomeState",
    "invoke",
    "join",
    # Classification
    "FATAL_TYPES",
    "Classifier",
    "Severity",
    "classify",
    "fatal_on",
    "is_fatal",
    # Lift
    "lift",
    "blocking",
    "call",
    "fail",
    "failed",
    "from_lazy",
    "from_result",
    "fulfilled",
    "lifted",
    "pure",
    "spawn",
    # Transform
    "tap",
    "tap_err",
    "transform",
    "transform_error",
    # Control
    "BackoffStrategy",
    "RetryPolicy",
    "recover",
    "recover_with",
    "retry",
    # Compose
    "concurrent",
    "concurrent_all",
    "pipeline",
    "sequential",
    "stage",
    "then",
    # Errors
    "AttemptsExhaustedError",
    "OutcomeAlreadyResolvedError",
    "OutcomePendingError",
)
