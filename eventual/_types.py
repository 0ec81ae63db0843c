"""
Core type definitions for eventual.

Aliases shared by every combinator module.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from .outcome import Outcome

# ============================================================================
# Type aliases
# ============================================================================

# Deferred = zero-arg callable that starts work and hands back its outcome
type Deferred[T, E] = Callable[[], Outcome[T, E]]

# Stage = one link of a pipeline, consumes the previous link's value
type Stage[T, R, E] = Callable[[T], Outcome[R, E]]

# Callback = continuation registered on an outcome
type Callback[T, E] = Callable[[Result[T, E]], None]


__all__ = (
    "Deferred",
    "Stage",
    "Callback",
)
