"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from eventual import lift as L   # Recommended
    from eventual import lift        # Explicit

Architecture:
- L.up.*    - already-resolved outcomes and constant tasks
- L.down.*  - waiting on an outcome for a value
- L.call()  - deferred tasks from async functions
- L.blocking() - deferred tasks on an executor

Examples:
    from eventual import lift as L

    # Resolved outcomes
    user = L.up.fulfilled(User(id=42))
    missing = L.up.failed(NotFoundError())

    # Deferred tasks
    fetch = L.call(fetch_user, 42)
    digest = L.blocking(hash_file, path, executor=pool)

    # Lowering
    result = await L.down.to_result(fetch())
    value = await L.down.or_else(fetch(), default=GUEST)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# From up namespace
from .up import fail, failed, from_result, fulfilled, pure

# From call namespace
from .call import blocking, call, from_lazy, lifted, spawn

# From down namespace
from .down import or_else, to_result, unsafe

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "fulfilled",
    "failed",
    "from_result",
    "pure",
    "fail",
    # Call
    "spawn",
    "call",
    "lifted",
    "from_lazy",
    "blocking",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
