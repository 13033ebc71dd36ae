"""
Lift helpers between Future and the async world.

Supports the same import styles as the rest of the library:
    from pledge import lift as L   # Recommended
    from pledge import lift        # Explicit

Architecture:
- L.up.*    - values, Results and awaitables into a Future
- L.down.*  - a Future back into asyncio / kungfu

Examples:
    from pledge import lift as L

    # Up
    ready = L.up.resolved(42)
    failed = L.up.rejected(NotFoundError())
    job = L.up.from_awaitable(download(url))
    checked = L.up.from_result(validate(payload))

    # Down
    result = await L.down.to_result(job)
    value = await L.down.unsafe(job)
    lazy = L.down.to_lazy_coro_result(job).map(len)
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import up as up_ns

# Convenience: most common functions in root for easy access
from .up import from_awaitable, from_lazy_coro_result, from_result, rejected, resolved
from .down import or_else, to_lazy_coro_result, to_result, unsafe

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "resolved",
    "rejected",
    "from_result",
    "from_awaitable",
    "from_lazy_coro_result",
    # Down
    "to_result",
    "unsafe",
    "or_else",
    "to_lazy_coro_result",
)
