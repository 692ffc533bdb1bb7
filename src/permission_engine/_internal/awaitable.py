"""Helpers for host callables that may be sync or async."""

from __future__ import annotations

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """Await *value* if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(value):
        return await value
    return value
