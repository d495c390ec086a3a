"""Test helpers — async wait utility."""

from __future__ import annotations

import asyncio
from typing import Callable


async def wait_for(
    condition: Callable[[], bool],
    timeout: float = 5.0,
    interval: float = 0.01,
) -> None:
    """Poll *condition* every *interval* seconds, raising
    :class:`TimeoutError` if it doesn't become truthy within *timeout*.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not condition():
        if loop.time() >= deadline:
            raise TimeoutError(f"Condition not met within {timeout}s")
        await asyncio.sleep(interval)
