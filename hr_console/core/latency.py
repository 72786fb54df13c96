"""Simulated round-trip latency for the in-memory services."""

from __future__ import annotations

import asyncio
from typing import Protocol

from hr_console.core.config import Settings

OP_LIST = "list"
OP_GET = "get"
OP_QUERY = "query"
OP_CREATE = "create"
OP_UPDATE = "update"
OP_DELETE = "delete"


class LatencyStrategy(Protocol):
    async def wait(self, operation: str) -> None: ...


class NoDelay:
    async def wait(self, operation: str) -> None:
        return None


class FixedDelay:
    """Sleeps a fixed number of milliseconds per operation kind."""

    def __init__(self, delays_ms: dict[str, int]) -> None:
        self.delays_ms = dict(delays_ms)

    async def wait(self, operation: str) -> None:
        delay = self.delays_ms.get(operation, 0)
        if delay > 0:
            await asyncio.sleep(delay / 1000)


def latency_from_settings(settings: Settings, list_ms: int | None = None) -> LatencyStrategy:
    if not settings.SIMULATE_LATENCY:
        return NoDelay()

    return FixedDelay(
        {
            OP_LIST: settings.LATENCY_LIST_MS if list_ms is None else list_ms,
            OP_GET: settings.LATENCY_GET_MS,
            OP_QUERY: settings.LATENCY_QUERY_MS,
            OP_CREATE: settings.LATENCY_CREATE_MS,
            OP_UPDATE: settings.LATENCY_UPDATE_MS,
            OP_DELETE: settings.LATENCY_DELETE_MS,
        }
    )
