"""Per-target guard so at most one mutation per product is in flight."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from product_board.core.errors import OperationInFlightError

logger = logging.getLogger(__name__)

CREATE_KEY = "create"


def product_key(product_id: str) -> str:
    return f"product:{product_id}"


class SingleFlight:
    """Reject a second operation for a key while the first is still pending.

    The board runs on a single event loop, so checking and marking the key
    happen without an await in between and need no lock.
    """

    def __init__(self) -> None:
        self._pending: set[str] = set()

    def is_pending(self, key: str) -> bool:
        return key in self._pending

    @property
    def pending(self) -> frozenset[str]:
        return frozenset(self._pending)

    @asynccontextmanager
    async def acquire(self, key: str, operation: str | None = None) -> AsyncIterator[None]:
        if key in self._pending:
            raise OperationInFlightError(key, operation=operation)
        self._pending.add(key)
        logger.debug(f"Acquired in-flight slot {key}")
        try:
            yield
        finally:
            self._pending.discard(key)
            logger.debug(f"Released in-flight slot {key}")
