"""
Service layer for reading and writing thoughts.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable, Dict, List

from app.clients import ThoughtsTableClient
from app.schemas import Thought, ThoughtCreateRequest

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class ThoughtService:
    """Async facade over the Thoughts table.

    boto3 is blocking, so each table call runs in a worker thread and the
    event loop stays free for other requests.
    """

    def __init__(
        self,
        table_client: ThoughtsTableClient,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self._table = table_client
        self._clock = clock

    async def list_all(self) -> List[Dict[str, Any]]:
        """Every stored item, as the table returns it, in no particular order."""
        return await asyncio.to_thread(self._table.scan_thoughts)

    async def list_by_user(self, username: str) -> List[Dict[str, Any]]:
        """A user's stored items, newest first; empty when the user has none."""
        return await asyncio.to_thread(self._table.query_thoughts, username)

    async def create_thought(self, request: ThoughtCreateRequest) -> Thought:
        """Stamp the thought with the server clock and write it."""
        thought = Thought(
            username=request.username,
            created_at=self._clock(),
            thought=request.thought,
            image=request.image,
        )
        acknowledgment = await asyncio.to_thread(
            self._table.put_thought, thought.to_item()
        )
        logger.debug("PutItem acknowledgment: %s", acknowledgment)
        return thought


__all__ = ["ThoughtService", "epoch_millis"]
