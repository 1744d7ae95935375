"""Per-keystroke search over one index snapshot.

Each call supersedes the previous one: if a newer query arrives while an
older search is still running, the older results are dropped instead of
delivered. Large indexes are ranked off the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..models.command import ActionCommand, SearchHit
from .ranker import search

logger = logging.getLogger(__name__)

DEFAULT_OFFLOAD_THRESHOLD = 1000


class SearchSession:
    """Last-request-wins search over an immutable command snapshot.

    Example:
        session = SearchSession(commands)
        hits = await session.search("sa")
        if hits is None:
            return  # superseded by a newer query
    """

    def __init__(
        self,
        commands: Sequence[ActionCommand],
        offload_threshold: int = DEFAULT_OFFLOAD_THRESHOLD,
    ) -> None:
        self._commands = tuple(commands)
        self._offload_threshold = offload_threshold
        self._generation = 0

    @property
    def commands(self) -> tuple[ActionCommand, ...]:
        return self._commands

    def cancel(self) -> None:
        """Drop the results of any search still in flight."""
        self._generation += 1

    async def search(self, query: str) -> list[SearchHit] | None:
        """Rank the snapshot against query.

        Returns None when a later search() or cancel() superseded this call.
        """
        self._generation += 1
        generation = self._generation

        if len(self._commands) >= self._offload_threshold:
            hits = await asyncio.to_thread(search, self._commands, query)
        else:
            hits = search(self._commands, query)
            # Give newer keystrokes a chance to supersede us
            await asyncio.sleep(0)

        if generation != self._generation:
            logger.debug("Discarding stale results for %r", query)
            return None
        return hits
