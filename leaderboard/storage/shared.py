"""Single store shared by all request handlers."""

from __future__ import annotations

import asyncio

from leaderboard.storage.sqlite import ScoreRecord, ScoreStore


class SharedScoreStore:
    """Serializes access to one ScoreStore.

    The lock is held only while the blocking sqlite call runs on an executor
    thread; callers encode the returned records after it is released. A
    cancelled caller keeps the lock until its thread has finished with the
    connection.
    """

    def __init__(self, store: ScoreStore):
        self.store = store
        self._lock = asyncio.Lock()

    async def _run(self, fn, *args):
        async with self._lock:
            loop = asyncio.get_running_loop()
            fut = loop.run_in_executor(None, fn, *args)
            try:
                return await asyncio.shield(fut)
            except asyncio.CancelledError:
                await asyncio.wait({fut})
                raise

    async def query_by_game(self, game: str) -> list[ScoreRecord]:
        return await self._run(self.store.query_by_game, game)

    async def count(self) -> int:
        return await self._run(self.store.count)
