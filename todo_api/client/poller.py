"""Periodic background task tied to the lifetime of a view."""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger('todo_api.client.poller')

T = TypeVar('T')


class Poller(Generic[T]):
    """
    Call `fetch` every `interval` seconds and hand each result to `on_result`.

    The first fetch happens one interval after `start()`. A failing fetch only
    skips that cycle. After `cancel()` no further results are delivered.
    """

    def __init__(self,
                 fetch: Callable[[], Awaitable[T]],
                 on_result: Callable[[T], None],
                 interval: float) -> None:
        self.fetch = fetch
        self.on_result = on_result
        self.interval = interval
        self._task: Optional[asyncio.Task[None]] = None
        self._cancelled = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._cancelled

    def start(self) -> None:
        if self._task is not None:
            raise RuntimeError('Poller already started')
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> bool:
        """Stop polling. Returns False if there was nothing to stop."""
        if self._task is None or self._cancelled:
            return False
        self._cancelled = True
        self._task.cancel()
        return True

    async def _run(self) -> None:
        while not self._cancelled:
            await asyncio.sleep(self.interval)
            try:
                result = await self.fetch()
            except Exception as e:
                logger.warning(f'Poll cycle failed: {e}')
                continue
            if not self._cancelled:
                self.on_result(result)
