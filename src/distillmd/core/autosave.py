"""Debounced auto-save of block snapshots"""

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional, Sequence

from distillmd.core.models import Block, SaveStatus


logger = logging.getLogger(__name__)

StatusListener = Callable[[SaveStatus], None]


class AutoSaveCoordinator:
    """Persist the latest block snapshot after a quiet period.

    Status moves saved -> unsaved -> saving -> saved | error. Each notify()
    restarts the debounce timer. At most one replace_blocks call is in flight;
    a snapshot that arrives during a save keeps the status unsaved and is
    written by the next timer expiry. A failed save is not retried.

    The store may expose replace_blocks as a plain or a coroutine function.
    """

    def __init__(self, store: Any, document_id: str, debounce: float = 1.0):
        self.store = store
        self.document_id = document_id
        self.debounce = debounce
        self._status = SaveStatus.saved
        self._listeners: list[StatusListener] = []
        self._snapshot: Optional[list[Block]] = None
        self._version = 0
        self._saved_version = 0
        self._timer: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @property
    def status(self) -> SaveStatus:
        return self._status

    @property
    def pending(self) -> bool:
        """True while a snapshot newer than the last successful save exists."""
        return self._version != self._saved_version

    def add_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def _set_status(self, status: SaveStatus) -> None:
        if status == self._status:
            return
        self._status = status
        for listener in list(self._listeners):
            listener(status)

    def notify(self, blocks: Sequence[Block]) -> None:
        """Record a new snapshot and restart the debounce timer; must run inside an event loop."""
        self._snapshot = list(blocks)
        self._version += 1
        self._set_status(SaveStatus.unsaved)
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().create_task(self._run_after_delay())

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def _run_after_delay(self) -> None:
        await asyncio.sleep(self.debounce)
        # Restarting the timer must not cancel a save that has already begun.
        await asyncio.shield(self._save())

    async def _save(self) -> None:
        async with self._lock:
            if self._snapshot is None or not self.pending:
                return
            version, snapshot = self._version, self._snapshot
            self._set_status(SaveStatus.saving)
            logger.debug("Saving %d blocks for document %s", len(snapshot), self.document_id)
            try:
                await self._replace_blocks(snapshot)
            except Exception:
                logger.exception("Auto-save failed for document %s", self.document_id)
                self._set_status(SaveStatus.error)
                return
            self._saved_version = version
            # A newer snapshot arrived while saving; its own timer will write it.
            self._set_status(SaveStatus.unsaved if self.pending else SaveStatus.saved)

    async def _replace_blocks(self, blocks: list[Block]) -> None:
        replace = self.store.replace_blocks
        if inspect.iscoroutinefunction(replace):
            await replace(self.document_id, blocks)
        else:
            # Blocking stores (SQLite) run in a worker thread so the loop keeps dispatching.
            await asyncio.to_thread(replace, self.document_id, blocks)

    async def flush(self) -> None:
        """Cancel the pending timer and save the current snapshot now."""
        self._cancel_timer()
        await self._save()

    def close(self) -> None:
        """Cancel a pending timer; an in-flight save is left to settle."""
        self._cancel_timer()
