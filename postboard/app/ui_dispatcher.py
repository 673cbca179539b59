"""Run blocking work off the UI thread and apply results back on it.

Network calls are submitted to a ``ThreadPoolExecutor``. When a future
finishes, its success or error continuation is queued; ``drain`` runs the
queued continuations on the calling thread, which must be the thread that
owns view-model state (the Tk main loop or the NiceGUI event loop).

Dependencies:
    - ``concurrent.futures`` for the worker pool.
    - Tk ``after`` / ``after_cancel`` (injected) when pumped by the Tk app.

Call context:
    ``PostStoreVM`` submits every request through ``submit``. The Tk app calls
    ``pump`` once at startup; the NiceGUI page drives ``drain`` from
    ``ui.timer``; tests call ``join``.
"""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Set, TypeVar

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class UiDispatcher:
    """Worker pool plus a completion queue drained by the UI thread."""

    def __init__(self, max_workers: int = 4) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="postboard-io"
        )
        self._completed: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self._pending: Set[Future] = set()
        self._idle = threading.Condition()
        self._pump_cancel: Optional[Callable[[str], None]] = None
        self._pump_token: Optional[str] = None

    def submit(
        self,
        work: Callable[[], T],
        *,
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
        label: str = "task",
    ) -> Future:
        """Run ``work`` on the pool; queue the matching continuation.

        Neither continuation runs until ``drain`` is called, so callers never
        observe a result synchronously.
        """
        future = self._executor.submit(work)
        with self._idle:
            self._pending.add(future)

        def _on_done(fut: Future) -> None:
            exc = fut.exception()
            if exc is None:
                result = fut.result()
                self._completed.put(lambda: on_success(result))
            else:
                LOGGER.debug("%s failed: %s", label, exc)
                self._completed.put(lambda: on_error(exc))
            with self._idle:
                self._pending.discard(fut)
                self._idle.notify_all()

        future.add_done_callback(_on_done)
        return future

    def drain(self) -> int:
        """Run every queued continuation on the current thread.

        Returns:
            Number of continuations executed.
        """
        count = 0
        while True:
            try:
                continuation = self._completed.get_nowait()
            except queue.Empty:
                return count
            count += 1
            try:
                continuation()
            except Exception:
                LOGGER.exception("UI continuation failed")

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait until no work is pending, then drain.

        Returns:
            ``True`` if all work finished before ``timeout``.
        """
        with self._idle:
            finished = self._idle.wait_for(lambda: not self._pending, timeout=timeout)
        self.drain()
        return finished

    @property
    def pending_count(self) -> int:
        with self._idle:
            return len(self._pending)

    def pump(
        self,
        schedule: Callable[[int, Callable[[], None]], str],
        cancel: Callable[[str], None],
        interval_ms: int = 50,
    ) -> None:
        """Drain on a repeating UI timer until ``stop_pump`` is called.

        Args:
            schedule: Compatible with Tk ``after(delay_ms, callback)``.
            cancel: Compatible with Tk ``after_cancel(token)``.
        """
        self.stop_pump()
        delay = max(1, int(interval_ms))
        self._pump_cancel = cancel

        def _tick() -> None:
            self._pump_token = None
            self.drain()
            if self._pump_cancel is cancel:
                self._pump_token = schedule(delay, _tick)

        self._pump_token = schedule(delay, _tick)

    def stop_pump(self) -> None:
        cancel, token = self._pump_cancel, self._pump_token
        self._pump_cancel = None
        self._pump_token = None
        if cancel is not None and token is not None:
            cancel(token)

    def shutdown(self, wait: bool = False) -> None:
        """Stop the pump and the worker pool; in-flight requests are not aborted."""
        self.stop_pump()
        self._executor.shutdown(wait=wait)


__all__ = ["UiDispatcher"]
