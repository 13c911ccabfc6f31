"""
Cancellation signals
====================

A CancellationSignal is a one-shot switch: it starts active and moves to
signaled exactly once, running every registered callback at that moment.
The library never cancels anything itself; it only lets callers observe
the transition as an awaitable (when_cancelled) or arm it with a delay
(cancel_after).

Signals belong to a single event loop and are not thread-safe.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .._helpers import check_non_negative

logger = logging.getLogger(__name__)


def _noop() -> None:
    pass


class CancellationSignal:
    """One-shot active -> signaled transition source."""

    __slots__ = ("_callbacks", "_cancelled", "_timer")

    def __init__(self) -> None:
        self._cancelled = False
        self._callbacks: list[Callable[[], object]] = []
        self._timer: asyncio.TimerHandle | None = None

    def __repr__(self) -> str:
        state = "signaled" if self._cancelled else "active"
        return f"<CancellationSignal {state} callbacks={len(self._callbacks)}>"

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """
        Move to signaled and run registered callbacks in registration order.

        Repeated calls are no-ops. Every callback runs even if an earlier one
        raises; failures are raised afterwards, a single one as-is and
        several as an ExceptionGroup.
        """
        if self._cancelled:
            return
        self._cancelled = True
        self.close()

        callbacks, self._callbacks = self._callbacks, []
        logger.debug("Cancellation signaled, running %d callback(s)", len(callbacks))
        errors: list[Exception] = []
        for callback in callbacks:
            try:
                callback()
            except Exception as exc:
                errors.append(exc)

        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise ExceptionGroup("cancellation callbacks failed", errors)

    def register(self, callback: Callable[[], object]) -> Callable[[], None]:
        """
        Run callback when the signal fires, return a function that undoes it.

        If the signal has already fired, callback runs immediately.
        """
        if self._cancelled:
            callback()
            return _noop

        self._callbacks.append(callback)

        def unregister() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unregister

    def cancel_after(self, seconds: float) -> None:
        """
        Fire on its own once at least `seconds` have passed on the loop clock.

        Re-arming replaces a pending timer. Requires a running event loop.
        """
        check_non_negative("cancel_after(): seconds", seconds)
        if self._cancelled:
            return

        loop = asyncio.get_running_loop()
        deadline = loop.time() + seconds
        self.close()
        self._arm(loop, deadline)
        logger.debug("Cancellation armed to fire in %.3fs", seconds)

    def close(self) -> None:
        """Drop a pending cancel_after() timer, if any."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def wait(self) -> None:
        """Suspend until the signal fires."""
        await when_cancelled(self)

    def _arm(self, loop: asyncio.AbstractEventLoop, deadline: float) -> None:
        self._timer = loop.call_at(deadline, self._on_deadline, loop, deadline)

    def _on_deadline(self, loop: asyncio.AbstractEventLoop, deadline: float) -> None:
        self._timer = None
        # call_at may run up to one clock tick before the deadline
        if loop.time() < deadline:
            self._arm(loop, deadline)
            return
        self.cancel()


def when_cancelled(signal: CancellationSignal) -> asyncio.Future[None]:
    """
    Return a future that resolves to None the moment signal fires.

    The future never resolves if the signal never fires. Cancelling the
    future detaches it from the signal. Must be called with a running loop.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[None] = loop.create_future()

    def complete() -> None:
        if not future.done():
            future.set_result(None)

    unregister = signal.register(complete)
    future.add_done_callback(lambda _: unregister())
    return future


def cancel_after(seconds: float) -> CancellationSignal:
    """
    Create a new signal that fires by itself after `seconds`.

    Example:
        signal = cancel_after(0.5)
        await signal.wait()   # resumes ~0.5s later
    """
    signal = CancellationSignal()
    signal.cancel_after(seconds)
    return signal


__all__ = ("CancellationSignal", "cancel_after", "when_cancelled")
