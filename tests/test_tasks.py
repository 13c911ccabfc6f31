"""Tests for run_sync and cancellation signals."""

import asyncio
import concurrent.futures
import threading

import pytest
from kungfu import LazyCoroResult, Ok, Result

from fluentfx import CancellationSignal, cancel_after, run_sync, when_cancelled


class TestRunSync:
    """Tests for run_sync()."""

    def test_returns_coroutine_result(self):
        async def compute():
            await asyncio.sleep(0)
            return 42

        assert run_sync(compute()) == 42

    def test_reraises_coroutine_failure(self):
        async def explode():
            raise LookupError("missing")

        with pytest.raises(LookupError, match="missing"):
            run_sync(explode())

    def test_drives_future_on_its_own_loop(self):
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            loop.call_soon(future.set_result, "done")

            assert run_sync(future) == "done"
        finally:
            loop.close()

    def test_reraises_future_failure(self):
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            loop.call_soon(future.set_exception, ValueError("bad"))

            with pytest.raises(ValueError, match="bad"):
                run_sync(future)
        finally:
            loop.close()

    def test_completed_future_returns_immediately(self):
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            future.set_result(7)

            assert run_sync(future) == 7
        finally:
            loop.close()

    def test_does_not_start_threads(self):
        before = threading.active_count()

        async def compute():
            return threading.active_count()

        assert run_sync(compute()) == before

    def test_runs_lazy_coro_result(self):
        async def run() -> Result[int, str]:
            return Ok(5)

        result = run_sync(LazyCoroResult(run))

        assert result.unwrap() == 5

    def test_waits_on_concurrent_future(self):
        future = concurrent.futures.Future()
        timer = threading.Timer(0.01, future.set_result, args=("from thread",))
        timer.start()
        try:
            assert run_sync(future) == "from thread"
        finally:
            timer.join()

    def test_reraises_concurrent_future_failure(self):
        future = concurrent.futures.Future()
        future.set_exception(KeyError("gone"))

        with pytest.raises(KeyError, match="gone"):
            run_sync(future)

    def test_waits_on_future_of_loop_running_in_another_thread(self):
        loop = asyncio.new_event_loop()
        started = threading.Event()
        loop.call_soon(started.set)
        worker = threading.Thread(target=loop.run_forever)
        worker.start()
        try:
            assert started.wait(timeout=1.0)
            future = asyncio.run_coroutine_threadsafe(self._make_pending_future(), loop).result()
            loop.call_soon_threadsafe(loop.call_later, 0.01, future.set_result, "remote")

            assert run_sync(future) == "remote"
        finally:
            loop.call_soon_threadsafe(loop.stop)
            worker.join()
            loop.close()

    def test_reraises_failure_from_loop_running_in_another_thread(self):
        loop = asyncio.new_event_loop()
        started = threading.Event()
        loop.call_soon(started.set)
        worker = threading.Thread(target=loop.run_forever)
        worker.start()
        try:
            assert started.wait(timeout=1.0)
            future = asyncio.run_coroutine_threadsafe(self._make_pending_future(), loop).result()
            loop.call_soon_threadsafe(future.set_exception, ValueError("remote failure"))

            with pytest.raises(ValueError, match="remote failure"):
                run_sync(future)
        finally:
            loop.call_soon_threadsafe(loop.stop)
            worker.join()
            loop.close()

    @staticmethod
    async def _make_pending_future():
        return asyncio.get_running_loop().create_future()

    @pytest.mark.asyncio
    async def test_refuses_inside_running_loop(self):
        async def compute():
            return 1

        coro = compute()
        with pytest.raises(RuntimeError, match="running event loop"):
            run_sync(coro)
        coro.close()


class TestCancellationSignal:
    """Tests for CancellationSignal."""

    def test_starts_active(self):
        signal = CancellationSignal()

        assert signal.cancelled is False
        assert "active" in repr(signal)

    def test_cancel_runs_callbacks_once_in_order(self):
        signal = CancellationSignal()
        calls = []
        signal.register(lambda: calls.append("a"))
        signal.register(lambda: calls.append("b"))

        signal.cancel()
        signal.cancel()

        assert signal.cancelled is True
        assert calls == ["a", "b"]

    def test_register_after_cancel_runs_immediately(self):
        signal = CancellationSignal()
        signal.cancel()
        calls = []

        signal.register(lambda: calls.append(1))

        assert calls == [1]

    def test_unregister(self):
        signal = CancellationSignal()
        calls = []
        unregister = signal.register(lambda: calls.append(1))

        unregister()
        signal.cancel()

        assert calls == []

    def test_failing_callback_does_not_skip_later_ones(self):
        signal = CancellationSignal()
        calls = []

        def bad():
            raise RuntimeError("callback failed")

        signal.register(bad)
        signal.register(lambda: calls.append("after"))

        with pytest.raises(RuntimeError, match="callback failed"):
            signal.cancel()

        assert signal.cancelled
        assert calls == ["after"]

    def test_several_failing_callbacks_raise_group(self):
        signal = CancellationSignal()
        calls = []

        def bad(name):
            def callback():
                raise ValueError(name)

            return callback

        signal.register(bad("first"))
        signal.register(lambda: calls.append("ok"))
        signal.register(bad("second"))

        with pytest.raises(ExceptionGroup) as info:
            signal.cancel()

        assert [str(e) for e in info.value.exceptions] == ["first", "second"]
        assert calls == ["ok"]

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            CancellationSignal().cancel_after(-1)


class TestWhenCancelled:
    """Tests for when_cancelled()."""

    @pytest.mark.asyncio
    async def test_completes_when_signaled(self):
        signal = CancellationSignal()
        future = when_cancelled(signal)

        await asyncio.sleep(0.01)
        assert not future.done()

        signal.cancel()

        assert future.done()
        assert await future is None

    @pytest.mark.asyncio
    async def test_never_completes_without_signal(self):
        signal = CancellationSignal()
        future = when_cancelled(signal)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(asyncio.shield(future), timeout=0.05)

        assert not future.done()
        future.cancel()

    @pytest.mark.asyncio
    async def test_already_signaled_completes_immediately(self):
        signal = CancellationSignal()
        signal.cancel()

        future = when_cancelled(signal)

        assert future.done()

    @pytest.mark.asyncio
    async def test_completes_even_if_earlier_callback_fails(self):
        signal = CancellationSignal()

        def bad():
            raise RuntimeError("callback failed")

        signal.register(bad)
        future = when_cancelled(signal)

        with pytest.raises(RuntimeError, match="callback failed"):
            signal.cancel()

        assert future.done()
        assert await future is None

    @pytest.mark.asyncio
    async def test_cancelled_future_detaches_from_signal(self):
        signal = CancellationSignal()
        future = when_cancelled(signal)

        assert "callbacks=1" in repr(signal)

        future.cancel()
        await asyncio.sleep(0)

        assert "callbacks=0" in repr(signal)

        calls = []
        signal.register(lambda: calls.append("late"))
        signal.cancel()

        assert future.cancelled()
        assert calls == ["late"]

    @pytest.mark.asyncio
    async def test_wait(self):
        signal = CancellationSignal()
        asyncio.get_running_loop().call_later(0.01, signal.cancel)

        await asyncio.wait_for(signal.wait(), timeout=1.0)

        assert signal.cancelled


class TestCancelAfter:
    """Tests for cancel_after()."""

    @pytest.mark.asyncio
    async def test_fires_not_before_duration(self):
        loop = asyncio.get_running_loop()
        start = loop.time()
        fired_at = []

        signal = cancel_after(0.05)
        signal.register(lambda: fired_at.append(loop.time()))

        assert not signal.cancelled
        await asyncio.wait_for(signal.wait(), timeout=1.0)

        assert signal.cancelled
        assert fired_at[0] - start >= 0.05

    @pytest.mark.asyncio
    async def test_not_fired_early(self):
        signal = cancel_after(0.2)

        await asyncio.sleep(0.05)

        assert not signal.cancelled
        signal.close()

    @pytest.mark.asyncio
    async def test_close_disarms_timer(self):
        signal = cancel_after(0.01)
        signal.close()

        await asyncio.sleep(0.03)

        assert not signal.cancelled

    @pytest.mark.asyncio
    async def test_zero_delay_fires_on_next_loop_turn(self):
        signal = cancel_after(0)

        await asyncio.sleep(0.01)

        assert signal.cancelled

    def test_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            cancel_after(1.0)
