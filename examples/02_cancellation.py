from __future__ import annotations

import asyncio
import contextlib

from _infra import banner, run

from fluentfx import cancel_after, loop_delayed, when_cancelled


async def main() -> None:
    banner("02_cancellation: cancel_after + when_cancelled")

    signal = cancel_after(0.3)
    ticker = asyncio.ensure_future(
        loop_delayed(10, lambda i: 0.1, lambda i: print(f"  tick {i}"))
    )

    await when_cancelled(signal)
    ticker.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await ticker
    print(f"  signal fired: {signal!r}")


if __name__ == "__main__":
    run(main)
