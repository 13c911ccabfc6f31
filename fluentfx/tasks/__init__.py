from .cancellation import CancellationSignal, cancel_after, when_cancelled
from .sync import run_sync

__all__ = (
    # Cancellation
    "CancellationSignal",
    "cancel_after",
    "when_cancelled",
    # Blocking wait
    "run_sync",
)
