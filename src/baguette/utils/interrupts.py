## Graceful stop on Ctrl+C / SIGTERM for long file passes.
# baguette/src/baguette/utils/interrupts.py

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Iterator

from baguette.utils.logger import get_logger

logger = get_logger(__name__)

STOP_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGTERM") if hasattr(signal, name)
)


@contextmanager
def stop_on_signals() -> Iterator[threading.Event]:
    """
    Yield an Event that is set when SIGINT/SIGTERM arrives.

    The handlers only set the flag; callers decide where it is safe to
    stop. Previous handlers are restored on exit. Outside the main thread
    signals cannot be hooked, so the event is returned unwired.
    """
    stop = threading.Event()

    if threading.current_thread() is not threading.main_thread():
        yield stop
        return

    def _handler(signum, frame):
        logger.info(f"🛑 Received signal {signum}, stopping at next post boundary")
        stop.set()

    previous = {sig: signal.signal(sig, _handler) for sig in STOP_SIGNALS}
    try:
        yield stop
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
