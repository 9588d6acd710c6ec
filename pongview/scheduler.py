"""Fixed-rate frame scheduler.

Runs a background thread that calls a callback roughly `fps` times per
second until stopped. The callback is expected to be cheap: in the pygame
host it only posts a frame event so the actual drawing happens on the main
thread, next to input handling.
"""

import threading
from typing import Callable

from pongview.logging import get_logger

log = get_logger('scheduler')


class FrameScheduler:
    """Background timing loop signalling "draw now" at a fixed cadence.

    A failing callback is logged and the loop keeps going; a single bad
    frame never ends the animation.

    Usage:
        scheduler = FrameScheduler(view.request_frame, fps=60)
        scheduler.start()
        ...
        scheduler.stop()
    """

    def __init__(self, callback: Callable[[], None], fps: int = 60):
        """Create a stopped scheduler.

        Args:
            callback: Called once per frame from the scheduler thread
            fps: Target frames per second

        Raises:
            ValueError: If fps is not positive
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._callback = callback
        self._fps = fps
        self._stop_event = threading.Event()
        self._thread = None
        self._frames = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def interval(self) -> float:
        """Seconds slept between two callbacks (1000/fps ms)."""
        return (1000 // self._fps) / 1000.0

    @property
    def frames(self) -> int:
        """Number of callback invocations so far, failed ones included."""
        return self._frames

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the scheduler thread.

        Raises:
            RuntimeError: If the scheduler was already started
        """
        if self._thread is not None:
            raise RuntimeError("FrameScheduler can only be started once")
        self._thread = threading.Thread(
            target=self._run,
            name='frame-scheduler',
            daemon=True,
        )
        self._thread.start()
        log.debug("Started at %d fps", self._fps)

    def stop(self, timeout: float = 1.0) -> None:
        """Stop the loop and wait for the thread to exit.

        Safe to call more than once, or on a scheduler never started.
        """
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
            log.debug("Stopped after %d frames", self._frames)

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self._frames += 1
            try:
                self._callback()
            except Exception:
                log.exception("Frame callback failed (frame %d)", self._frames)
            self._stop_event.wait(self.interval)

    def __enter__(self) -> 'FrameScheduler':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
