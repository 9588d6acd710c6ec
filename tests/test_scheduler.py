"""Tests for the fixed-rate frame scheduler."""
import threading
import time

import pytest

from pongview.logging import configure_logging
from pongview.scheduler import FrameScheduler


def wait_for(predicate, timeout=2.0):
    """Poll until predicate() is true or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


class TestFrameSchedulerSetup:
    """Tests for construction and lifecycle rules."""

    @pytest.mark.parametrize("fps", [0, -30])
    def test_fps_must_be_positive(self, fps):
        with pytest.raises(ValueError):
            FrameScheduler(lambda: None, fps=fps)

    def test_interval_uses_whole_milliseconds(self):
        assert FrameScheduler(lambda: None, fps=60).interval == pytest.approx(0.016)
        assert FrameScheduler(lambda: None, fps=50).interval == pytest.approx(0.020)

    def test_default_rate(self):
        assert FrameScheduler(lambda: None).fps == 60

    def test_not_running_before_start(self):
        scheduler = FrameScheduler(lambda: None)
        assert not scheduler.is_running
        assert scheduler.frames == 0

    def test_start_twice_rejected(self):
        scheduler = FrameScheduler(lambda: None, fps=100)
        scheduler.start()
        try:
            with pytest.raises(RuntimeError):
                scheduler.start()
        finally:
            scheduler.stop()

    def test_stop_without_start(self):
        FrameScheduler(lambda: None).stop()


class TestFrameSchedulerLoop:
    """Tests for the running loop."""

    def test_invokes_callback_repeatedly(self):
        calls = []
        scheduler = FrameScheduler(lambda: calls.append(time.monotonic()), fps=100)
        scheduler.start()
        try:
            assert wait_for(lambda: len(calls) >= 5)
        finally:
            scheduler.stop()
        assert scheduler.frames >= 5

    def test_callback_runs_off_caller_thread(self):
        seen = []
        done = threading.Event()

        def callback():
            seen.append(threading.current_thread())
            done.set()

        with FrameScheduler(callback, fps=100):
            assert done.wait(timeout=2.0)
        assert seen[0] is not threading.current_thread()
        assert seen[0].daemon

    def test_stop_ends_thread(self):
        scheduler = FrameScheduler(lambda: None, fps=100)
        scheduler.start()
        assert wait_for(lambda: scheduler.frames >= 1)
        scheduler.stop()
        assert not scheduler.is_running
        frames = scheduler.frames
        time.sleep(0.05)
        assert scheduler.frames == frames

    def test_failing_callback_does_not_stop_loop(self, capsys):
        configure_logging(level='INFO')
        calls = []

        def flaky():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("bad frame")

        scheduler = FrameScheduler(flaky, fps=100)
        scheduler.start()
        try:
            assert wait_for(lambda: len(calls) >= 3)
        finally:
            scheduler.stop()

        out = capsys.readouterr().out
        assert "[scheduler] ERROR: Frame callback failed (frame 1)" in out
        assert "RuntimeError: bad frame" in out

    def test_context_manager_stops(self):
        with FrameScheduler(lambda: None, fps=100) as scheduler:
            assert scheduler.is_running
        assert not scheduler.is_running
