"""Tests for the desktop entry point (no window is opened)."""
import time

import pygame

from pongview import app, config
from pongview.scheduler import FrameScheduler


class TestParser:

    def test_defaults(self):
        args = app.build_parser().parse_args([])
        assert args.width == config.SCREEN_WIDTH
        assert args.height == config.SCREEN_HEIGHT
        assert args.fps == config.FPS
        assert args.seed is None
        assert args.fullscreen is False
        assert args.log_level is None

    def test_options(self):
        args = app.build_parser().parse_args(
            ['--width', '720', '--height', '1280', '--fps', '30', '--seed', '7', '--fullscreen']
        )
        assert (args.width, args.height, args.fps, args.seed) == (720, 1280, 30, 7)
        assert args.fullscreen is True

    def test_critical_log_level_accepted(self):
        assert app.build_parser().parse_args(['--log-level', 'CRITICAL']).log_level == 'CRITICAL'


class TestMain:

    def test_invalid_fps_exits_before_opening_window(self, capsys):
        assert app.main(['--fps', '0', '--log-level', 'ERROR']) == 2
        assert "fps must be positive" in capsys.readouterr().out

    def test_invalid_window_size_exits_before_opening_window(self, capsys):
        assert app.main(['--width', '0', '--log-level', 'ERROR']) == 2
        assert "[app] ERROR:" in capsys.readouterr().out


class TestRequestFrame:

    def setup_method(self):
        pygame.display.init()
        pygame.event.clear()
        app._frame_pending.clear()

    def teardown_method(self):
        app._frame_pending.clear()
        pygame.display.quit()

    def test_posts_frame_event(self):
        app.request_frame()
        events = pygame.event.get(app.FRAME_EVENT)
        assert len(events) == 1

    def test_undrawn_frame_absorbs_further_requests(self):
        for _ in range(30):
            app.request_frame()
        assert len(pygame.event.get(app.FRAME_EVENT)) == 1

    def test_request_after_draw_posts_again(self):
        app.request_frame()
        pygame.event.get(app.FRAME_EVENT)
        app._frame_pending.clear()
        app.request_frame()
        assert len(pygame.event.get(app.FRAME_EVENT)) == 1

    def test_stalled_loop_leaves_single_frame_queued(self):
        scheduler = FrameScheduler(app.request_frame, fps=100)
        scheduler.start()
        try:
            time.sleep(0.3)
        finally:
            scheduler.stop()
        assert scheduler.frames > 1
        assert len(pygame.event.get(app.FRAME_EVENT)) <= 1


class TestRun:

    def test_frame_event_draws_and_rearms(self, monkeypatch):
        drawn = []

        class FakeView:
            def on_draw(self):
                drawn.append(app._frame_pending.is_set())

        monkeypatch.setattr(pygame.display, 'flip', lambda: None)
        pygame.display.init()
        try:
            pygame.event.clear()
            app._frame_pending.clear()
            app.request_frame()
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            app.run(FakeView())
            assert drawn == [False]
        finally:
            app._frame_pending.clear()
            pygame.display.quit()
