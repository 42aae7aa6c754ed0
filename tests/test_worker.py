"""Tests for handing background results back to the urwid event loop."""

import threading

import urwid

from langbuilder.ui.worker import BackgroundRunner


class DummyScreen(urwid.BaseScreen):
    """Screen that never touches the terminal."""

    def draw_screen(self, size, canvas):
        pass


def stop_loop():
    raise urwid.ExitMainLoop()


class TestBackgroundRunner:
    """Test result delivery through the watched pipe."""

    def setup_method(self):
        self.loop = urwid.MainLoop(urwid.SolidFill(), screen=DummyScreen())
        self.runner = BackgroundRunner(self.loop)
        self.delivered = []

    def teardown_method(self):
        self.runner.close()

    def record_and_stop(self, result, error):
        self.delivered.append((result, error, threading.current_thread()))
        stop_loop()

    def run_loop(self):
        # Give up rather than hang if nothing arrives
        self.loop.event_loop.alarm(5, stop_loop)
        self.loop.event_loop.run()

    def test_result_is_delivered_on_loop_thread(self):
        self.runner.submit(lambda: 42, self.record_and_stop)
        self.run_loop()
        assert self.delivered == [(42, None, threading.current_thread())]

    def test_exception_is_delivered(self):
        failure = ValueError("boom")

        def fail():
            raise failure

        self.runner.submit(fail, self.record_and_stop)
        self.run_loop()

        assert len(self.delivered) == 1
        result, error, _ = self.delivered[0]
        assert result is None
        assert error is failure

    def test_drain_delivers_in_completion_order(self):
        results = []
        self.runner.submit(lambda: "first", lambda r, e: results.append(r)).join(5)
        self.runner.submit(lambda: "second", lambda r, e: results.append(r)).join(5)

        assert self.runner._drain(b"\n\n") is True
        assert results == ["first", "second"]

    def test_result_after_close_does_not_raise(self, monkeypatch):
        thread_errors = []
        monkeypatch.setattr(threading, "excepthook", thread_errors.append)
        release = threading.Event()

        thread = self.runner.submit(lambda: release.wait(5), self.record_and_stop)
        self.runner.close()
        self.runner.close()
        release.set()
        thread.join(5)

        assert not thread.is_alive()
        assert thread_errors == []
        assert self.delivered == []
