"""Run blocking calls off the UI thread and deliver results back to it."""

import os
import queue
import threading
from typing import Any, Callable, Optional

import urwid


DoneCallback = Callable[[Any, Optional[BaseException]], None]


class BackgroundRunner:
    """Thread per call; results come back through a pipe the main loop watches."""

    def __init__(self, loop: urwid.MainLoop):
        self.loop = loop
        self._results: queue.Queue = queue.Queue()
        self._closed = False
        self._lock = threading.Lock()
        self._write_fd = loop.watch_pipe(self._drain)

    def submit(self, fn: Callable[[], Any], on_done: DoneCallback) -> threading.Thread:
        """Run ``fn`` on a worker thread, then ``on_done(result, error)`` on the UI thread."""
        def work():
            try:
                result, error = fn(), None
            except Exception as e:
                result, error = None, e
            self._results.put((on_done, result, error))
            with self._lock:
                # Nothing drains the queue once closed
                if not self._closed:
                    os.write(self._write_fd, b"\n")

        thread = threading.Thread(target=work, name="ai-request", daemon=True)
        thread.start()
        return thread

    def _drain(self, data: bytes) -> bool:
        while True:
            try:
                on_done, result, error = self._results.get_nowait()
            except queue.Empty:
                break
            on_done(result, error)
        # Keep the pipe open
        return True

    def close(self):
        """Stop watching the pipe. Late results are dropped."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self.loop.remove_watch_pipe(self._write_fd)
            os.close(self._write_fd)
