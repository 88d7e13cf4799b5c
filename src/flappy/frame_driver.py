"""
frame_driver.py: Cooperative once-per-frame loop with deterministic teardown.
"""

import threading
import time
from typing import Callable


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FrameDriver:
    """
    Calls on_frame(now) once per frame, strictly sequentially.

    wait() blocks until the next frame is due (e.g. pygame's Clock.tick).
    After stop(), no further frame fires, including one already waited for.
    """

    def __init__(self, on_frame: Callable[[float], None], wait: Callable[[], object],
                 clock: Callable[[], float] = monotonic_ms):
        self.on_frame = on_frame
        self.wait = wait
        self.clock = clock
        self.running = threading.Event()
        self.running.set()
        self.frames = 0

    def run_frame(self) -> bool:
        """One iteration of the loop. Returns False once stopped."""
        if not self.running.is_set():
            return False
        self.wait()
        if not self.running.is_set():
            return False
        self.on_frame(self.clock())
        self.frames += 1
        return True

    def run(self):
        while self.run_frame():
            pass

    def stop(self):
        self.running.clear()
