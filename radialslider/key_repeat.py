# radialslider/key_repeat.py
"""
Key-repeat for held direction keys.

A held key steps once on press, then again after an initial delay, then at
a faster fixed interval until released. The timer is a single-shot callback
that reschedules itself through a scheduler:

    scheduler.schedule(delay_ms, callback) -> handle   (handle.cancel())

QtScheduler runs on the Qt event loop; tests inject a fake one.
"""
import logging
from typing import Callable, Optional

from PyQt5.QtCore import QObject, QTimer

from radialslider.config import KEY_REPEAT_INITIAL_DELAY_MS, KEY_REPEAT_INTERVAL_MS

logger = logging.getLogger(__name__)


class _QtHandle:
    def __init__(self, timer: QTimer):
        self._timer = timer

    def cancel(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _QtHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = _QtHandle(timer)

        def fire():
            handle.cancel()
            callback()

        timer.timeout.connect(fire)
        timer.start(int(delay_ms))
        return handle


class KeyRepeatTimer:
    def __init__(self, scheduler, on_tick: Callable[[int], None],
                 initial_delay_ms: int = KEY_REPEAT_INITIAL_DELAY_MS,
                 repeat_interval_ms: int = KEY_REPEAT_INTERVAL_MS):
        self.scheduler = scheduler
        self.on_tick = on_tick
        self.initial_delay_ms = int(initial_delay_ms)
        self.repeat_interval_ms = int(repeat_interval_ms)

        self.speed_degrees = 0          # signed degrees per tick, 0 when idle
        self.interval_ms = self.initial_delay_ms
        self._running = False
        self._handle = None
        # bumped on every stop so a callback already in flight is dropped
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self, speed_degrees: int):
        self.stop()
        self.speed_degrees = int(speed_degrees)
        self.interval_ms = self.initial_delay_ms
        self._running = True
        logger.debug(f"key repeat started at {self.speed_degrees} deg/tick")
        self._schedule()

    def stop(self):
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._running:
            logger.debug("key repeat stopped")
        self._running = False
        self.speed_degrees = 0
        self.interval_ms = self.initial_delay_ms

    def _schedule(self):
        gen = self._generation
        self._handle = self.scheduler.schedule(self.interval_ms, lambda: self._fire(gen))

    def _fire(self, gen: int):
        if gen != self._generation or not self._running:
            return
        self._handle = None
        self.interval_ms = self.repeat_interval_ms
        self.on_tick(self.speed_degrees)
        # the tick handler may have stopped (or restarted) us
        if gen == self._generation and self._running:
            self._schedule()
