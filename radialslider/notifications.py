# radialslider/notifications.py
"""
Two independent notification channels:
- change: settled commits, observers get the source and re-read the value
- adjustment: every live step, observers get an AdjustmentEvent
Both are silent while the slider is disabled.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, Tuple

logger = logging.getLogger(__name__)


class AdjustmentId(Enum):
    FIRST = auto()
    VALUE_CHANGED = auto()
    LAST = auto()


class AdjustmentType(Enum):
    TRACK = auto()
    UNIT_INCREMENT = auto()
    UNIT_DECREMENT = auto()
    BLOCK_INCREMENT = auto()
    BLOCK_DECREMENT = auto()


@dataclass(frozen=True)
class AdjustmentEvent:
    source: Any
    id: AdjustmentId
    type: AdjustmentType
    value: int
    is_adjusting: bool


class ObserverRegistry:
    """Ordered set of callbacks. Dispatch iterates a snapshot, so callbacks
    may add or remove observers (themselves included) while being notified."""

    def __init__(self):
        # dict keys keep insertion order and give O(1) add/remove
        self._observers: Dict[Callable, None] = {}

    def add(self, observer: Callable):
        if not callable(observer):
            raise TypeError(f"observer is not callable: {observer!r}")
        self._observers.setdefault(observer, None)

    def remove(self, observer: Callable) -> bool:
        if observer not in self._observers:
            return False
        del self._observers[observer]
        return True

    def snapshot(self) -> Tuple[Callable, ...]:
        return tuple(self._observers)

    def notify(self, *args):
        for obs in self.snapshot():
            obs(*args)

    def __len__(self):
        return len(self._observers)

    def __contains__(self, observer):
        return observer in self._observers


class NotificationDispatcher:
    def __init__(self, source: Any, is_enabled: Callable[[], bool]):
        self.source = source
        self._is_enabled = is_enabled
        self.change_observers = ObserverRegistry()
        self.adjustment_observers = ObserverRegistry()

    def fire_changed(self):
        if not self._is_enabled() or not self.change_observers:
            return
        self.change_observers.notify(self.source)

    def fire_adjusting(self, id: AdjustmentId, type: AdjustmentType, value: int, is_adjusting: bool):
        if not self._is_enabled() or not self.adjustment_observers:
            return
        evt = AdjustmentEvent(self.source, id, type, int(value), bool(is_adjusting))
        logger.debug(f"adjustment {evt.id.name} {evt.type.name} value={evt.value} adjusting={evt.is_adjusting}")
        self.adjustment_observers.notify(evt)
