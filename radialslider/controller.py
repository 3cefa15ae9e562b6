# radialslider/controller.py
"""
Interaction controller: turns pointer, wheel, key and focus input into angle
changes on a ValueModel and fires the matching notifications.

Input is toolkit independent (positions, modifier sets, Direction keys); the
Qt widget translates its events before calling in. Every handler returns True
when the dial needs repainting.
"""
import logging
import math
from enum import Enum, auto
from typing import Callable, Iterable, Optional

from radialslider.key_repeat import KeyRepeatTimer
from radialslider.notifications import NotificationDispatcher, AdjustmentId, AdjustmentType
from radialslider.value_model import ValueModel

logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class Modifier(Enum):
    SHIFT = auto()      # snap to block increment
    CONTROL = auto()    # snap to unit increment


class InteractionState(Enum):
    IDLE = auto()
    POINTER_DRAGGING = auto()
    KEY_HELD = auto()


def key_adjustment_type(speed: int, unit: int) -> AdjustmentType:
    """Unit match is checked first, so equal increments report UNIT_*."""
    if speed > 0:
        return AdjustmentType.UNIT_INCREMENT if speed == unit else AdjustmentType.BLOCK_INCREMENT
    return AdjustmentType.UNIT_DECREMENT if speed == -unit else AdjustmentType.BLOCK_DECREMENT


def snap_angle(angle: float, step: float) -> float:
    """Round angle to the nearest multiple of step (half up). A zero step leaves it alone."""
    if step == 0:
        logger.debug("zero snapping step, angle left unsnapped")
        return angle
    return math.floor(angle / step + 0.5) * step


def pointer_angle(x: float, y: float, width: float, height: float) -> float:
    """
    Angle of the pointer around the centre of a width x height area.
    0 points right, angles grow counter-clockwise on screen; the y term is
    scaled so that a non-square dial behaves like an ellipse.
    """
    cx, cy = width / 2, height / 2
    scale = width / height if height else 1.0
    return math.atan2(scale * (y - cy), cx - x) + math.pi


class InteractionController:
    def __init__(self, model: ValueModel, scheduler, source=None,
                 on_redraw: Optional[Callable[[], None]] = None):
        self.model = model
        self.dispatcher = NotificationDispatcher(self if source is None else source,
                                                 lambda: self.model.enabled)
        self.key_timer = KeyRepeatTimer(scheduler, self._on_key_tick)
        self.on_redraw = on_redraw or (lambda: None)
        self.state = InteractionState.IDLE
        self._key = None  # direction currently held
        self._key_type = None  # adjustment type fixed at press time

    # ------------------------------------------------------------- programmatic
    def set_value(self, v: float) -> bool:
        changed = self.model.set_value(v)
        self.dispatcher.fire_changed()
        self.dispatcher.fire_adjusting(AdjustmentId.LAST, AdjustmentType.TRACK,
                                       self.model.value_as_int(), False)
        return changed

    def set_angle(self, angle: float) -> bool:
        return self.model.set_angle(angle)

    def set_enabled(self, enabled: bool) -> bool:
        enabled = bool(enabled)
        if enabled == self.model.enabled:
            return False
        self.model.enabled = enabled
        if not enabled:
            # abandon any interaction in progress without notifying
            self.key_timer.stop()
            self.state = InteractionState.IDLE
            self._key = None
            self._key_type = None
        logger.debug(f"enabled={enabled}")
        return True

    def focus_changed(self, focused: bool) -> bool:
        return self.model.set_focused(focused)

    # ------------------------------------------------------------- pointer
    def pointer_pressed(self, x: float, y: float, width: float, height: float,
                        modifiers: Iterable[Modifier] = ()) -> bool:
        if not self.model.enabled:
            return False
        if self.state == InteractionState.KEY_HELD:
            self._finish_key()
        changed = self._track_pointer(x, y, width, height, modifiers)
        self.state = InteractionState.POINTER_DRAGGING
        logger.debug(f"pointer pressed at ({x}, {y}), value={self.model.value()}")
        self.dispatcher.fire_adjusting(AdjustmentId.FIRST, AdjustmentType.TRACK,
                                       self.model.value_as_int(), True)
        return changed

    def pointer_dragged(self, x: float, y: float, width: float, height: float,
                        modifiers: Iterable[Modifier] = ()) -> bool:
        if not self.model.enabled or self.state != InteractionState.POINTER_DRAGGING:
            return False
        changed = self._track_pointer(x, y, width, height, modifiers)
        self.dispatcher.fire_adjusting(AdjustmentId.VALUE_CHANGED, AdjustmentType.TRACK,
                                       self.model.value_as_int(), True)
        return changed

    def pointer_released(self) -> bool:
        if not self.model.enabled or self.state != InteractionState.POINTER_DRAGGING:
            return False
        self.state = InteractionState.IDLE
        logger.debug(f"pointer released, value={self.model.value()}")
        self.dispatcher.fire_adjusting(AdjustmentId.LAST, AdjustmentType.TRACK,
                                       self.model.value_as_int(), False)
        self.dispatcher.fire_changed()
        return False

    def _track_pointer(self, x, y, width, height, modifiers) -> bool:
        modifiers = set(modifiers)
        angle = pointer_angle(x, y, width, height)
        if Modifier.SHIFT in modifiers:
            inc = self.model.block_increment()
        elif Modifier.CONTROL in modifiers:
            inc = self.model.unit_increment()
        else:
            inc = 0
        # non-positive increments never snap
        if inc > 0:
            angle = snap_angle(angle, math.radians(inc))
        return self.model.set_angle(angle)

    # ------------------------------------------------------------- wheel
    def wheel_rotated(self, rotation: float) -> bool:
        """rotation in notches, positive when turned towards the user"""
        if not self.model.enabled or rotation == 0:
            return False
        delta = math.radians(rotation * self.model.unit_increment())
        changed = self.model.set_angle(self.model.angle() - delta)
        evtype = AdjustmentType.UNIT_DECREMENT if rotation > 0 else AdjustmentType.UNIT_INCREMENT
        self.dispatcher.fire_adjusting(AdjustmentId.LAST, evtype, self.model.value_as_int(), False)
        self.dispatcher.fire_changed()
        return changed

    # ------------------------------------------------------------- keys
    def key_speed(self, key: Direction) -> int:
        if key == Direction.LEFT:
            return self.model.unit_increment()
        if key == Direction.RIGHT:
            return -self.model.unit_increment()
        if key == Direction.UP:
            return self.model.block_increment()
        return -self.model.block_increment()

    def key_pressed(self, key: Optional[Direction], modifiers: Iterable[Modifier] = ()) -> bool:
        if not self.model.enabled or key is None:
            return False
        if self.state == InteractionState.POINTER_DRAGGING:
            return False
        speed = self.key_speed(key)
        step = math.radians(speed)
        angle = self.model.angle() + step
        if Modifier.SHIFT in set(modifiers):
            angle = snap_angle(angle, step)
        changed = self.model.set_angle(angle)

        self._key = key
        self._key_type = key_adjustment_type(speed, self.model.unit_increment())
        self.state = InteractionState.KEY_HELD
        logger.debug(f"key {key.name} pressed, value={self.model.value()}")
        self.dispatcher.fire_adjusting(AdjustmentId.FIRST, self._key_type,
                                       self.model.value_as_int(), True)
        self.key_timer.start(speed)
        return changed

    def key_released(self) -> bool:
        if not self.model.enabled or self.state != InteractionState.KEY_HELD:
            return False
        self._finish_key()
        return False

    def _finish_key(self):
        key, evtype = self._key, self._key_type
        self.key_timer.stop()
        self.state = InteractionState.IDLE
        self._key = None
        self._key_type = None
        logger.debug(f"key {key.name} released, value={self.model.value()}")
        self.dispatcher.fire_adjusting(AdjustmentId.LAST, evtype,
                                       self.model.value_as_int(), False)
        self.dispatcher.fire_changed()

    def _on_key_tick(self, speed_degrees: int):
        self.model.set_angle(self.model.angle() + math.radians(speed_degrees))
        self.dispatcher.fire_adjusting(AdjustmentId.VALUE_CHANGED, self._key_type,
                                       self.model.value_as_int(), True)
        self.on_redraw()
