# radialslider/value_model.py
"""
Value model of the radial slider: a bounded real value and its angle.

The angle domain is [0, 2pi) and the value domain is [minimum, maximum);
the mapping between them is affine. Direct assignment clamps to the closed
interval [minimum, maximum], so maximum can be stored but never reached by
turning the dial.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from radialslider.config import PI2, DEFAULT_UNIT_INCREMENT, DEFAULT_BLOCK_INCREMENT

logger = logging.getLogger(__name__)


class UnsupportedOperation(NotImplementedError):
    """Raised for configuration changes the model refuses (e.g. integer range setters)."""


class Tick(Enum):
    UNIT = "unit"
    BLOCK = "block"


NO_TICKS = frozenset()


@dataclass(frozen=True)
class ValueRange:
    minimum: float  # included
    maximum: float  # excluded

    def __post_init__(self):
        if not self.minimum < self.maximum:
            raise ValueError(f"minimum ({self.minimum}) must be lower than maximum ({self.maximum})")

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def clamp(self, v: float) -> float:
        return float(np.clip(v, self.minimum, self.maximum))


def normalize_angle(angle: float) -> float:
    """Fold any angle into [0, 2pi)."""
    a = (angle % PI2 + PI2) % PI2
    # float rounding can land exactly on 2pi for tiny negative inputs
    return 0.0 if a >= PI2 else a


def value_to_angle(value: float, rng: ValueRange) -> float:
    return normalize_angle((value - rng.minimum) / rng.span * PI2)


def angle_to_value(angle: float, rng: ValueRange) -> float:
    return rng.minimum + normalize_angle(angle) / PI2 * rng.span


class ValueModel:
    """Slider state. Setters return True when something visible changed."""

    def __init__(self, value: float, minimum: float, maximum: float):
        self.range = ValueRange(float(minimum), float(maximum))
        self._value = self.range.clamp(value)
        self._unit_increment = DEFAULT_UNIT_INCREMENT
        self._block_increment = DEFAULT_BLOCK_INCREMENT
        self._ticks = frozenset({Tick.BLOCK})
        self.focused = False
        self.enabled = True

    # value
    def value(self) -> float:
        return self._value

    def set_value(self, v: float) -> bool:
        v = self.range.clamp(v)
        if v == self._value:
            return False
        self._value = v
        return True

    def minimum(self) -> float:
        return self.range.minimum

    def maximum(self) -> float:
        return self.range.maximum

    # angle
    def angle(self) -> float:
        return value_to_angle(self._value, self.range)

    def set_angle(self, angle: float) -> bool:
        # the round trip through angle() drifts by a few ulps
        if math.isclose(normalize_angle(angle), self.angle(), abs_tol=1e-12):
            return False
        v = angle_to_value(angle, self.range)
        if v == self._value:
            return False
        self._value = v
        return True

    # integer view, derived from the real value
    def value_as_int(self) -> int:
        return math.trunc(self._value)

    def minimum_as_int(self) -> int:
        return math.trunc(self.range.minimum)

    def maximum_as_int(self) -> int:
        return math.trunc(self.range.maximum)

    def set_minimum_as_int(self, v: int):
        raise UnsupportedOperation("the range of a radial slider is fixed at construction")

    def set_maximum_as_int(self, v: int):
        raise UnsupportedOperation("the range of a radial slider is fixed at construction")

    def visible_amount(self) -> int:
        return 0

    def set_visible_amount(self, v: int):
        raise UnsupportedOperation("a radial slider has no visible amount")

    # increments (degrees)
    def unit_increment(self) -> int:
        return self._unit_increment

    def set_unit_increment(self, inc: int) -> bool:
        inc = int(inc)
        if inc <= 0:
            logger.warning(f"unit increment set to {inc}, pointer snapping and unit ticks are disabled")
        changed = inc != self._unit_increment
        self._unit_increment = inc
        return changed

    def block_increment(self) -> int:
        return self._block_increment

    def set_block_increment(self, inc: int) -> bool:
        inc = int(inc)
        if inc <= 0:
            logger.warning(f"block increment set to {inc}, pointer snapping and block ticks are disabled")
        changed = inc != self._block_increment
        self._block_increment = inc
        return changed

    # ticks
    def ticks(self) -> frozenset:
        return self._ticks

    def set_ticks(self, ticks) -> bool:
        ticks = frozenset(ticks)
        for t in ticks:
            if not isinstance(t, Tick):
                raise TypeError(f"not a Tick: {t!r}")
        if ticks == self._ticks:
            return False
        self._ticks = ticks
        return True

    def shows_tick(self, tick: Tick) -> bool:
        return tick in self._ticks

    def set_focused(self, focused: bool) -> bool:
        focused = bool(focused)
        if focused == self.focused:
            return False
        self.focused = focused
        return True
