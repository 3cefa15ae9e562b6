# radialslider/widgets/radial_slider.py
import math

import numpy as np
from PyQt5.QtWidgets import QWidget
from PyQt5.QtGui import QPainter, QPen, QColor, QFont, QFontMetrics
from PyQt5.QtCore import Qt, QEvent, QPointF, QRectF, QSize, pyqtSignal

from radialslider.config import (DEFAULT_MINIMUM, DEFAULT_MAXIMUM, DEFAULT_LINE_WIDTH, MIN_FONT_CHARS,
                                 UNIT_TICK_FRACTION, BLOCK_TICK_FRACTION, ARROWHEAD_FRACTION,
                                 FOREGROUND_COLOR, DISABLED_COLOR)
from radialslider.controller import InteractionController, InteractionState, Direction, Modifier
from radialslider.formatting import format_double, format_degree
from radialslider.key_repeat import QtScheduler
from radialslider.value_model import ValueModel, Tick


QT_DIRECTION_KEYS = {
    Qt.Key_Left: Direction.LEFT,
    Qt.Key_Right: Direction.RIGHT,
    Qt.Key_Up: Direction.UP,
    Qt.Key_Down: Direction.DOWN,
}


def qt_modifiers(mods) -> set:
    out = set()
    if mods & Qt.ShiftModifier:
        out.add(Modifier.SHIFT)
    if mods & Qt.ControlModifier:
        out.add(Modifier.CONTROL)
    return out


class RadialSlider(QWidget):
    """
    Dial for picking a value by rotating an arrow:
    - drag with the left button (Shift snaps to block ticks, Ctrl to unit ticks)
    - wheel steps by the unit increment
    - Left/Right step by the unit increment, Up/Down by the block increment,
      held keys repeat (Shift snaps the first step)
    valueChanged fires on settled changes, adjusted on every live step.
    """
    valueChanged = pyqtSignal(float)
    adjusted = pyqtSignal(object)   # AdjustmentEvent

    def __init__(self, value=0.0, minimum=DEFAULT_MINIMUM, maximum=DEFAULT_MAXIMUM, parent=None, scheduler=None):
        super().__init__(parent)
        self._model = ValueModel(value, minimum, maximum)
        self._ctl = InteractionController(self._model, scheduler or QtScheduler(self),
                                          source=self, on_redraw=self.update)
        self._ctl.set_enabled(self.isEnabled())

        self._formatter = format_double
        self._line_width = DEFAULT_LINE_WIDTH
        self._showing_axis = False
        self._text_visible = True
        self._text_font = None  # None = automatic
        self._fg = QColor(*FOREGROUND_COLOR)
        self._disabled_col = QColor(*DISABLED_COLOR)

        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(40, 40)

        # Qt signals ride on the two notification channels
        self._ctl.dispatcher.change_observers.add(self._emit_value_changed)
        self._ctl.dispatcher.adjustment_observers.add(self._emit_adjusted)

    @classmethod
    def degrees(cls, parent=None):
        """Angle selector: 0..360 with the degree read-out."""
        s = cls(0.0, 0.0, 360.0, parent)
        s.setFormatter(format_degree)
        return s

    def sizeHint(self):
        return QSize(120, 120)

    # ------------------------------------------------------------------ value
    def value(self) -> float: return self._model.value()
    def intValue(self) -> int: return self._model.value_as_int()

    def setValue(self, v: float):
        if self._ctl.set_value(v):
            self.update()

    def minimum(self) -> float: return self._model.minimum()
    def maximum(self) -> float: return self._model.maximum()
    def intMinimum(self) -> int: return self._model.minimum_as_int()
    def intMaximum(self) -> int: return self._model.maximum_as_int()
    def setMinimum(self, v: int): self._model.set_minimum_as_int(v)
    def setMaximum(self, v: int): self._model.set_maximum_as_int(v)

    def angle(self) -> float: return self._model.angle()

    def setAngle(self, angle: float):
        if self._ctl.set_angle(angle):
            self.update()

    def isAdjusting(self) -> bool:
        return self._ctl.state != InteractionState.IDLE

    # ------------------------------------------------------------------ config
    def unitIncrement(self) -> int: return self._model.unit_increment()

    def setUnitIncrement(self, inc: int):
        if self._model.set_unit_increment(inc) and self._model.shows_tick(Tick.UNIT):
            self.update()

    def blockIncrement(self) -> int: return self._model.block_increment()

    def setBlockIncrement(self, inc: int):
        if self._model.set_block_increment(inc) and self._model.shows_tick(Tick.BLOCK):
            self.update()

    def ticks(self) -> frozenset: return self._model.ticks()

    def setTicks(self, ticks):
        if self._model.set_ticks(ticks):
            self.update()

    def formatter(self): return self._formatter

    def setFormatter(self, fmt):
        if fmt is not self._formatter:
            self._formatter = fmt
            self.update()

    def text(self) -> str:
        return self._formatter(self._model.value())

    def lineWidth(self) -> float: return self._line_width

    def setLineWidth(self, lw: float):
        self._line_width = float(lw)
        self.update()

    def isShowingAxis(self) -> bool: return self._showing_axis

    def setShowingAxis(self, on: bool):
        on = bool(on)
        if on != self._showing_axis:
            self._showing_axis = on
            self.update()

    def isTextVisible(self) -> bool: return self._text_visible

    def setTextVisible(self, on: bool):
        on = bool(on)
        if on != self._text_visible:
            self._text_visible = on
            self.update()

    def isFocused(self) -> bool: return self._model.focused

    def textFont(self) -> QFont:
        if self._text_font is not None:
            return self._text_font
        f = QFont("Monospace")
        f.setStyleHint(QFont.Monospace)
        f.setBold(True)
        f.setPixelSize(max(1, self.width() // max(len(self.text()), MIN_FONT_CHARS)))
        return f

    def setTextFont(self, font):
        """None restores the automatic font (sized from the widget width)."""
        self._text_font = font
        if self._text_visible:
            self.update()

    # ------------------------------------------------------------------ observers
    def addChangeObserver(self, obs): self._ctl.dispatcher.change_observers.add(obs)
    def removeChangeObserver(self, obs) -> bool: return self._ctl.dispatcher.change_observers.remove(obs)

    def changeObservers(self):
        return tuple(o for o in self._ctl.dispatcher.change_observers.snapshot()
                     if o != self._emit_value_changed)

    def addAdjustmentObserver(self, obs): self._ctl.dispatcher.adjustment_observers.add(obs)
    def removeAdjustmentObserver(self, obs) -> bool: return self._ctl.dispatcher.adjustment_observers.remove(obs)

    def adjustmentObservers(self):
        return tuple(o for o in self._ctl.dispatcher.adjustment_observers.snapshot()
                     if o != self._emit_adjusted)

    def _emit_value_changed(self, _source):
        self.valueChanged.emit(self._model.value())

    def _emit_adjusted(self, evt):
        self.adjusted.emit(evt)

    # ------------------------------------------------------------------ Qt events
    def changeEvent(self, e):
        # Qt can send this while the base constructor is still running
        ctl = getattr(self, "_ctl", None)
        if e.type() == QEvent.EnabledChange and ctl is not None:
            if ctl.set_enabled(self.isEnabled()):
                self.update()
        super().changeEvent(e)

    def focusInEvent(self, e):
        if self._ctl.focus_changed(True):
            self.update()
        super().focusInEvent(e)

    def focusOutEvent(self, e):
        if self._ctl.focus_changed(False):
            self.update()
        super().focusOutEvent(e)

    def mousePressEvent(self, e):
        if e.button() != Qt.LeftButton:
            return super().mousePressEvent(e)
        self.setFocus(Qt.MouseFocusReason)
        self._ctl.pointer_pressed(e.x(), e.y(), self.width(), self.height(), qt_modifiers(e.modifiers()))
        self.update()

    def mouseMoveEvent(self, e):
        if self._ctl.pointer_dragged(e.x(), e.y(), self.width(), self.height(), qt_modifiers(e.modifiers())):
            self.update()

    def mouseReleaseEvent(self, e):
        if e.button() != Qt.LeftButton:
            return super().mouseReleaseEvent(e)
        self._ctl.pointer_released()

    def wheelEvent(self, e):
        # Qt: +120 per notch away from the user
        rotation = -e.angleDelta().y() / 120.0
        if not rotation:
            e.ignore()
            return
        if self._ctl.wheel_rotated(rotation):
            self.update()
        e.accept()

    def keyPressEvent(self, e):
        key = QT_DIRECTION_KEYS.get(e.key())
        if key is None:
            return super().keyPressEvent(e)
        # our own timer repeats, skip the platform's auto-repeat
        if not e.isAutoRepeat():
            if self._ctl.key_pressed(key, qt_modifiers(e.modifiers())):
                self.update()
        e.accept()

    def keyReleaseEvent(self, e):
        if e.isAutoRepeat() or self._ctl.state != InteractionState.KEY_HELD:
            return super().keyReleaseEvent(e)
        self._ctl.key_released()
        e.accept()

    # ------------------------------------------------------------------ painting
    def _to_dial(self, p: QPainter):
        """centre origin, y up, x and y radii equal"""
        lw = self._line_width
        p.translate(self.width() / 2, self.height() / 2)
        p.scale(1, -(self.height() - lw) / max(1e-6, self.width() - lw))

    def _draw_ticks(self, p: QPainter, step: int, inner: float):
        if step <= 0:
            return
        r = self.width() / 2 - self._line_width
        p.save()
        self._to_dial(p)
        for deg in np.arange(0, 360, step):
            p.save()
            p.rotate(float(deg))
            p.drawLine(QPointF(r * inner, 0), QPointF(r, 0))
            p.restore()
        p.restore()

    def paintEvent(self, _):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        p.setRenderHint(QPainter.TextAntialiasing, True)

        col = self._fg if self.isEnabled() else self._disabled_col
        w, h = self.width(), self.height()
        w2, h2 = w / 2, h / 2
        lw = self._line_width

        # axis
        if self._showing_axis:
            p.setPen(QPen(col, min(0.5, lw), Qt.DashLine, Qt.RoundCap, Qt.RoundJoin))
            p.drawLine(QPointF(w2, 0), QPointF(w2, h))
            p.drawLine(QPointF(0, h2), QPointF(w, h2))

        p.setPen(QPen(col, lw, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))

        if self._model.shows_tick(Tick.UNIT):
            self._draw_ticks(p, self._model.unit_increment(), UNIT_TICK_FRACTION)
        if self._model.shows_tick(Tick.BLOCK):
            self._draw_ticks(p, self._model.block_increment(), BLOCK_TICK_FRACTION)

        # circumference
        p.drawEllipse(QRectF(lw / 2, lw / 2, w - lw, h - lw))

        # arrow
        r = w2 - lw
        head = w2 * ARROWHEAD_FRACTION
        p.save()
        self._to_dial(p)
        p.rotate(math.degrees(self._model.angle()))
        p.drawLine(QPointF(0, 0), QPointF(r, 0))
        p.drawLine(QPointF(r, 0), QPointF(r - head, head))
        p.drawLine(QPointF(r, 0), QPointF(r - head, -head))
        p.restore()

        # text with a 1px shadow
        if self._text_visible:
            font = self.textFont()
            p.setFont(font)
            txt = self.text()
            fm = QFontMetrics(font)
            x = w2 - fm.horizontalAdvance(txt) / 2
            y = h2 + (fm.height() + fm.descent() - fm.ascent()) / 2
            p.setPen(self.palette().color(self.backgroundRole()))
            p.drawText(QPointF(x + 1, y + 1), txt)
            p.setPen(col)
            p.drawText(QPointF(x, y), txt)

        if self._model.focused:
            p.setPen(QPen(col, 0.5, Qt.DotLine))
            p.drawRect(QRectF(0, 0, w - 1, h - 1))

        p.end()
