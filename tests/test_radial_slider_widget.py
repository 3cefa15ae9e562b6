"""
RadialSlider widget: Qt event translation, signals and painting (offscreen).
"""
import math
from unittest.mock import MagicMock

import pytest
from PyQt5.QtCore import Qt, QEvent, QPoint, QPointF
from PyQt5.QtGui import QMouseEvent, QKeyEvent, QWheelEvent, QFocusEvent, QFont

from conftest import FakeScheduler
from radialslider.config import KEY_REPEAT_INITIAL_DELAY_MS
from radialslider.notifications import AdjustmentId, AdjustmentType
from radialslider.value_model import Tick, UnsupportedOperation
from radialslider.widgets.radial_slider import RadialSlider


@pytest.fixture
def slider(qapp):
    s = RadialSlider(scheduler=FakeScheduler())
    s.resize(100, 100)
    yield s
    s.deleteLater()


def mouse(kind, x, y, mods=Qt.NoModifier):
    button = Qt.LeftButton
    buttons = Qt.NoButton if kind == QEvent.MouseButtonRelease else Qt.LeftButton
    return QMouseEvent(kind, QPointF(x, y), button, buttons, mods)


def key(kind, k, mods=Qt.NoModifier, autorep=False):
    return QKeyEvent(kind, k, mods, "", autorep)


def wheel(notches_away):
    return QWheelEvent(QPointF(50, 50), QPointF(50, 50), QPoint(0, 0), QPoint(0, int(120 * notches_away)),
                       Qt.NoButton, Qt.NoModifier, Qt.NoScrollPhase, False)


def test_defaults(slider):
    assert slider.value() == 0.0
    assert slider.angle() == 0.0
    assert slider.minimum() == 0.0 and slider.maximum() == 360.0
    assert slider.unitIncrement() == 1 and slider.blockIncrement() == 45
    assert slider.ticks() == {Tick.BLOCK}
    assert slider.text() == "0"
    assert slider.isTextVisible() and not slider.isShowingAxis()
    assert not slider.isAdjusting()


def test_degree_selector(qapp):
    s = RadialSlider.degrees()
    s.setValue(90.5)
    assert s.text() == "90.5°"
    assert s.intValue() == 90


def test_integer_range_setters_fail(slider):
    with pytest.raises(UnsupportedOperation):
        slider.setMinimum(1)
    with pytest.raises(UnsupportedOperation):
        slider.setMaximum(1)
    assert slider.intMaximum() == 360


def test_set_value_emits_signals(slider):
    changed, adjusted = [], []
    slider.valueChanged.connect(changed.append)
    slider.adjusted.connect(adjusted.append)
    slider.setValue(-20)
    assert changed == [0.0]
    assert adjusted[0].source is slider
    assert adjusted[0].id == AdjustmentId.LAST


def test_observer_api(slider):
    obs = MagicMock()
    slider.addChangeObserver(obs)
    assert slider.changeObservers() == (obs,)
    slider.setValue(10)
    obs.assert_called_once_with(slider)
    assert slider.removeChangeObserver(obs)
    assert slider.changeObservers() == ()

    adj = MagicMock()
    slider.addAdjustmentObserver(adj)
    assert slider.adjustmentObservers() == (adj,)
    assert slider.removeAdjustmentObserver(adj)
    assert not slider.removeAdjustmentObserver(adj)


def test_mouse_drag(slider):
    adj = MagicMock()
    slider.addAdjustmentObserver(adj)
    slider.mousePressEvent(mouse(QEvent.MouseButtonPress, 50, 0))
    assert slider.value() == pytest.approx(90)
    assert slider.isAdjusting()
    slider.mouseMoveEvent(mouse(QEvent.MouseMove, 0, 50))
    assert slider.value() == pytest.approx(180)
    slider.mouseReleaseEvent(mouse(QEvent.MouseButtonRelease, 0, 50))
    assert not slider.isAdjusting()
    assert [c.args[0].id for c in adj.call_args_list] == \
        [AdjustmentId.FIRST, AdjustmentId.VALUE_CHANGED, AdjustmentId.LAST]


def test_mouse_shift_snaps(slider):
    a = math.radians(50)
    slider.mousePressEvent(mouse(QEvent.MouseButtonPress, 50 + 40 * math.cos(a), 50 - 40 * math.sin(a),
                                 Qt.ShiftModifier))
    assert slider.value() == pytest.approx(45, abs=1.5)


def test_wheel(slider):
    adj = MagicMock()
    slider.addAdjustmentObserver(adj)
    slider.wheelEvent(wheel(-1))     # towards the user
    assert slider.value() == pytest.approx(359)
    assert adj.call_args.args[0].type == AdjustmentType.UNIT_DECREMENT
    slider.wheelEvent(wheel(2))
    assert slider.value() == pytest.approx(1)


def test_keys_and_auto_repeat(qapp):
    sched = FakeScheduler()
    s = RadialSlider(scheduler=sched)
    changed = []
    s.valueChanged.connect(changed.append)

    s.keyPressEvent(key(QEvent.KeyPress, Qt.Key_Up))
    assert s.value() == pytest.approx(45)
    # platform auto-repeat is ignored, our timer does the repeating
    s.keyReleaseEvent(key(QEvent.KeyRelease, Qt.Key_Up, autorep=True))
    s.keyPressEvent(key(QEvent.KeyPress, Qt.Key_Up, autorep=True))
    assert s.value() == pytest.approx(45)
    sched.advance(KEY_REPEAT_INITIAL_DELAY_MS)
    assert s.value() == pytest.approx(90)

    s.keyReleaseEvent(key(QEvent.KeyRelease, Qt.Key_Up))
    assert changed == [pytest.approx(90)]
    sched.advance(1000)
    assert s.value() == pytest.approx(90)


def test_disabled_widget_ignores_input(slider):
    obs = MagicMock()
    slider.addChangeObserver(obs)
    slider.setValue(30)
    obs.reset_mock()

    slider.setEnabled(False)
    slider.mousePressEvent(mouse(QEvent.MouseButtonPress, 0, 50))
    slider.mouseReleaseEvent(mouse(QEvent.MouseButtonRelease, 0, 50))
    slider.wheelEvent(wheel(1))
    slider.keyPressEvent(key(QEvent.KeyPress, Qt.Key_Left))
    slider.keyReleaseEvent(key(QEvent.KeyRelease, Qt.Key_Left))
    assert slider.value() == 30
    obs.assert_not_called()

    slider.setEnabled(True)
    slider.wheelEvent(wheel(1))
    assert slider.value() == pytest.approx(31)
    obs.assert_called_once()


def test_paints_every_decoration(slider):
    slider.setTicks({Tick.UNIT, Tick.BLOCK})
    slider.setUnitIncrement(10)
    slider.setShowingAxis(True)
    slider.setValue(123.4)
    slider.focusInEvent(QFocusEvent(QEvent.FocusIn))
    assert slider.isFocused()
    assert not slider.grab().isNull()

    slider.setEnabled(False)
    slider.setTextVisible(False)
    slider.setBlockIncrement(0)
    assert not slider.grab().isNull()

    slider.focusOutEvent(QFocusEvent(QEvent.FocusOut))
    assert not slider.isFocused()


def test_text_font(slider):
    auto = slider.textFont()
    assert auto.bold()
    assert auto.pixelSize() == 100 // 7
    f = QFont("Serif")
    slider.setTextFont(f)
    assert slider.textFont() is f
    slider.setTextFont(None)
    assert slider.textFont().pixelSize() == 100 // 7
