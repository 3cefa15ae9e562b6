import os

# widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from unittest.mock import MagicMock

from radialslider.controller import InteractionController
from radialslider.value_model import ValueModel


class FakeHandle:
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock: callbacks only run from advance()."""

    def __init__(self):
        self.now = 0
        self.handles = []

    def schedule(self, delay_ms, callback):
        h = FakeHandle(self.now + delay_ms, callback)
        self.handles.append(h)
        return h

    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, ms):
        end = self.now + ms
        while True:
            due = [h for h in self.pending() if h.due <= end]
            if not due:
                break
            h = min(due, key=lambda x: x.due)
            self.handles.remove(h)
            self.now = h.due
            h.callback()
        self.now = end


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def model():
    return ValueModel(0.0, 0.0, 360.0)


@pytest.fixture
def controller(model, scheduler):
    return InteractionController(model, scheduler)


@pytest.fixture
def observers(controller):
    """(change, adjustment) mocks registered on the controller"""
    change = MagicMock()
    adjust = MagicMock()
    controller.dispatcher.change_observers.add(change)
    controller.dispatcher.adjustment_observers.add(adjust)
    return change, adjust


def adjustment_events(mock):
    return [c.args[0] for c in mock.call_args_list]


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
