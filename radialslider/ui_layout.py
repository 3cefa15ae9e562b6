# radialslider/ui_layout.py
from PyQt5.QtWidgets import QWidget, QPlainTextEdit

from radialslider.config import COORDS, PI2
from radialslider.formatting import format_radian, decimal_formatter
from radialslider.value_model import Tick
from radialslider.widgets.radial_slider import RadialSlider


def build_ui(parent: QWidget):
    """Creates the demo sliders and returns (widgets, coords)."""
    widgets = {}

    # degrees, unit + block ticks, axis
    widgets["slider_deg"] = RadialSlider.degrees(parent)
    widgets["slider_deg"].setGeometry(*COORDS["slider_deg"])
    widgets["slider_deg"].setUnitIncrement(5)
    widgets["slider_deg"].setTicks({Tick.UNIT, Tick.BLOCK})
    widgets["slider_deg"].setShowingAxis(True)

    # radians
    widgets["slider_rad"] = RadialSlider(0.0, 0.0, PI2, parent)
    widgets["slider_rad"].setGeometry(*COORDS["slider_rad"])
    widgets["slider_rad"].setFormatter(format_radian)
    widgets["slider_rad"].setBlockIncrement(30)

    # percent, non-square
    widgets["slider_pct"] = RadialSlider(25.0, 0.0, 100.0, parent)
    widgets["slider_pct"].setGeometry(*COORDS["slider_pct"])
    widgets["slider_pct"].setFormatter(decimal_formatter(0, "%"))
    widgets["slider_pct"].setBlockIncrement(36)
    widgets["slider_pct"].setLineWidth(3.0)

    widgets["log_box"] = QPlainTextEdit(parent)
    widgets["log_box"].setGeometry(*COORDS["log_box"])
    widgets["log_box"].setReadOnly(True)
    widgets["log_box"].setStyleSheet("background:#fff; color:#111; border-radius:6px; padding:6px;")

    return widgets, COORDS
