# radialslider/main_app.py
import logging
import sys

from PyQt5.QtWidgets import QApplication, QMainWindow, QWidget

from radialslider.config import WINDOW_SIZE
from radialslider.notifications import AdjustmentId
from radialslider.ui_layout import build_ui

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("RadialSlider"); self.setFixedSize(*WINDOW_SIZE)

        central = QWidget(); self.setCentralWidget(central)
        self.ui, self.coords = build_ui(central)
        self._wire_ui()

    def _wire_ui(self):
        for name in ("slider_deg", "slider_rad", "slider_pct"):
            s = self.ui[name]
            s.valueChanged.connect(lambda v, n=name: self._on_committed(n, v))
            s.adjusted.connect(lambda evt, n=name: self._on_adjusted(n, evt))

    def _log(self, text: str):
        box = self.ui["log_box"]
        box.appendPlainText(text)

    def _on_committed(self, name: str, v: float):
        text = self.ui[name].text()
        logger.info(f"{name} committed {text}")
        self._log(f"{name}: {text}")
        self.setWindowTitle(f"RadialSlider - {name} {text}")

    def _on_adjusted(self, name: str, evt):
        # only the start of an interaction goes to the box, the rest is noise
        if evt.id == AdjustmentId.FIRST:
            self._log(f"{name}: {evt.type.name.lower()} from {evt.value}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app = QApplication(sys.argv)
    w = MainWindow(); w.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
