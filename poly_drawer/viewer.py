"""
Curve viewer.

Draws a ``FitReport``: the sampled curve as a line strip, every sample as
a point and the fitted source points highlighted. Keyboard camera:

    W / S   pan up / down        A / D   pan left / right
    Q / E   zoom out / in        R       reset view
    Esc     close
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .points import PointSet
from .tasks import FitReport

logger = logging.getLogger(__name__)

# Fraction of the visible range moved per pan key press.
PAN_STEP: float = 0.05
# Scale factor per zoom key press (<1 zooms in).
ZOOM_STEP: float = 0.9


class CurveViewer(QMainWindow):

    _CURVE_COLOR: tuple[int, int, int] = (60, 160, 240)
    _SAMPLE_COLOR: tuple[int, int, int] = (240, 240, 240)
    _SOURCE_COLOR: tuple[int, int, int] = (220, 80, 80)

    def __init__(self, report: FitReport) -> None:
        super().__init__()
        self._report = report
        self.setWindowTitle(f"Polynomial Drawer - {report.name}")
        self.setGeometry(100, 100, 800, 600)

        curve = PointSet(report.curve).as_array()
        self._x = curve[:, 0]
        self._y = curve[:, 1]
        self._src = PointSet(report.source_points).as_array()

        self._build_ui()
        self._plot_report()
        self.reset_view()

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)

        self._plot_widget = pg.PlotWidget()
        self._plot_widget.addLegend(offset=(10, 10))
        self._plot_widget.setLabel("left", "y")
        self._plot_widget.setLabel("bottom", "x")
        self._plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self._plot_widget.plotItem.vb.setMenuEnabled(False)
        root.addWidget(self._plot_widget)

        self._equation_lbl = QLabel(self._report.equation)
        self._equation_lbl.setStyleSheet("font-family: 'Courier New'; font-size: 13px;")
        self._equation_lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        root.addWidget(self._equation_lbl)

        btn_row = QHBoxLayout()
        self._reset_btn = QPushButton("Reset View")
        self._copy_btn = QPushButton("Copy Equation")
        self._status_lbl = QLabel("WASD pan · Q/E zoom · R reset · Esc close")
        self._status_lbl.setStyleSheet("color: gray; font-style: italic;")

        self._reset_btn.clicked.connect(self.reset_view)
        self._copy_btn.clicked.connect(self.copy_equation)
        for widget in (self._reset_btn, self._copy_btn, self._status_lbl):
            btn_row.addWidget(widget)
        root.addLayout(btn_row)

        # Keys go to the window, not the plot's own mouse/keyboard handling
        self._plot_widget.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def _plot_report(self) -> None:
        self._plot_widget.plot(
            self._x, self._y,
            pen=pg.mkPen(self._CURVE_COLOR, width=2),
            name=self._report.equation.strip(),
        )
        self._plot_widget.plot(
            self._x, self._y, pen=None,
            symbol="o", symbolSize=5,
            symbolBrush=pg.mkBrush(self._SAMPLE_COLOR), symbolPen=None,
            name="Samples",
        )
        if len(self._src):
            self._plot_widget.plot(
                self._src[:, 0], self._src[:, 1], pen=None,
                symbol="s", symbolSize=9,
                symbolBrush=pg.mkBrush(self._SOURCE_COLOR), symbolPen=None,
                name="Fitted points",
            )

    def reset_view(self) -> None:
        if len(self._x) == 0:
            return
        self._plot_widget.setXRange(float(np.min(self._x)), float(np.max(self._x)),
                                    padding=0.05)
        self._plot_widget.setYRange(float(np.min(self._y)), float(np.max(self._y)),
                                    padding=0.05)

    def pan(self, fx: float, fy: float) -> None:
        vb = self._plot_widget.plotItem.vb
        (x0, x1), (y0, y1) = vb.viewRange()
        vb.translateBy(x=fx * (x1 - x0), y=fy * (y1 - y0))

    def zoom(self, factor: float) -> None:
        self._plot_widget.plotItem.vb.scaleBy(s=(factor, factor))

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        key = event.key()
        if key == Qt.Key.Key_Escape:
            self.close()
        elif key == Qt.Key.Key_W:
            self.pan(0.0, PAN_STEP)
        elif key == Qt.Key.Key_S:
            self.pan(0.0, -PAN_STEP)
        elif key == Qt.Key.Key_A:
            self.pan(-PAN_STEP, 0.0)
        elif key == Qt.Key.Key_D:
            self.pan(PAN_STEP, 0.0)
        elif key == Qt.Key.Key_E:
            self.zoom(ZOOM_STEP)
        elif key == Qt.Key.Key_Q:
            self.zoom(1.0 / ZOOM_STEP)
        elif key == Qt.Key.Key_R:
            self.reset_view()
        else:
            super().keyPressEvent(event)

    def copy_equation(self) -> None:
        QApplication.clipboard().setText(f"{self._report.equation}\n{self._report.latex}")
        QMessageBox.information(self, "Copied", "Equation copied to clipboard.")


def show_report(report: FitReport, argv: Optional[list[str]] = None) -> int:
    """Open the viewer for *report* and block until it is closed."""
    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    window = CurveViewer(report)
    window.show()
    logger.debug("Viewer opened for %s", report.name)
    return int(app.exec())
