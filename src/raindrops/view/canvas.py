"""
Raindrop Canvas
===============
The host surface: paints the sprites of the latest frame and reports its size.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QSizePolicy, QWidget

from raindrops.config import BACKGROUND_COLOR, STROKE_COLOR
from raindrops.model.shapes import Circle, Polygon, Shape, Sprite, Square

logger = logging.getLogger(__name__)


class RaindropCanvas(QWidget):
    # Signal: (width, height) in pixels
    size_reported = Signal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._sprites: list[Sprite] = []
        self._background = QColor(BACKGROUND_COLOR)
        self._stroke = QColor(STROKE_COLOR)

        self.setMinimumSize(1, 1)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

    def sprites(self) -> list[Sprite]:
        return list(self._sprites)

    def set_sprites(self, sprites: list[Sprite]) -> None:
        """Replace the frame and schedule a repaint."""
        self._sprites = list(sprites)
        self.update()

    # ---- Qt events ----

    def resizeEvent(self, event):
        # Every resize is reported, including the one from the first show()
        size = event.size()
        self.size_reported.emit(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.fillRect(self.rect(), self._background)
            painter.setBrush(Qt.NoBrush)
            for sprite in self._sprites:
                for shape in sprite:
                    self._draw_shape(painter, shape)
        finally:
            painter.end()

    # ---- drawing ----

    def _draw_shape(self, painter: QPainter, shape: Shape) -> None:
        if shape.opacity <= 0.0:
            return

        pen = QPen(self._stroke)
        pen.setWidthF(shape.stroke_width)
        painter.setPen(pen)
        painter.setOpacity(shape.opacity)

        if isinstance(shape, Circle):
            center = QPointF(shape.center.x, shape.center.y)
            painter.drawEllipse(center, shape.radius, shape.radius)
        elif isinstance(shape, Square):
            left, top = shape.top_left
            painter.drawRect(QRectF(left, top, shape.size, shape.size))
        elif isinstance(shape, Polygon):
            ring = QPolygonF([QPointF(float(x), float(y)) for x, y in shape.points])
            painter.drawPolyline(ring)
        else:
            logger.warning(f"Skipping unknown shape {shape!r}.")
