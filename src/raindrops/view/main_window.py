"""
Main Application Window
=======================
The top-level window that hosts the raindrop canvas.

Why is this file needed?
------------------------
1. Layout: It gives the canvas a window to live in.
2. Routing: It wires the driver's frames into the canvas and the canvas'
   size reports back into the driver.
3. Startup: It performs the one-shot window-size query once the event loop
   is running.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QMainWindow, QWidget

from raindrops.app.application import VISIBLE_APP_NAME
from raindrops.controller.driver import AnimationDriver
from raindrops.view.canvas import RaindropCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, driver: AnimationDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.driver = driver

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(driver.field.width, driver.field.height)

        self.canvas = RaindropCanvas(self)
        self.setCentralWidget(self.canvas)

        self.driver.frame_ready.connect(self.canvas.set_sprites)
        self.canvas.size_reported.connect(self.driver.on_window_size)

        # Ask for the real size once the event loop is running. The first
        # resizeEvent from show() reports the same size too; resize is a full
        # re-initialization from the fixed seed, so the second report yields
        # an identical field.
        QTimer.singleShot(0, self.query_window_size)

    def query_window_size(self) -> None:
        """Report the canvas size to the driver, or report the failure."""
        size = self.canvas.size()
        if size.isEmpty():
            self.driver.on_window_size_failed(f"canvas reported {size.width()}x{size.height()}")
            return
        logger.debug(f"Window size query: {size.width()}x{size.height()}")
        self.driver.on_window_size(size.width(), size.height())
