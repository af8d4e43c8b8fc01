"""
Animation Driver
================
Connects the Qt event loop to the field controller.

Why is this file needed?
------------------------
1. Timing: A repeating QTimer turns wall-clock time into `Tick` events.
2. Ownership: It holds the one current `Field` and is the only place that
   replaces it.
3. Decoupling: The view listens to `frame_ready` and never touches the model.

All events are handled synchronously on the GUI thread, one at a time.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from raindrops.config import DEFAULT_SEED, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, TICK_INTERVAL_MS
from raindrops.model.events import Event, Tick, WindowResized, WindowSizeFailed, update
from raindrops.model.field import Field, InvalidWindowSizeError
from raindrops.model.shapes import render_field

logger = logging.getLogger(__name__)


class AnimationDriver(QObject):
    """Owns the current field and advances it on every timer tick."""
    # Signal: list[Sprite] for the whole field
    frame_ready = Signal(object)
    # Signal: the new Field
    field_changed = Signal(object)

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        interval_ms: int = TICK_INTERVAL_MS,
        width: int = DEFAULT_WINDOW_WIDTH,
        height: int = DEFAULT_WINDOW_HEIGHT,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._seed = seed
        self._field = Field.empty(width, height, seed)

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.on_tick)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def field(self) -> Field:
        return self._field

    @property
    def seed(self) -> int:
        return self._seed

    def start(self) -> None:
        logger.info(f"Starting animation timer ({self.timer.interval()} ms).")
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()

    def is_running(self) -> bool:
        return self.timer.isActive()

    def dispatch(self, event: Event) -> None:
        """Apply `event` to the current field and publish the new frame."""
        self._field = update(self._field, event, seed=self._seed)
        self.field_changed.emit(self._field)
        self.frame_ready.emit(render_field(self._field))

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    @Slot()
    def on_tick(self) -> None:
        self.dispatch(Tick())

    @Slot(int, int)
    def on_window_size(self, width: int, height: int) -> None:
        try:
            self.dispatch(WindowResized(width, height))
        except InvalidWindowSizeError as e:
            self.on_window_size_failed(str(e))

    @Slot(str)
    def on_window_size_failed(self, reason: str) -> None:
        self.dispatch(WindowSizeFailed(reason))
