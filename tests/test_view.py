"""Tests for the canvas and main window."""
import pytest
from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QImage

from raindrops.config import BACKGROUND_COLOR
from raindrops.controller.driver import AnimationDriver
from raindrops.model.field import initialize
from raindrops.model.raindrop import Coordinate, Stage
from raindrops.model.shapes import render
from raindrops.view.canvas import RaindropCanvas
from raindrops.view.main_window import MainWindow


def _grab(widget):
    image = QImage(widget.size(), QImage.Format_ARGB32)
    image.fill(QColor("black"))
    widget.render(image)
    return image


class TestRaindropCanvas:
    def test_set_sprites(self, qapp):
        canvas = RaindropCanvas()
        sprites = [render(Coordinate(50, 50), Stage.STAGE_3)]
        canvas.set_sprites(sprites)
        assert canvas.sprites() == sprites

    def test_paints_background(self, qapp):
        canvas = RaindropCanvas()
        canvas.resize(200, 200)
        image = _grab(canvas)
        assert image.pixelColor(5, 5) == QColor(BACKGROUND_COLOR)

    def test_paints_ring(self, qapp):
        canvas = RaindropCanvas()
        canvas.resize(200, 200)
        canvas.set_sprites([render(Coordinate(100, 100), Stage.STAGE_4)])
        image = _grab(canvas)
        # left edge of the 30x30 square
        assert image.pixelColor(85, 100) != QColor(BACKGROUND_COLOR)
        # centre of the ring stays empty
        assert image.pixelColor(100, 100) == QColor(BACKGROUND_COLOR)

    def test_invisible_placeholder_not_painted(self, qapp):
        canvas = RaindropCanvas()
        canvas.resize(200, 200)
        canvas.set_sprites([render(Coordinate(100, 100), Stage.STAGE_6)])
        image = _grab(canvas)
        assert image.pixelColor(80, 100) == QColor(BACKGROUND_COLOR)

    def test_reports_size(self, qapp):
        canvas = RaindropCanvas()
        sizes = []
        canvas.size_reported.connect(lambda w, h: sizes.append((w, h)))
        canvas.resize(QSize(640, 480))
        canvas.show()
        qapp.processEvents()
        assert (640, 480) in sizes
        canvas.close()


class TestMainWindow:
    @pytest.fixture
    def window(self, qapp):
        driver = AnimationDriver(seed=3)
        win = MainWindow(driver)
        yield win
        driver.stop()
        win.close()

    def test_frames_reach_canvas(self, window):
        window.driver.on_window_size(800, 600)
        assert len(window.canvas.sprites()) == len(window.driver.field.raindrops)

    def test_query_window_size(self, window):
        window.canvas.resize(500, 400)
        window.query_window_size()
        assert (window.driver.field.width, window.driver.field.height) == (500, 400)

    def test_query_failure_keeps_default(self, window, monkeypatch):
        monkeypatch.setattr(window.canvas, "size", lambda: QSize(0, 0))
        window.query_window_size()
        assert window.driver.field.raindrops == ()

    def test_startup_size_reports_agree(self, window, qapp):
        fields = []
        window.driver.field_changed.connect(fields.append)
        window.show()
        qapp.processEvents()

        size = window.canvas.size()
        expected = initialize(size.width(), size.height(), seed=3)
        # resizeEvent from show() and the deferred query both report the final size
        same_size = [f for f in fields if (f.width, f.height) == (size.width(), size.height())]
        assert len(same_size) >= 2
        assert all(f == expected for f in same_size)
        assert window.driver.field == expected


class TestCreateApp:
    def test_reuses_running_app(self, qapp):
        from raindrops import __version__
        from raindrops.app.application import VISIBLE_APP_NAME, create_app

        app = create_app()
        assert app is qapp
        assert app.applicationName() == "raindrops"
        assert app.applicationVersion() == __version__
        assert app.applicationDisplayName() == VISIBLE_APP_NAME
