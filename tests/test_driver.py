"""Tests for the animation driver."""
import pytest

from raindrops.config import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, TICK_INTERVAL_MS
from raindrops.controller.driver import AnimationDriver
from raindrops.model.field import InvalidWindowSizeError, initialize, tick
from raindrops.model.shapes import render_field


@pytest.fixture
def driver(qapp):
    d = AnimationDriver(seed=7)
    yield d
    d.stop()


class TestAnimationDriver:
    def test_starts_with_default_empty_field(self, driver):
        assert driver.field.raindrops == ()
        assert (driver.field.width, driver.field.height) == (DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

    def test_rejects_non_positive_default_size(self, qapp):
        with pytest.raises(InvalidWindowSizeError):
            AnimationDriver(width=0)

    def test_ticks_before_size_report(self, driver):
        for _ in range(3):
            driver.on_tick()
        assert driver.field.raindrops == ()

    def test_timer_interval(self, driver):
        assert driver.timer.interval() == TICK_INTERVAL_MS
        assert not driver.is_running()
        driver.start()
        assert driver.is_running()
        driver.stop()
        assert not driver.is_running()

    def test_window_size_initializes_field(self, driver):
        driver.on_window_size(800, 600)
        assert driver.field == initialize(800, 600, seed=7)

    def test_tick_advances_field(self, driver):
        driver.on_window_size(800, 600)
        before = driver.field
        driver.on_tick()
        assert driver.field == tick(before)

    def test_frame_ready_emitted(self, driver):
        frames = []
        driver.frame_ready.connect(frames.append)
        driver.on_window_size(1280, 720)
        driver.on_tick()
        assert len(frames) == 2
        assert frames[-1] == render_field(driver.field)

    def test_field_changed_emitted(self, driver):
        fields = []
        driver.field_changed.connect(fields.append)
        driver.on_window_size(1280, 720)
        assert fields == [driver.field]

    def test_failed_query_keeps_dimensions(self, driver):
        driver.on_window_size_failed("unavailable")
        assert (driver.field.width, driver.field.height) == (DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

    def test_invalid_size_treated_as_failure(self, driver):
        driver.on_window_size(1024, 768)
        before = driver.field
        driver.on_window_size(0, 768)
        assert driver.field is before

    def test_late_size_report_reinitializes(self, driver):
        driver.on_window_size(800, 600)
        for _ in range(4):
            driver.on_tick()
        driver.on_window_size(1280, 720)
        assert driver.field == initialize(1280, 720, seed=7)
