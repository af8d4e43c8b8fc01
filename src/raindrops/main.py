"""
Application Initialization
==========================
This module wires the pieces together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Creates the Qt Application.
3. Instantiates the Animation Driver (owner of the Field).
4. Instantiates the Main Window (View), passing the driver in.
5. Starts the timer and the event loop.
"""
from typing import Optional, Union

from raindrops.app.application import create_app
from raindrops.config import DEFAULT_SEED, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, TICK_INTERVAL_MS
from raindrops.controller.driver import AnimationDriver
from raindrops.logging_config import install_qt_message_handler, setup_logging
from raindrops.view.main_window import MainWindow


def main(
    seed: int = DEFAULT_SEED,
    width: int = DEFAULT_WINDOW_WIDTH,
    height: int = DEFAULT_WINDOW_HEIGHT,
    interval_ms: int = TICK_INTERVAL_MS,
    log_level: Union[int, str] = "WARNING",
    log_file: Optional[str] = None,
) -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=log_level, log_file=log_file)
    install_qt_message_handler()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Driver with the default field
    driver = AnimationDriver(seed=seed, interval_ms=interval_ms, width=width, height=height)

    # 4. Initialize the Main Window, passing the driver
    window = MainWindow(driver)
    window.show()

    # 5. Start Timer and Event Loop
    driver.start()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
