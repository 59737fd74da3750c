"""Command-line entry point for the game selection carousel."""

from __future__ import annotations

import sys

from fivednine import log
from fivednine.app import AppError, FivedNineApp
from fivednine.cli import CommandLineArgumentParser
from fivednine.config import AppConfig, ConfigError
from fivednine.log import LogVerbosity, LogZone
from fivednine.render.color import ColorRGB
from fivednine.render.window import EventType, Window
from fivednine.timing import sleep_ms, ticks_ms

WINDOW_TITLE = "shotOS game selection carousel"
TICKS_PER_FRAME = 1000 // 60
_TICK_MASK = 0xFFFFFFFF


def _error(message: str, *args) -> None:
    log.log(LogZone.DEFAULT, LogVerbosity.ERROR, message, *args)


def _run(window: Window, app: FivedNineApp) -> None:
    last_frame_ms = ticks_ms()
    looping = True
    while looping:
        event_type = window.poll_events()
        while event_type is not EventType.NONE:
            if event_type is EventType.QUIT:
                looping = False
                break
            event_type = window.poll_events()

        now_ms = ticks_ms()
        dt_ticks = (now_ms - last_frame_ms) & _TICK_MASK
        # The camera is ticked with the time since start-up, not the frame time.
        app.tick(now_ms / 1000.0)
        last_frame_ms = now_ms

        if dt_ticks < TICKS_PER_FRAME:
            sleep_ms(TICKS_PER_FRAME - dt_ticks)

        window.clear(ColorRGB.BLACK)
        app.draw()
        window.update()


def main(argv=None) -> int:
    """Run the carousel; returns a process exit code."""
    log.set_log_verbosity(LogVerbosity.WARNING)
    for zone in (LogZone.DEFAULT, LogZone.RENDER, LogZone.API):
        log.enable_zone(zone)

    parser = CommandLineArgumentParser(sys.argv[1:] if argv is None else argv)
    config_argument = parser.find_argument("config")
    if config_argument is None:
        _error("Required argument: --config\n")
        return -1

    try:
        config = AppConfig.from_file(config_argument.as_string())
    except ConfigError as exc:
        _error("%s\n", str(exc))
        _error("Failed to parse configuration file\n")
        return -1

    window = Window(WINDOW_TITLE)
    try:
        app = FivedNineApp()
        try:
            app.initialize(config, window)
        except AppError as exc:
            _error("%s\n", str(exc))
            _error("Failed to initialize app\n")
            return -1
        _run(window, app)
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())