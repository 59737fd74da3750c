import pytest

from fivednine import log
from fivednine.log import FatalError, LogVerbosity, LogZone


@pytest.fixture(autouse=True)
def log_path(tmp_path):
    path = tmp_path / "log.txt"
    log.set_log_file(path)
    log.set_log_verbosity(LogVerbosity.WARNING)
    for zone in LogZone:
        log.disable_zone(zone)
    log.enable_zone(LogZone.DEFAULT)
    return path


def read(path):
    return path.read_text(encoding="utf-8")


def test_log_line_writes_zone_prefix_and_newline(log_path):
    log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR, "hello %d", 5)
    assert read(log_path) == "[Default] hello 5\n"


def test_log_has_no_trailing_newline(log_path):
    log.log(LogZone.DEFAULT, LogVerbosity.WARNING, "abc")
    assert read(log_path) == "[Default] abc"


def test_messages_above_verbosity_are_dropped(log_path):
    log.log_line(LogZone.DEFAULT, LogVerbosity.INFO, "info")
    log.log_line(LogZone.DEFAULT, LogVerbosity.VERBOSE, "verbose")
    assert read(log_path) == ""


def test_raising_verbosity_lets_messages_through(log_path):
    log.set_log_verbosity(LogVerbosity.INFO)
    log.log_line(LogZone.DEFAULT, LogVerbosity.INFO, "info")
    assert read(log_path).endswith("info\n")


def test_disabled_zone_is_dropped(log_path):
    log.log_line(LogZone.RENDER, LogVerbosity.ERROR, "render")
    assert read(log_path) == ""


def test_zone_enable_and_disable():
    log.enable_zone(LogZone.API)
    assert log.is_zone_enabled(LogZone.API)
    log.disable_zone(LogZone.API)
    assert not log.is_zone_enabled(LogZone.API)


def test_enabled_zone_uses_its_name(log_path):
    log.enable_zone(LogZone.API)
    log.log_line(LogZone.API, LogVerbosity.ERROR, "x")
    assert read(log_path).startswith("[API] ")


def test_log_and_fail_ignores_filters(log_path):
    with pytest.raises(FatalError, match="boom 7"):
        log.log_and_fail(LogZone.RENDER, "boom %d", 7)
    assert "boom 7" in read(log_path)
    assert not read(log_path).endswith("\n")


def test_log_line_and_fail_raises(log_path):
    with pytest.raises(FatalError):
        log.log_line_and_fail(LogZone.DEFAULT, "fatal")
    assert read(log_path).endswith("fatal\n")


def test_check_passes_silently(log_path):
    log.check(True, "never shown")
    assert read(log_path) == ""


def test_check_failure_raises(log_path):
    with pytest.raises(FatalError, match="bad 3"):
        log.check(False, "bad %d", 3)
    assert "[Default] bad 3" in read(log_path)


def test_message_without_args_is_not_formatted(log_path):
    log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR, "100%")
    assert "100%" in read(log_path)


def test_long_message_is_truncated(log_path):
    log.log(LogZone.DEFAULT, LogVerbosity.ERROR, "x" * 2000)
    body = read(log_path)[len("[Default] "):]
    assert len(body) == 1023


def test_set_log_file_on_directory_raises(tmp_path):
    with pytest.raises(OSError):
        log.set_log_file(tmp_path)