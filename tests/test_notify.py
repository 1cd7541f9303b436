import errno
import os

import pytest

from siege.notify import (
    Color,
    FatalError,
    Level,
    close_log,
    display,
    notify,
    open_log,
    syslog_message,
)


def test_notify_warning_goes_to_stderr(capsys):
    line = notify(Level.WARNING, "hello world")
    captured = capsys.readouterr()
    assert captured.err == line
    assert captured.out == ""
    assert "alert" in line
    assert line.endswith(" hello world\n")


def test_notify_formats_arguments(capsys):
    line = notify(Level.ERROR, "count %d of %s", 3, "things")
    assert line.endswith("count 3 of things\n")
    assert "error" in capsys.readouterr().err


def test_notify_debug_prefix_is_pinned(capsys):
    line = notify(Level.DEBUG, "trace")
    assert line == "[\x1b[1;34mdebug\x1b[0m] trace\n"


def test_notify_fatal_raises_with_exit_status(capsys):
    with pytest.raises(FatalError) as info:
        notify(Level.FATAL, "out of memory")
    assert info.value.code == 1
    assert str(info.value) == "out of memory"
    assert "out of memory" in capsys.readouterr().err


def test_notify_appends_os_error_text(capsys):
    try:
        raise FileNotFoundError(errno.ENOENT, "missing")
    except OSError:
        line = notify(Level.ERROR, "cannot open")
    assert line.endswith(f"cannot open: {os.strerror(errno.ENOENT)}\n")


def test_notify_debug_ignores_os_error(capsys):
    try:
        raise FileNotFoundError(errno.ENOENT, "missing")
    except OSError:
        line = notify(Level.DEBUG, "cannot open")
    assert line.endswith("cannot open\n")


def test_syslog_message_levels():
    open_log("siege-test")
    try:
        line = syslog_message(Level.WARNING, "a %s", "note")
        error_line = syslog_message(Level.ERROR, "broken")
    finally:
        close_log()
    assert line == "[alert]  a note\n"
    assert error_line.startswith("[error] ")


def test_syslog_fatal_raises():
    with pytest.raises(FatalError):
        syslog_message(Level.FATAL, "stop")


def test_display_plain(capsys):
    msg = display(Color.UNCOLOR, "plain %s", "text")
    assert msg == "plain text\n"
    assert capsys.readouterr().out == msg


def test_display_colored(capsys):
    msg = display(Color.RED, "warn")
    assert msg == "\x1b[0;31mwarn\x1b[0m\n"
    assert capsys.readouterr().out == msg