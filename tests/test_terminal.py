import os
import pty
import signal
import termios

import pytest

from lc3 import terminal


@pytest.fixture
def tty():
    master, slave = pty.openpty()
    yield slave
    os.close(slave)
    os.close(master)


def test_input_mode_clears_icanon_and_echo(tty):
    before = termios.tcgetattr(tty)
    assert before[3] & termios.ICANON
    with terminal.input_mode(tty):
        lflag = termios.tcgetattr(tty)[3]
        assert not lflag & termios.ICANON
        assert not lflag & termios.ECHO
    assert termios.tcgetattr(tty) == before


def test_input_mode_restores_after_error(tty):
    before = termios.tcgetattr(tty)
    with pytest.raises(KeyError):
        with terminal.input_mode(tty):
            raise KeyError("boom")
    assert termios.tcgetattr(tty) == before


def test_interrupt_handler_restores_and_exits(tty, capsys):
    before = termios.tcgetattr(tty)
    previous = terminal.install_interrupt_handler(tty)
    try:
        handler = signal.getsignal(signal.SIGINT)
        terminal.disable_input_buffering(tty)
        with pytest.raises(SystemExit) as exc:
            handler(signal.SIGINT, None)
        assert exc.value.code == -2
        assert termios.tcgetattr(tty) == before
        assert capsys.readouterr().out == "\n"
    finally:
        signal.signal(signal.SIGINT, previous)


def test_input_mode_leaves_non_tty_alone():
    r, w = os.pipe()
    try:
        assert terminal.disable_input_buffering(r) is False
        with terminal.input_mode(r):
            pass
    finally:
        os.close(r)
        os.close(w)
