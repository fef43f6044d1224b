"""Terminal input mode and Ctrl-C handling for console runs (POSIX only)."""
import logging
import os
import signal
import sys
import termios
from contextlib import contextmanager

logger = logging.getLogger(__name__)

_saved = {}


def disable_input_buffering(fd: int) -> bool:
    """Turn off line buffering and echo on `fd`. Returns False for a non-tty."""
    if not os.isatty(fd):
        logger.debug("fd %d is not a terminal, input mode unchanged", fd)
        return False
    attrs = termios.tcgetattr(fd)
    _saved[fd] = list(attrs)
    attrs[3] &= ~(termios.ICANON | termios.ECHO)    # lflag
    termios.tcsetattr(fd, termios.TCSANOW, attrs)
    logger.debug("fd %d: ICANON and ECHO cleared", fd)
    return True


def restore_input_buffering(fd: int) -> None:
    attrs = _saved.pop(fd, None)
    if attrs is not None:
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
        logger.debug("fd %d: terminal attributes restored", fd)


@contextmanager
def input_mode(fd: int):
    disable_input_buffering(fd)
    try:
        yield
    finally:
        restore_input_buffering(fd)


def install_interrupt_handler(fd: int):
    """On SIGINT restore the terminal, print a newline and exit with -2."""
    def handle_interrupt(signum, frame):
        restore_input_buffering(fd)
        print()
        sys.exit(-2)

    return signal.signal(signal.SIGINT, handle_interrupt)
