"""Keyboard input sources for the machine.

An input source offers two operations:

    poll_available() -> bool   never blocks
    consume_byte()   -> int    blocks until a byte arrives, EOF when closed

The memory unit polls on every read of KBSR; GETC and IN consume.
"""
import os
import queue
import select

EOF = -1


class StdinInput:
    """Input source backed by a raw file descriptor (normally stdin)."""

    def __init__(self, fd: int):
        self.fd = fd

    def poll_available(self) -> bool:
        readable, _, _ = select.select([self.fd], [], [], 0)
        return bool(readable)

    def consume_byte(self) -> int:
        data = os.read(self.fd, 1)
        if not data:
            return EOF
        return data[0]


class BufferedInput:
    """Thread-safe byte queue; fed by tests or by the viewer's console widget."""

    _CLOSED = None

    def __init__(self, data: bytes = b""):
        self._q = queue.Queue()
        self._closed = False
        self.feed(data)

    def feed(self, data: bytes) -> None:
        for b in data:
            self._q.put(b)

    def close(self) -> None:
        """Wake any blocked reader; every later read returns EOF."""
        self._closed = True
        self._q.put(self._CLOSED)

    def poll_available(self) -> bool:
        if self._closed:
            return True
        return not self._q.empty()

    def consume_byte(self) -> int:
        if self._closed and self._q.empty():
            return EOF
        b = self._q.get()
        if b is self._CLOSED:
            self._q.put(self._CLOSED)   # keep later readers unblocked
            return EOF
        return b
