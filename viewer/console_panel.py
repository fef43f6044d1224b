"""Terminal-like widget: key presses feed the machine's keyboard, program
output is appended as it is flushed."""
from PySide6.QtWidgets import QPlainTextEdit
from PySide6.QtGui import QFont, QTextCursor
from PySide6.QtCore import QObject, Qt, Signal, Slot


class QtDisplay(QObject):
    """Binary output sink for the CPU. Emits `written` from the worker
    thread; Qt queues the signal onto the GUI thread."""
    written = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._pending = bytearray()

    def write(self, data: bytes) -> int:
        self._pending.extend(data)
        return len(data)

    def flush(self):
        if self._pending:
            text = self._pending.decode("latin-1")
            self._pending.clear()
            self.written.emit(text)

    def detach(self):
        """Drop every receiver and schedule deletion; used when a Reset
        replaces this sink with a fresh one."""
        self.written.disconnect()
        self.deleteLater()


class ConsolePanel(QPlainTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.keyboard = None
        self.display = None
        self.setReadOnly(True)
        self.setFont(QFont("Monospace", 11))
        self.setFocusPolicy(Qt.StrongFocus)

    def attach(self, keyboard, display: QtDisplay):
        if self.display is not None and self.display is not display:
            self.display.detach()
        self.keyboard = keyboard
        self.display = display
        display.written.connect(self.append_text)

    @Slot(str)
    def append_text(self, text: str):
        self.moveCursor(QTextCursor.End)
        self.insertPlainText(text.replace("\r", ""))
        self.moveCursor(QTextCursor.End)

    def keyPressEvent(self, event):
        text = event.text()
        if self.keyboard is None or not text:
            super().keyPressEvent(event)
            return
        if text == "\r":
            text = "\n"
        self.keyboard.feed(text.encode("latin-1", errors="replace"))
