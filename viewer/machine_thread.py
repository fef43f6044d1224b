import logging

from PySide6.QtCore import QThread, Signal

from lc3.cpu_core import State
from lc3.errors import LC3Error

logger = logging.getLogger(__name__)


class MachineThread(QThread):
    """Runs the fetch-decode-execute loop off the GUI thread so a blocking
    GETC/IN does not freeze the window."""
    stopped = Signal(str)

    def __init__(self, cpu, parent=None):
        super().__init__(parent)
        self.cpu = cpu

    def run(self):
        try:
            while self.cpu.state is State.RUNNING and not self.isInterruptionRequested():
                self.cpu.step()
        except LC3Error as e:
            logger.error("%s", e)
            self.stopped.emit(str(e))
            return
        if self.cpu.state is State.HALTED:
            self.stopped.emit(f"Halted after {self.cpu.executed} instructions")
        else:
            self.stopped.emit("Stopped")

    def stop(self):
        """Interrupt the loop; closing the keyboard wakes a blocked GETC."""
        self.requestInterruption()
        self.cpu.mem.keyboard.close()
        self.wait()
