from PySide6.QtWidgets import QMainWindow, QDockWidget, QApplication, QMessageBox
from PySide6.QtCore import Qt, QTimer, Slot
import logging
import sys

from lc3.config import MachineConfig
from lc3.console import BufferedInput
from lc3.cpu_core import CPU
from lc3.errors import ImageLoadError
from lc3.loader import load_images
from .console_panel import ConsolePanel, QtDisplay
from .control_panel import ControlPanel
from .machine_thread import MachineThread
from .memory_panel import MemoryPanel
from .register_panel import RegisterPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, images, config=None):
        super().__init__()
        self.images = list(images)
        self.config = config or MachineConfig()
        self.worker = None
        self.setWindowTitle("LC-3 Virtual Machine")

        self.cpu = self._build_machine()

        # central widget: console
        self.console = ConsolePanel()
        self.console.attach(self.cpu.mem.keyboard, self.cpu.display)
        self.setCentralWidget(self.console)

        # dock 1: registers
        self.register_panel = RegisterPanel(self.cpu)
        reg_dock = QDockWidget("Registers", self)
        reg_dock.setWidget(self.register_panel)
        self.addDockWidget(Qt.LeftDockWidgetArea, reg_dock)

        # dock 2: memory
        self.memory_panel = MemoryPanel(self.cpu)
        mem_dock = QDockWidget("Memory", self)
        mem_dock.setWidget(self.memory_panel)
        self.addDockWidget(Qt.RightDockWidgetArea, mem_dock)
        self.memory_panel.show_address(self.cpu.reg.pc)

        # dock 3: controls
        self.control_panel = ControlPanel()
        ctrl_dock = QDockWidget("Control", self)
        ctrl_dock.setWidget(self.control_panel)
        self.addDockWidget(Qt.BottomDockWidgetArea, ctrl_dock)
        self.control_panel.run_requested.connect(self.start)
        self.control_panel.reset_requested.connect(self.reset)

        self.timer = QTimer(self)
        self.timer.setInterval(200)  # 5 Hz
        self.timer.timeout.connect(self.refresh)
        self.timer.start()

    def _build_machine(self) -> CPU:
        cpu = CPU(BufferedInput(), QtDisplay(self), self.config)
        load_images(cpu.mem, self.images)
        return cpu

    @Slot()
    def refresh(self):
        self.register_panel.refresh()
        self.memory_panel.refresh()

    @Slot()
    def start(self):
        if self.worker is not None and self.worker.isRunning():
            return
        self.worker = MachineThread(self.cpu, self)
        self.worker.stopped.connect(self.control_panel.set_status)
        self.worker.finished.connect(lambda: self.control_panel.set_running(False))
        self.control_panel.set_running(True)
        self.console.setFocus()
        self.worker.start()

    @Slot()
    def reset(self):
        self.stop()
        try:
            cpu = self._build_machine()
        except ImageLoadError as e:
            QMessageBox.warning(self, "Reset failed", str(e))
            return
        self.cpu = cpu
        self.console.clear()
        self.console.attach(cpu.mem.keyboard, cpu.display)
        self.register_panel.cpu = cpu
        self.memory_panel.set_cpu(cpu)
        self.control_panel.set_status("Reset done")
        self.refresh()

    def stop(self):
        if self.worker is not None and self.worker.isRunning():
            self.worker.stop()

    def closeEvent(self, event):
        self.stop()
        super().closeEvent(event)


def run(images, config=None) -> int:
    app = QApplication(sys.argv[:1])
    try:
        mw = MainWindow(images, config)
    except ImageLoadError as e:
        print(f"Failed to load image: {e.path}")
        return 1
    mw.resize(1280, 960)
    mw.show()
    return app.exec()
