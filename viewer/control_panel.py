from PySide6.QtWidgets import QWidget, QPushButton, QHBoxLayout, QLabel
from PySide6.QtCore import Signal, Slot


class ControlPanel(QWidget):
    """
    Run / Reset buttons and a status label.
    The window owns the machine; this panel only asks for it to start or reload.
    """
    run_requested = Signal()
    reset_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.btn_run   = QPushButton("Run")
        self.btn_reset = QPushButton("Reset")
        self.status    = QLabel("Loaded")

        lay = QHBoxLayout(self)
        for w in (self.btn_run, self.btn_reset, self.status):
            lay.addWidget(w)

        # connections
        self.btn_run.clicked.connect(self.run_requested)
        self.btn_reset.clicked.connect(self.reset_requested)

    @Slot(str)
    def set_status(self, text: str):
        self.status.setText(text)

    def set_running(self, running: bool):
        self.btn_run.setEnabled(not running)
        self.status.setText("Running" if running else self.status.text())
