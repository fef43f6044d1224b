from PySide6.QtWidgets import QWidget, QLabel, QLineEdit, QGridLayout
from PySide6.QtCore import Qt, Slot

from lc3.registers import GENERAL_REGS, SPECIAL_REGS


class RegisterPanel(QWidget):
    """
    Grid of the 8 general registers plus PC, IR and COND.
    Read-only; the main window calls refresh() on its timer.
    """
    def __init__(self, cpu, parent=None):
        super().__init__(parent)
        self.cpu = cpu
        self.edits = []

        layout = QGridLayout(self)
        names = [f"R{i}" for i in range(GENERAL_REGS)] + SPECIAL_REGS
        for row, name in enumerate(names):
            lbl = QLabel(name)
            edit = QLineEdit()
            edit.setReadOnly(True)
            edit.setAlignment(Qt.AlignRight)
            layout.addWidget(lbl, row, 0)
            layout.addWidget(edit, row, 1)
            self.edits.append(edit)
        self.state_label = QLabel()
        layout.addWidget(self.state_label, len(names), 0, 1, 2)
        layout.setColumnStretch(1, 1)
        self.refresh()

    @Slot()
    def refresh(self):
        """Update register display from CPU state"""
        reg = self.cpu.reg
        for i in range(GENERAL_REGS):
            self.edits[i].setText(f"{reg[i]:04X}")
        self.edits[GENERAL_REGS].setText(f"{reg.pc:04X}")
        self.edits[GENERAL_REGS+1].setText(f"{reg.ir:04X}")
        self.edits[GENERAL_REGS+2].setText(reg.cond.name)
        self.state_label.setText(f"{self.cpu.state.value}, {self.cpu.executed} instructions")
