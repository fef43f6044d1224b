"""Central widget that displays the 64K-word address space in a scrollable table."""
from PySide6.QtWidgets import QTableView, QWidget, QVBoxLayout
from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex

from lc3.memory import MEM_SIZE

MEM_COLS = 16  # 16 columns x 4096 rows == 65536 words


class MemoryModel(QAbstractTableModel):
    def __init__(self, cpu):
        super().__init__()
        self.cpu = cpu

    # Qt model overrides
    def rowCount(self, parent=QModelIndex()):
        return MEM_SIZE // MEM_COLS

    def columnCount(self, parent=QModelIndex()):
        return MEM_COLS

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or role != Qt.DisplayRole:
            return None
        addr = index.row()*MEM_COLS + index.column()
        # peek: a display refresh must not poll the keyboard through KBSR
        return f"{self.cpu.mem.peek(addr):04X}"

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return f"+{section:X}"
        return f"{section*MEM_COLS:04X}"

    def set_cpu(self, cpu):
        self.beginResetModel()
        self.cpu = cpu
        self.endResetModel()

    def refresh(self):
        top_left = self.index(0, 0)
        bottom_right = self.index(self.rowCount()-1, self.columnCount()-1)
        self.dataChanged.emit(top_left, bottom_right)


class MemoryPanel(QWidget):
    def __init__(self, cpu):
        super().__init__()
        self.model = MemoryModel(cpu)
        self.view = QTableView()
        self.view.setModel(self.model)
        self.view.horizontalHeader().setStretchLastSection(True)
        self.view.setSelectionMode(QTableView.NoSelection)
        layout = QVBoxLayout(self)
        layout.addWidget(self.view)
        self.setLayout(layout)

    def set_cpu(self, cpu):
        self.model.set_cpu(cpu)
        self.show_address(cpu.reg.pc)

    def show_address(self, addr: int):
        self.view.scrollTo(self.model.index(addr // MEM_COLS, 0), QTableView.PositionAtTop)

    def refresh(self):
        self.model.refresh()
