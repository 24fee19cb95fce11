# gui/registry_model.py
from __future__ import annotations
from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex

from employee_book.logic.employee_book import EmployeeBook
from employee_book.utils.format_utils import format_salary

HEADERS = ["ID", "이름", "부서", "급여"]


class RegistryTableModel(QAbstractTableModel):
    """슬롯 하나당 한 행. 빈 슬롯은 빈 칸으로 표시."""

    def __init__(self, book: EmployeeBook, parent=None):
        super().__init__(parent)
        self.book = book

    def rowCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else self.book.capacity

    def columnCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(HEADERS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return HEADERS[section]
        return str(section)

    def data(self, index: QModelIndex, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        e = self.book.get(index.row())
        if role == Qt.TextAlignmentRole and index.column() == 3:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        if role != Qt.DisplayRole:
            return None
        if e is None:
            return ""
        col = index.column()
        if col == 0:
            return str(e.id)
        if col == 1:
            return e.name
        if col == 2:
            return e.division
        return format_salary(e.salary)

    def employee_at(self, row: int):
        return self.book.get(row)

    def refresh(self):
        self.beginResetModel()
        self.endResetModel()
