# gui/employee_manager.py
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QComboBox,
    QPushButton, QTableView, QMessageBox, QDoubleSpinBox, QGridLayout, QGroupBox
)
from PySide6.QtWidgets import QAbstractItemView

from employee_book.config import DIVISIONS
from employee_book.exceptions import EmployeeBookError
from employee_book.gui.registry_model import RegistryTableModel
from employee_book.logic.employee_book import EmployeeBook
from employee_book.models.employee import Employee
from employee_book.utils.format_utils import format_salary

DIVISION_FILTER = ["전체"] + list(DIVISIONS)


class EmployeeManagerDialog(QDialog):
    """
    직원 명부 다이얼로그.
    좌측: 슬롯 테이블(빈 슬롯 포함)
    우측: 편집 패널(이름/부서/급여) + 급여 인상 + 통계
    """
    def __init__(self, book: EmployeeBook | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("직원 명부")
        self.resize(900, 520)

        self.book = book if book is not None else EmployeeBook()
        self.model = RegistryTableModel(self.book, self)
        self._build_ui()
        self._refresh()

    # ---------- UI ----------
    def _build_ui(self):
        root = QHBoxLayout(self)

        # 좌: 슬롯 표
        left = QVBoxLayout()
        left.addWidget(QLabel("직원 목록"))
        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        left.addWidget(self.table)

        btn_row = QHBoxLayout()
        self.btn_del = QPushButton("🗑 삭제")
        btn_row.addWidget(self.btn_del)
        btn_row.addStretch(1)
        left.addLayout(btn_row)

        # 우: 편집 패널
        right = QVBoxLayout()
        form_box = QGroupBox("편집")
        form = QGridLayout(form_box)
        r = 0
        form.addWidget(QLabel("이름*"), r, 0)
        self.txt_name = QLineEdit()
        form.addWidget(self.txt_name, r, 1); r += 1

        form.addWidget(QLabel("부서"), r, 0)
        self.cmb_division = QComboBox(); self.cmb_division.addItems(list(DIVISIONS))
        form.addWidget(self.cmb_division, r, 1); r += 1

        form.addWidget(QLabel("급여"), r, 0)
        self.spin_salary = QDoubleSpinBox()
        self.spin_salary.setRange(0, 1_000_000_000); self.spin_salary.setDecimals(2)
        form.addWidget(self.spin_salary, r, 1); r += 1

        edit_row = QHBoxLayout()
        self.btn_add = QPushButton("+ 추가")
        self.btn_salary = QPushButton("급여 변경")
        self.btn_division = QPushButton("부서 변경")
        edit_row.addWidget(self.btn_add)
        edit_row.addWidget(self.btn_salary)
        edit_row.addWidget(self.btn_division)
        form.addLayout(edit_row, r, 0, 1, 2)
        right.addWidget(form_box)

        # 급여 인상
        idx_box = QGroupBox("급여 인상")
        idx_row = QHBoxLayout(idx_box)
        self.cmb_index_div = QComboBox(); self.cmb_index_div.addItems(DIVISION_FILTER)
        self.spin_percent = QDoubleSpinBox()
        self.spin_percent.setRange(-100, 1000); self.spin_percent.setSuffix(" %")
        self.btn_index = QPushButton("적용")
        idx_row.addWidget(self.cmb_index_div)
        idx_row.addWidget(self.spin_percent)
        idx_row.addWidget(self.btn_index)
        right.addWidget(idx_box)

        # 통계
        self.lbl_stats = QLabel("")
        self.lbl_stats.setStyleSheet("color:#444;")
        right.addWidget(self.lbl_stats)
        right.addStretch(1)

        self.btn_close = QPushButton("닫기")
        right.addWidget(self.btn_close)

        root.addLayout(left, 6)
        root.addLayout(right, 4)

        # 시그널
        self.table.selectionModel().selectionChanged.connect(self._on_selection_changed)
        self.btn_del.clicked.connect(self._on_delete_clicked)
        self.btn_add.clicked.connect(self._on_add_clicked)
        self.btn_salary.clicked.connect(self._on_salary_clicked)
        self.btn_division.clicked.connect(self._on_division_clicked)
        self.btn_index.clicked.connect(self._on_index_clicked)
        self.btn_close.clicked.connect(self.accept)

    # ---------- 표시 ----------
    def _refresh(self):
        self.model.refresh()
        if len(self.book) == 0:
            self.lbl_stats.setText("직원이 없습니다.")
            return
        self.lbl_stats.setText(
            f"인원 {len(self.book)}/{self.book.capacity}\n"
            f"총 급여 {format_salary(self.book.total_salary())}\n"
            f"평균 급여 {format_salary(self.book.average_salary())}"
        )

    def _selected_employee(self):
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        return self.model.employee_at(rows[0].row())

    def _on_selection_changed(self, *_):
        e = self._selected_employee()
        if e is None:
            return
        self.txt_name.setText(e.name)
        if e.division in DIVISIONS:
            self.cmb_division.setCurrentIndex(DIVISIONS.index(e.division))
        self.spin_salary.setValue(e.salary)

    def _run(self, action) -> bool:
        """명부 연산 실행, 실패 시 경고창"""
        try:
            action()
        except EmployeeBookError as e:
            QMessageBox.warning(self, "오류", str(e))
            return False
        self._refresh()
        return True

    # ---------- 버튼 동작 ----------
    def _on_add_clicked(self):
        name = self.txt_name.text().strip()
        if not name:
            QMessageBox.warning(self, "확인", "이름은 필수항목입니다.")
            self.txt_name.setFocus()
            return
        if self.book.is_full():
            QMessageBox.information(self, "안내", "The array is already full")
            return
        emp = Employee(name, self.cmb_division.currentText(), self.spin_salary.value())
        self._run(lambda: self.book.add(emp))

    def _on_delete_clicked(self):
        e = self._selected_employee()
        if e is None:
            QMessageBox.information(self, "안내", "삭제할 직원을 선택해주세요.")
            return
        if QMessageBox.question(self, "확인", f"직원 [{e.name}]을(를) 삭제하시겠습니까?") != QMessageBox.Yes:
            return
        self._run(lambda: self.book.remove(e.id))

    def _on_salary_clicked(self):
        name = self.txt_name.text().strip()
        self._run(lambda: self.book.set_salary(name, self.spin_salary.value()))

    def _on_division_clicked(self):
        name = self.txt_name.text().strip()
        self._run(lambda: self.book.set_division(name, self.cmb_division.currentText()))

    def _on_index_clicked(self):
        division = self.cmb_index_div.currentText()
        percent = self.spin_percent.value()
        if division == DIVISION_FILTER[0]:
            self._run(lambda: self.book.index_salary(percent))
        else:
            self._run(lambda: self.book.index_salary_in_division(division, percent))
