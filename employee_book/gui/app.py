# gui/app.py
import sys
from PySide6.QtWidgets import QApplication

from employee_book.config import configure_logging
from employee_book.gui.employee_manager import EmployeeManagerDialog


def main():
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    dlg = EmployeeManagerDialog()
    dlg.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
