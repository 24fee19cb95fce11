# cli/employee_menu.py
from employee_book.logic.employee_book import EmployeeBook
from employee_book.models.employee import Employee
from employee_book.utils.format_utils import format_salary
from employee_book.utils.input_handler import get_input
from employee_book.utils.parse_utils import parse_employee_line, parse_salary


def _ask_division() -> str | None:
    d = get_input("부서(1-5, 빈칸=전체)", allow_empty=True)
    return d or None


def show_employees(book: EmployeeBook):
    division = _ask_division()
    print(book.to_string(division))


def show_names(book: EmployeeBook):
    book.print_all_names()


def show_by_divisions(book: EmployeeBook):
    book.print_employees_by_divisions()


def add_employee(book: EmployeeBook):
    line = get_input("이름/부서/급여 (예: John/1/123)")
    name, division, salary = parse_employee_line(line)
    if book.add(Employee(name, division, salary)):
        print("직원이 추가되었습니다.")


def delete_employee(book: EmployeeBook):
    key = get_input("삭제할 직원 ID 또는 이름")
    # 숫자면 ID, 아니면 이름
    book.remove(int(key) if key.isdecimal() else key)


def edit_employee(book: EmployeeBook):
    name = get_input("수정할 직원 이름")
    book.modify(name, read_line=lambda: get_input("입력"))
    print("직원 정보가 수정되었습니다.")


def index_salaries(book: EmployeeBook):
    division = _ask_division()
    percent = parse_salary(get_input("인상률(%)"))
    if division is None:
        book.index_salary(percent)
    else:
        book.index_salary_in_division(division, percent)
    print("급여가 인상되었습니다.")


def show_statistics(book: EmployeeBook):
    division = _ask_division()
    print(f"총 급여: {format_salary(book.total_salary(division))}")
    print(f"평균 급여: {format_salary(book.average_salary(division))}")
    print(f"최저 급여: {book.find_min_salary_employee(division)}")
    print(f"최고 급여: {book.find_max_salary_employee(division)}")


def show_by_salary(book: EmployeeBook):
    # 빈칸이면 현재 평균 급여 기준
    bound = parse_salary(get_input("기준 급여", default=format_salary(book.average_salary())))
    print("[기준 미만]")
    book.print_less_than_strictly_salary_employees(bound)
    print("[기준 이상]")
    book.print_more_than_salary_employees(bound)
