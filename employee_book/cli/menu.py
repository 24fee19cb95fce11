# cli/menu.py
import logging
from employee_book.cli.employee_menu import (
    show_employees, show_names, show_by_divisions, add_employee,
    delete_employee, edit_employee, index_salaries, show_statistics,
    show_by_salary
)
from employee_book.config import configure_logging
from employee_book.exceptions import CancelAction, GoBackAction, EmployeeBookError
from employee_book.logic.employee_book import EmployeeBook
from employee_book.utils.input_handler import get_input

logger = logging.getLogger(__name__)

ACTIONS = {
    "1": show_employees,
    "2": show_names,
    "3": show_by_divisions,
    "4": add_employee,
    "5": delete_employee,
    "6": edit_employee,
    "7": index_salaries,
    "8": show_statistics,
    "9": show_by_salary,
}


def main_menu(book: EmployeeBook | None = None):
    book = book if book is not None else EmployeeBook()
    while True:
        print("\n[직원 명부 관리]")
        print("1. 직원 목록 보기")
        print("2. 이름 목록 보기")
        print("3. 부서별 보기")
        print("4. 직원 추가")
        print("5. 직원 삭제")
        print("6. 직원 수정")
        print("7. 급여 인상")
        print("8. 급여 통계")
        print("9. 급여 기준 조회")
        print("0. 종료")

        try:
            choice = get_input("선택")
            if choice == "0":
                print("프로그램을 종료합니다.")
                break
            action = ACTIONS.get(choice)
            if action is None:
                print("잘못된 선택.")
                continue
            action(book)
        except GoBackAction:
            print("이전 메뉴로 이동")
        except CancelAction:
            print("메인 메뉴로 이동")
        except EmployeeBookError as e:
            logger.info("action %s failed: %s", choice, e)
            print(f"오류: {e}")
        except EOFError:
            print("입력이 종료되었습니다.")
            break
    return book


def main():
    configure_logging()
    main_menu()


if __name__ == "__main__":
    main()
