# logic/employee_book.py
from __future__ import annotations
import enum
import logging
import re
from typing import Callable, Iterator, List, Optional, Sequence

from employee_book.config import CAPACITY, DIVISION_PATTERN
from employee_book.exceptions import AmbiguousMatch, BadArgument, BadState, NotFound
from employee_book.models.employee import Employee
from employee_book.utils.parse_utils import parse_salary

logger = logging.getLogger(__name__)

_DIVISION_RE = re.compile(DIVISION_PATTERN)


# EmployeeBook() 와 EmployeeBook(None) 구분용
class _Missing(enum.Enum):
    MISSING = 0


_MISSING = _Missing.MISSING


def validate_percent(percent: float) -> None:
    if percent <= 0:
        raise BadArgument("Percent can't be equal to zero or negative")


def validate_division(division: str) -> None:
    if not isinstance(division, str) or not _DIVISION_RE.fullmatch(division):
        raise BadArgument("Specified division does not exist")


class EmployeeBook:
    """
    고정 크기(CAPACITY) 슬롯 배열에 직원을 보관하는 명부.
    - 빈 슬롯은 None, 조회 시 건너뛰고 추가 시 앞에서부터 채움
    - 삭제 시 해당 슬롯만 비움 (당기지 않음)
    - 저장되는 직원은 항상 복사본 (호출자 객체와 별개)
    """

    def __init__(self, employees: Sequence[Optional[Employee]] | None | _Missing = _MISSING):
        self._slots: List[Optional[Employee]] = [None] * CAPACITY
        if employees is _MISSING:
            return
        if employees is None:
            raise BadArgument("Parameter can't be None")
        for i, e in enumerate(list(employees)[:CAPACITY]):
            self._slots[i] = e.copy() if e is not None else None

    # ---------- 내부 헬퍼 ----------
    def _present(self) -> Iterator[Employee]:
        return (e for e in self._slots if e is not None)

    def _in_division(self, division: str) -> Iterator[Employee]:
        return (e for e in self._slots if e is not None and e.division == division)

    @staticmethod
    def _min_by_salary(candidates: Iterator[Employee]) -> Employee:
        # 동률이면 슬롯 순서상 첫 번째 (min은 첫 최소값을 돌려줌)
        found = min(candidates, key=lambda e: e.salary, default=None)
        if found is None:
            raise NotFound("No employees to compare")
        return found

    @staticmethod
    def _max_by_salary(candidates: Iterator[Employee]) -> Employee:
        found = max(candidates, key=lambda e: e.salary, default=None)
        if found is None:
            raise NotFound("No employees to compare")
        return found

    # ---------- 컨테이너 ----------
    @property
    def capacity(self) -> int:
        return CAPACITY

    def __len__(self) -> int:
        return sum(1 for _ in self._present())

    def __iter__(self) -> Iterator[Employee]:
        return self._present()

    def slots(self) -> tuple:
        return tuple(self._slots)

    def get(self, index: int) -> Optional[Employee]:
        return self._slots[index]

    def employees(self) -> List[Employee]:
        return [e.copy() for e in self._present()]

    def is_full(self) -> bool:
        return all(e is not None for e in self._slots)

    # ---------- 문자열 ----------
    def to_string(self, division: Optional[str] = None) -> str:
        if division is None:
            items = ["null" if e is None else e.full_string() for e in self._slots]
        else:
            # 검증 없음: 없는 부서면 '[]'
            items = [e.full_string() for e in self._in_division(division)]
        return "[" + ", ".join(items) + "]"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"EmployeeBook({self._slots!r})"

    # ---------- 집계 ----------
    def total_salary(self, division: Optional[str] = None) -> float:
        if division is None:
            return sum(e.salary for e in self._present())
        validate_division(division)
        return sum(e.salary for e in self._in_division(division))

    def average_salary(self, division: Optional[str] = None) -> float:
        if division is None:
            count = len(self)
        else:
            validate_division(division)
            count = sum(1 for _ in self._in_division(division))
        if count == 0:
            return 0
        return self.total_salary(division) / count

    def find_min_salary_employee(self, division: Optional[str] = None) -> Employee:
        if division is None:
            return self._min_by_salary(self._present())
        validate_division(division)
        return self._min_by_salary(self._in_division(division))

    def find_max_salary_employee(self, division: Optional[str] = None) -> Employee:
        if division is None:
            return self._max_by_salary(self._present())
        validate_division(division)
        return self._max_by_salary(self._in_division(division))

    # ---------- 일괄 인상 ----------
    def index_salary(self, percent: float) -> None:
        validate_percent(percent)
        factor = 1 + percent / 100
        for e in self._present():
            e.salary = e.salary * factor
        logger.debug("indexed all salaries by %s%%", percent)

    def index_salary_in_division(self, division: str, percent: float) -> None:
        validate_division(division)
        validate_percent(percent)
        factor = 1 + percent / 100
        for e in self._in_division(division):
            e.salary = e.salary * factor
        logger.debug("indexed division %s salaries by %s%%", division, percent)

    # ---------- 출력 ----------
    def print_all_names(self) -> None:
        print(", ".join(e.name for e in self._present()))

    def _print_filtered(self, keep: Callable[[Employee], bool]) -> None:
        lines = [e.short_string() for e in self._present() if keep(e)]
        if not lines:
            print("No such employees")
        else:
            print("\n".join(lines))

    def print_less_than_strictly_salary_employees(self, bound: float) -> None:
        self._print_filtered(lambda e: e.salary < bound)

    def print_more_than_salary_employees(self, bound: float) -> None:
        # 이름과 달리 경계값 포함(>=)
        self._print_filtered(lambda e: e.salary >= bound)

    def print_employees_by_divisions(self) -> None:
        divisions = {e.division for e in self._present()}
        if not divisions:
            print("Array is empty")
            return
        for division in divisions:
            print(division + ":\n")
            for e in self._in_division(division):
                print(e.short_string())
            print()

    # ---------- 조회 ----------
    def find_by_name(self, name: str) -> int:
        """
        이름(대소문자 무시)으로 슬롯 index 조회. 없으면 -1.
        두 명 이상이면 AmbiguousMatch
        """
        target = name.lower()
        found = [i for i, e in enumerate(self._slots)
                 if e is not None and e.name.lower() == target]
        if len(found) > 1:
            raise AmbiguousMatch("Multiple employees with same credentials prohibited")
        return found[0] if found else -1

    def find_by_id(self, emp_id: int) -> int:
        # 중복 id는 없다고 가정, 있으면 마지막 슬롯
        found_index = -1
        for i, e in enumerate(self._slots):
            if e is not None and e.id == emp_id:
                found_index = i
        return found_index

    # ---------- 추가/삭제 ----------
    def add(self, employee: Optional[Employee]) -> bool:
        if employee is None:
            return False
        for i, e in enumerate(self._slots):
            if e is None:
                self._slots[i] = employee.copy()
                logger.debug("added employee id=%s at slot %d", employee.id, i)
                return True
        print("The array is already full")
        return False

    def remove(self, key: int | str) -> bool:
        """id(int) 또는 이름(str)으로 삭제. 이름이 여러 명이면 AmbiguousMatch"""
        if isinstance(key, str):
            index = self.find_by_name(key)
        else:
            index = self.find_by_id(key)
        return self._remove_at(index)

    def _remove_at(self, index: int) -> bool:
        if index == -1:
            print("Employee not found")
            return False
        removed = self._slots[index]
        self._slots[index] = None
        print(f"{removed.full_string()} successfully deleted.")
        logger.debug("removed employee id=%s from slot %d", removed.id, index)
        return True

    # ---------- 수정 ----------
    def _require(self, name: str) -> Employee:
        index = self.find_by_name(name)
        if index == -1:
            raise NotFound("No such employee")
        return self._slots[index]

    def set_salary(self, name: str, value: float) -> None:
        e = self._require(name)
        e.salary = value
        logger.debug("salary of id=%s set to %s", e.id, value)

    def set_division(self, name: str, division: str) -> None:
        e = self._require(name)
        validate_division(division)
        e.division = division
        logger.debug("division of id=%s set to %s", e.id, division)

    def modify(self, name: str, read_line: Callable[[], str] = input) -> None:
        """
        대화형 수정 (원래 콘솔 흐름 유지용 어댑터)
        - '1': 다음 줄을 급여로 파싱 -> set_salary
        - '2': 다음 줄(trim)을 부서로 검증 -> set_division
        - 그 외: BadState
        """
        # 대상부터 확인 (없으면 입력을 읽지 않음)
        self._require(name)

        print("Choose action:\n 1. Change salary.\n 2. Change division.\n")
        choice = read_line().strip()
        if choice == "1":
            print("Enter new salary value:\n")
            self.set_salary(name, parse_salary(read_line()))
        elif choice == "2":
            print("Enter new division (1-5):\n")
            self.set_division(name, read_line().strip())
        else:
            raise BadState(f"Unexpected value: {choice!r}")

    # ---------- 비교 ----------
    def __eq__(self, other):
        if not isinstance(other, EmployeeBook):
            return NotImplemented
        return self._slots == other._slots

    # 가변 컨테이너 (list와 동일하게 해시 불가)
    __hash__ = None
