# models/employee.py
from __future__ import annotations
from employee_book.models import id_source
from employee_book.utils.format_utils import format_salary


class Employee:
    """
    직원 값 객체.
    - id: 생성 시 id_source에서 발급, 이후 변경 불가
    - name / division / salary: 각각 독립적으로 수정 가능
    - division 검증은 하지 않음 (명부 연산 쪽 책임)
    """
    __slots__ = ("_id", "name", "division", "salary")

    def __init__(self, name: str, division: str, salary: float):
        self._id = id_source.next_id()
        self.name = name
        self.division = division      # "1" ~ "5"
        self.salary = salary

    @classmethod
    def from_other(cls, other: Employee) -> Employee:
        # 복사 생성: 카운터를 건드리지 않고 id 그대로 유지
        e = cls.__new__(cls)
        e._id = other._id
        e.name = other.name
        e.division = other.division
        e.salary = other.salary
        return e

    @property
    def id(self) -> int:
        return self._id

    def copy(self) -> Employee:
        return Employee.from_other(self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return Employee.from_other(self)

    # ---------- 문자열 표현 ----------
    def full_string(self) -> str:
        return (f"Employee(id={self._id}, name={self.name}, "
                f"division={self.division}, salary={format_salary(self.salary)})")

    def short_string(self) -> str:
        return f"Employee(id={self._id}, name={self.name}, salary={format_salary(self.salary)})"

    def __str__(self):
        return self.full_string()

    def __repr__(self):
        return (f"Employee(id={self._id!r}, name={self.name!r}, "
                f"division={self.division!r}, salary={self.salary!r})")

    def __eq__(self, other):
        if not isinstance(other, Employee):
            return NotImplemented
        return (self._id, self.name, self.division, self.salary) == \
               (other._id, other.name, other.division, other.salary)

    # 가변 객체이므로 해시 불가
    __hash__ = None
