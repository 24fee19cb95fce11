# utils/parse_utils.py
import math
from employee_book.exceptions import ParseFailure


def parse_salary(text: str) -> float:
    """
    ' 150 ' -> 150.0
    '119,5' -> 119.5  (쉼표 구분자 허용)
    숫자가 아니거나 nan/inf면 ParseFailure (원래 ValueError는 __cause__로 보존)
    """
    raw = text.strip().replace(",", ".")
    try:
        value = float(raw)
    except ValueError as e:
        raise ParseFailure(f"Salary is not a number: {text!r}") from e
    if not math.isfinite(value):
        raise ParseFailure(f"Salary must be finite: {text!r}")
    return value


def parse_employee_line(text: str) -> tuple[str, str, float]:
    """
    'John/1/123' -> ('John', '1', 123.0)
    이름에 공백 허용, 구분자는 '/'
    """
    parts = [p.strip() for p in text.split("/")]
    if len(parts) != 3 or not parts[0]:
        raise ParseFailure(f"Expected 'name/division/salary', got {text!r}")
    name, division, salary = parts
    return name, division, parse_salary(salary)
