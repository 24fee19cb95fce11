# utils/format_utils.py
from employee_book.config import DECIMAL_SEPARATOR


def format_salary(value: float, sep: str = DECIMAL_SEPARATOR) -> str:
    """
    123 -> '123,00', 119.5 -> '119,50'
    소수 둘째 자리 반올림, 구분자는 config 기준
    """
    text = f"{value:.2f}"
    if sep != ".":
        text = text.replace(".", sep)
    return text
