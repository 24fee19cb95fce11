# utils/input_handler.py
from typing import Callable, Iterable
from employee_book.exceptions import CancelAction, GoBackAction


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low in ("취소", "cancel"):
            raise CancelAction()
        if low in ("뒤로", "back"):
            raise GoBackAction()

        if not v and default is not None:
            return default
        if not v and allow_empty:
            return ""   # 명시적 빈값 허용
        if not v:
            print("값을 입력하거나 '취소/뒤로'를 입력하세요.")
            continue
        return v


def line_reader(lines: Iterable[str]) -> Callable[[], str]:
    """
    미리 준비한 줄 목록을 input() 대신 쓰기 위한 readLine 함수.
    다 읽으면 EOFError (input()과 동일)
    """
    it = iter(lines)

    def read_line() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError("no more input lines") from None

    return read_line
