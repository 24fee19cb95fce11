# exceptions.py
class EmployeeBookError(Exception):
    """직원 명부 예외의 공통 부모."""


class BadArgument(EmployeeBookError, ValueError):
    pass


class NotFound(EmployeeBookError, LookupError):
    pass


class AmbiguousMatch(EmployeeBookError, ValueError):
    pass


class BadState(EmployeeBookError):
    pass


class ParseFailure(EmployeeBookError, ValueError):
    pass


# 콘솔 메뉴 이동용
class CancelAction(Exception):
    pass


class GoBackAction(Exception):
    pass
