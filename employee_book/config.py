# config.py
from __future__ import annotations
import logging

# 명부 슬롯 수 (고정)
CAPACITY = 10

DIVISIONS = ("1", "2", "3", "4", "5")
DIVISION_PATTERN = r"^[12345]$"

# 급여 출력 시 소수점 구분자 (원본 테스트 로케일 기준)
DECIMAL_SEPARATOR = ","

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.WARNING


def configure_logging(level: int | None = None) -> None:
    """콘솔/GUI 진입점에서만 호출. 라이브러리 코어는 핸들러를 붙이지 않는다."""
    logging.basicConfig(level=level if level is not None else LOG_LEVEL, format=LOG_FORMAT)
