# models/id_source.py
import threading

# 프로세스 전역 직원 ID 카운터 (0에서 시작, 발급 시 선증가)
_lock = threading.Lock()
_counter = 0


def next_id() -> int:
    global _counter
    with _lock:
        _counter += 1
        return _counter


def current() -> int:
    return _counter


def reset(value: int = 0) -> None:
    """테스트용: 카운터를 임의 값으로 되돌린다."""
    global _counter
    with _lock:
        _counter = value
