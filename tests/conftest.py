"""Shared fixtures for employee_book tests."""

import os

import pytest

from employee_book.logic.employee_book import EmployeeBook
from employee_book.models import id_source
from employee_book.models.employee import Employee

# GUI model tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _reset_ids():
    """Every test starts with the identifier counter at 0."""
    id_source.reset(0)
    yield
    id_source.reset(0)


@pytest.fixture
def staff() -> list:
    """Ten-slot setup with slot 3 left empty; ids 1..9 in construction order."""
    slots = [None] * 10
    slots[0] = Employee("John", "1", 123)
    slots[1] = Employee("Helen", "2", 150)
    slots[2] = Employee("Jim", "3", 180)
    slots[4] = Employee("Ann", "5", 210)
    slots[5] = Employee("Rob", "3", 190)
    slots[6] = Employee("Kim", "1", 140)
    slots[7] = Employee("Jun", "2", 119.5)
    slots[8] = Employee("Jeff", "5", 300.56)
    slots[9] = Employee("Burg", "4", 200)
    return slots


@pytest.fixture
def book(staff: list, capsys: pytest.CaptureFixture) -> EmployeeBook:
    """Populated book with the capture buffer cleared."""
    b = EmployeeBook(staff)
    capsys.readouterr()
    return b
