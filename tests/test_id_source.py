"""Tests for the process-wide identifier counter."""

from employee_book.models import id_source
from employee_book.models.employee import Employee


def test_starts_from_reset_value():
    assert id_source.current() == 0
    assert id_source.next_id() == 1
    assert id_source.next_id() == 2


def test_reset_to_arbitrary_value():
    id_source.reset(41)
    assert Employee("Ann", "1", 10).id == 42
    assert id_source.current() == 42


def test_constructor_advances_counter():
    before = id_source.current()
    e = Employee("Bob", "2", 10)
    assert e.id > before
    assert id_source.current() == e.id


def test_copy_does_not_advance_counter():
    e = Employee("Bob", "2", 10)
    e.copy()
    assert id_source.current() == e.id
