"""Tests for the payroll package."""

import pytest

from solid_examples.models import Employee
from solid_examples.payroll import Database, EmployeeRepository, OvertimeTracker, PayrollCalculator


@pytest.fixture
def database(echo_lines):
    lines, echo = echo_lines
    return lines, Database(echo)


class TestPayrollCalculator:
    """Test pay calculation."""

    @pytest.mark.parametrize(
        "hours,expected",
        [(0.0, 0.0), (40.0, 800.0), (45.0, 950.0), (50.0, 1100.0)],
    )
    def test_calculate_pay(self, hours, expected):
        employee = Employee(id=1, name="Alice", hours_worked=hours, rate=20.0)
        assert PayrollCalculator.calculate_pay(employee) == expected


class TestOvertimeTracker:
    """Test overtime tracking."""

    def test_overtime_hours(self):
        employee = Employee(id=1, name="Alice", hours_worked=45.0, rate=20.0)
        assert OvertimeTracker.calculate_overtime_hours(employee) == 5.0

    def test_no_overtime(self):
        employee = Employee(id=1, name="Alice", hours_worked=39.5, rate=20.0)
        assert OvertimeTracker.calculate_overtime_hours(employee) == 0.0


class TestEmployeeRepository:
    """Test the simulated persistence."""

    def test_save(self, database):
        lines, db = database
        EmployeeRepository(db).save(Employee(id=3, name="Carol", hours_worked=10.0, rate=5.0))
        assert lines == [
            "Executing SQL: INSERT INTO employees VALUES (?, ?, ?, ?)",
            "With params: [3, 'Carol', 10.0, 5.0]",
        ]

    def test_find_by_id(self, database):
        lines, db = database
        employee = EmployeeRepository(db).find_by_id(9)
        assert employee.id == 9
        assert employee.hours_worked == 40.0
        assert lines[0] == "Executing SQL: SELECT * FROM employees WHERE id = ?"

    def test_negative_hours_rejected(self):
        with pytest.raises(ValueError):
            Employee(id=1, name="Alice", hours_worked=-1.0, rate=20.0)
