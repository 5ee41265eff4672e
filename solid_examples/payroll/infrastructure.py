"""Infrastructure: employee persistence."""

import logging
from typing import Any, List

from ..models.employee import Employee
from ..protocols.example_protocol import Echo


class Database:
    """Pretend database that prints the statements it would run."""

    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def execute(self, query: str, params: List[Any]) -> None:
        """
        Print a statement and its parameters instead of running it.

        Args:
            query: SQL with ``?`` placeholders
            params: Values bound to the placeholders
        """
        logging.debug("Simulated SQL with %d params", len(params))
        self._echo(f"Executing SQL: {query}")
        self._echo(f"With params: {params!r}")


class EmployeeRepository:
    """Stores and loads employees through a ``Database``."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, employee: Employee) -> None:
        self.db.execute(
            "INSERT INTO employees VALUES (?, ?, ?, ?)",
            [employee.id, employee.name, employee.hours_worked, employee.rate],
        )

    def find_by_id(self, employee_id: int) -> Employee:
        """Load an employee. The simulated table holds a single row."""
        self.db.execute("SELECT * FROM employees WHERE id = ?", [employee_id])
        return Employee(id=employee_id, name="Alice", hours_worked=40.0, rate=20.0)


__all__ = ["Database", "EmployeeRepository"]
