"""
SRP, the problem: one class answering to three departments.

``Employee`` calculates pay for accounting, counts overtime for operations,
persists itself, and writes the HR report. A change requested by any one
of those actors touches the same class.
"""

from typing import Any, List

from pydantic import Field

from ..models.base import ValueModel
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..utils.constants import OVERTIME_MULTIPLIER, REGULAR_HOURS_LIMIT
from ..utils.formatting import format_number

INFO = ExampleInfo(
    name="srp_01",
    principle="SRP",
    title="God object: one class, three actors",
    summary="Employee mixes payroll, overtime tracking, persistence and reporting.",
)


class Database:
    """Pretend database that prints the statements it would run."""

    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def execute(self, query: str, params: List[Any]) -> None:
        self._echo(f"Executing SQL: {query}")
        self._echo(f"With params: {params!r}")


class Employee(ValueModel):
    """An employee that does everything itself."""

    id: int
    name: str
    hours_worked: float = Field(ge=0)
    rate: float = Field(ge=0)

    # Accounting
    def calculate_pay(self) -> float:
        regular_hours = min(self.hours_worked, REGULAR_HOURS_LIMIT)
        overtime_hours = max(self.hours_worked - REGULAR_HOURS_LIMIT, 0.0)
        return regular_hours * self.rate + overtime_hours * self.rate * OVERTIME_MULTIPLIER

    # Operations
    def calculate_overtime_hours(self) -> float:
        return max(self.hours_worked - REGULAR_HOURS_LIMIT, 0.0)

    # Infrastructure
    def save(self, db: Database) -> None:
        db.execute("INSERT INTO employees VALUES (?, ?, ?, ?)", [self.id, self.name, self.hours_worked, self.rate])

    # HR
    def generate_report(self) -> str:
        return (
            "Employee Report\n"
            f"Name: {self.name}\n"
            f"Hours: {format_number(self.hours_worked)}\n"
            f"Pay: ${self.calculate_pay():.2f}"
        )


def run(echo: Echo, context: RunContext) -> None:
    employee = Employee(id=1, name="Alice", hours_worked=45.0, rate=20.0)

    echo(f"Accounting: pay = ${employee.calculate_pay():.2f}")
    echo(f"Operations: overtime hours = {format_number(employee.calculate_overtime_hours())}")

    employee.save(Database(echo))

    echo("")
    echo("HR Report:")
    echo(employee.generate_report())


__all__ = ["INFO", "Database", "Employee", "run"]
