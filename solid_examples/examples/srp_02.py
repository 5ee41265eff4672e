"""
SRP, the fix: one class per actor.

Same output as srp_01, produced by the ``payroll`` package where each
department's rules live in their own module.
"""

from ..models.context import RunContext
from ..models.employee import Employee
from ..models.example import ExampleInfo
from ..payroll import Database, EmployeeReporter, EmployeeRepository, OvertimeTracker, PayrollCalculator
from ..protocols.example_protocol import Echo
from ..utils.formatting import format_number

INFO = ExampleInfo(
    name="srp_02",
    principle="SRP",
    title="Split by actor: accounting, operations, HR, infrastructure",
    summary="Each department's rules change in one place only.",
)


def run(echo: Echo, context: RunContext) -> None:
    employee = Employee(id=1, name="Alice", hours_worked=45.0, rate=20.0)

    echo(f"Accounting: pay = ${PayrollCalculator.calculate_pay(employee):.2f}")
    echo(f"Operations: overtime hours = {format_number(OvertimeTracker.calculate_overtime_hours(employee))}")

    repository = EmployeeRepository(Database(echo))
    repository.save(employee)

    echo("")
    echo("HR Text Report:")
    echo(EmployeeReporter.generate_text_report(employee))
    echo("")
    echo("HR JSON Report:")
    echo(EmployeeReporter.generate_json_report(employee))


__all__ = ["INFO", "run"]
