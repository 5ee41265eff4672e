"""HR: employee reports."""

from ..models.base import ValueModel
from ..models.employee import Employee
from ..utils.formatting import format_number
from .accounting import PayrollCalculator


class EmployeeReport(ValueModel):
    """
    Machine-readable employee report.

    Attributes:
        name: Employee name
        hours: Hours worked
        pay: Pay in dollars, rounded to cents
    """

    name: str
    hours: float
    pay: float


class EmployeeReporter:
    """Builds employee reports for HR."""

    @staticmethod
    def generate_text_report(employee: Employee) -> str:
        return (
            "Employee Report\n"
            f"Name: {employee.name}\n"
            f"Hours: {format_number(employee.hours_worked)}\n"
            f"Pay: ${PayrollCalculator.calculate_pay(employee):.2f}"
        )

    @staticmethod
    def generate_json_report(employee: Employee) -> str:
        report = EmployeeReport(
            name=employee.name,
            hours=employee.hours_worked,
            pay=round(PayrollCalculator.calculate_pay(employee), 2),
        )
        return report.model_dump_json()


__all__ = ["EmployeeReport", "EmployeeReporter"]
