"""Accounting: how much an employee is paid."""

from ..models.employee import Employee
from ..utils.constants import OVERTIME_MULTIPLIER, REGULAR_HOURS_LIMIT


class PayrollCalculator:
    """Calculates weekly pay."""

    @staticmethod
    def calculate_pay(employee: Employee) -> float:
        """
        Weekly pay: regular hours at the rate, overtime at 1.5x the rate.

        Args:
            employee: Employee to pay

        Returns:
            Pay in dollars

        Example:
            >>> PayrollCalculator.calculate_pay(Employee(id=1, name="Alice", hours_worked=45, rate=20))
            950.0
        """
        regular_hours = min(employee.hours_worked, REGULAR_HOURS_LIMIT)
        overtime_hours = max(employee.hours_worked - REGULAR_HOURS_LIMIT, 0.0)
        return regular_hours * employee.rate + overtime_hours * employee.rate * OVERTIME_MULTIPLIER


__all__ = ["PayrollCalculator"]
