"""Operations: overtime tracking."""

from ..models.employee import Employee
from ..utils.constants import REGULAR_HOURS_LIMIT


class OvertimeTracker:
    """Tracks hours worked beyond the regular week."""

    @staticmethod
    def calculate_overtime_hours(employee: Employee) -> float:
        return max(employee.hours_worked - REGULAR_HOURS_LIMIT, 0.0)


__all__ = ["OvertimeTracker"]
