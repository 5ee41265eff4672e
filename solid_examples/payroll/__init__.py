"""
Payroll split by actor.

Each module answers to one department: accounting owns pay, operations owns
overtime, HR owns reporting, infrastructure owns persistence. They share
only the ``Employee`` data model.
"""

from .accounting import PayrollCalculator
from .operations import OvertimeTracker
from .reporting import EmployeeReport, EmployeeReporter
from .infrastructure import Database, EmployeeRepository

__all__ = [
    "PayrollCalculator",
    "OvertimeTracker",
    "EmployeeReport",
    "EmployeeReporter",
    "Database",
    "EmployeeRepository",
]
