"""
Core business logic for vacation calculation.
"""

from vacation_calculator.core.calculator import (
    VacationCalculator,
    count_days,
    select_mode,
    solve,
    solve_end_date,
    solve_start_date,
)
from vacation_calculator.core.errors import InputError, InputErrorKind
from vacation_calculator.core.holiday_set import HolidaySet, parse_holidays

__all__ = [
    "HolidaySet",
    "InputError",
    "InputErrorKind",
    "VacationCalculator",
    "count_days",
    "parse_holidays",
    "select_mode",
    "solve",
    "solve_end_date",
    "solve_start_date",
]
