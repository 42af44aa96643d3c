"""
Main vacation calculator logic.

Given two of {start date, end date, duration}, solves for the third while
skipping holidays, then flags Sunday boundaries.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from vacation_calculator.core.advisory import sunday_advisories
from vacation_calculator.core.errors import InputError, InputErrorKind
from vacation_calculator.core.holiday_set import HolidaySet
from vacation_calculator.data.schemas import (
    CalculationInputs,
    CalculationMode,
    CalculationResult,
)

logger = logging.getLogger(__name__)

# Roughly a century of calendar days
DEFAULT_MAX_WALK_DAYS = 36600

_MODES_BY_PRESENCE = {
    # (start, end, duration)
    (True, True, False): CalculationMode.DURATION,
    (False, True, True): CalculationMode.START,
    (True, False, True): CalculationMode.END,
}


def select_mode(inputs: CalculationInputs) -> CalculationMode:
    """
    Choose the calculation mode from which inputs are present.

    Only presence matters here; values are validated by the solvers.

    Raises:
        InputError: Unless exactly two of the three inputs are present.
    """
    mode = _MODES_BY_PRESENCE.get(inputs.present())
    if mode is None:
        raise InputError(InputErrorKind.WRONG_PARAMETER_COUNT)
    return mode


def count_days(start: date, end: date, holidays: HolidaySet) -> int:
    """
    Count non-holiday days in the closed interval [start, end].

    Args:
        start: First day, counted unless it is a holiday.
        end: Last day, counted unless it is a holiday.
        holidays: Days that do not count.

    Returns:
        Number of non-holiday days.

    Raises:
        InputError: If start is after end.
    """
    if start > end:
        raise InputError(InputErrorKind.START_AFTER_END)

    calendar_days = (end - start).days + 1
    return calendar_days - len(holidays.in_range(start, end))


def _walk(
    origin: date,
    duration: int,
    holidays: HolidaySet,
    step: timedelta,
    max_walk_days: int,
) -> date:
    """Step from origin until `duration` non-holiday days have been visited."""
    if duration <= 0:
        raise InputError(InputErrorKind.NON_POSITIVE_DURATION)

    remaining = duration
    current = origin
    visited = 0

    while True:
        visited += 1
        if visited > max_walk_days:
            raise InputError(
                InputErrorKind.UNREACHABLE_DURATION,
                f"duration of {duration} days not reached within {max_walk_days} calendar days",
            )

        if current not in holidays:
            remaining -= 1
            if remaining == 0:
                return current

        try:
            current += step
        except OverflowError:
            raise InputError(
                InputErrorKind.UNREACHABLE_DURATION,
                "duration runs past the supported date range",
                message_key="error.date_range_exceeded",
            )


def solve_end_date(
    start: date,
    duration: int,
    holidays: HolidaySet,
    max_walk_days: int = DEFAULT_MAX_WALK_DAYS,
) -> date:
    """
    Find the last day of a period that starts on `start`.

    The start day itself is day 1 unless it is a holiday.

    Raises:
        InputError: For a non-positive duration, or if the holidays cover
            every day within `max_walk_days`.
    """
    return _walk(start, duration, holidays, timedelta(days=1), max_walk_days)


def solve_start_date(
    end: date,
    duration: int,
    holidays: HolidaySet,
    max_walk_days: int = DEFAULT_MAX_WALK_DAYS,
) -> date:
    """Mirror of solve_end_date: walk backward from `end`."""
    return _walk(end, duration, holidays, timedelta(days=-1), max_walk_days)


def solve(
    inputs: CalculationInputs,
    holidays: Optional[HolidaySet] = None,
    max_walk_days: int = DEFAULT_MAX_WALK_DAYS,
    language: str = "en",
) -> CalculationResult:
    """
    Solve for the missing parameter of a vacation period.

    Args:
        inputs: Exactly two of start date, end date and duration.
        holidays: Days excluded from the count (default: none).
        max_walk_days: Ceiling for the day-by-day walk of the date solver.
        language: Language for advisory messages.

    Returns:
        CalculationResult with all three values resolved.

    Raises:
        InputError: If the request is invalid or cannot be solved.
    """
    holidays = holidays if holidays is not None else HolidaySet()
    mode = select_mode(inputs)
    logger.debug(f"Calculation mode: {mode.value}")

    start, end, duration = inputs.start_date, inputs.end_date, inputs.duration

    if mode == CalculationMode.DURATION:
        duration = count_days(start, end, holidays)
    elif mode == CalculationMode.START:
        start = solve_start_date(end, duration, holidays, max_walk_days)
    else:
        end = solve_end_date(start, duration, holidays, max_walk_days)

    logger.debug(f"Resolved period {start} - {end}: {duration} days")

    boundaries, warnings = sunday_advisories(start, end, language)

    return CalculationResult(
        mode=mode,
        start_date=start,
        end_date=end,
        duration=duration,
        holidays_in_range=holidays.in_range(start, end),
        sunday_boundaries=boundaries,
        warnings=warnings,
    )


class VacationCalculator:
    """Solves vacation periods with a fixed language and walk ceiling."""

    def __init__(self, language: str = "en", max_walk_days: int = DEFAULT_MAX_WALK_DAYS):
        """
        Initialize the vacation calculator.

        Args:
            language: Language for advisory messages ('en' or 'uk').
            max_walk_days: Maximum calendar days the date solver may visit.
        """
        self.language = language
        self.max_walk_days = max_walk_days

    def calculate(
        self, inputs: CalculationInputs, holidays: Optional[HolidaySet] = None
    ) -> CalculationResult:
        """Solve a request. See `solve`."""
        return solve(
            inputs,
            holidays,
            max_walk_days=self.max_walk_days,
            language=self.language,
        )

    def calculate_simple(
        self,
        start_date: date = None,
        end_date: date = None,
        duration: int = None,
        holidays: HolidaySet = None,
    ) -> CalculationResult:
        """
        Keyword shortcut for calculate().

        Args:
            start_date: Optional start date.
            end_date: Optional end date.
            duration: Optional number of non-holiday days.
            holidays: Optional holiday set.

        Returns:
            CalculationResult with the missing value filled in.
        """
        inputs = CalculationInputs(
            start_date=start_date,
            end_date=end_date,
            duration=duration,
        )
        return self.calculate(inputs, holidays)
