"""
Weekend advisory: flags period boundaries that fall on a Sunday.
"""

from datetime import date
from typing import List, Optional, Tuple

from vacation_calculator.data.schemas import Boundary
from vacation_calculator.i18n.formatting import format_date
from vacation_calculator.i18n.translations import get_translation

SUNDAY = 6


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def sunday_advisories(
    start: Optional[date],
    end: Optional[date],
    language: str = "en",
) -> Tuple[List[Boundary], List[str]]:
    """
    Check the effective boundaries of a period for Sundays.

    Args:
        start: Effective start date (solved or given), if any.
        end: Effective end date (solved or given), if any.
        language: Language for the advisory messages.

    Returns:
        Tuple of (flagged boundaries, one message per flagged boundary).
    """
    boundaries: List[Boundary] = []
    messages: List[str] = []

    for boundary, day in ((Boundary.START, start), (Boundary.END, end)):
        if day is not None and is_sunday(day):
            boundaries.append(boundary)
            messages.append(
                get_translation(
                    f"advisory.sunday_{boundary.value}",
                    language,
                    date=format_date(day, language),
                )
            )

    return boundaries, messages
