"""
Resolves user-typed field values into calculation inputs.

Empty and unparsable fields both count as absent.
"""

from datetime import date, datetime
from typing import Optional

from vacation_calculator.data.schemas import CalculationInputs

DATE_FORMATS = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """Parse date string in various formats, or None if it is not a date."""
    if not date_str or not date_str.strip():
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue
    return None


def parse_duration(duration_str: Optional[str]) -> Optional[int]:
    """Parse a whole number of days. Negative values are kept for validation."""
    if duration_str is None:
        return None
    try:
        return int(str(duration_str).strip())
    except ValueError:
        return None


def parse_inputs(
    start: Optional[str] = None,
    end: Optional[str] = None,
    duration: Optional[str] = None,
) -> CalculationInputs:
    """Build CalculationInputs from raw text fields."""
    return CalculationInputs(
        start_date=parse_date(start),
        end_date=parse_date(end),
        duration=parse_duration(duration),
    )
