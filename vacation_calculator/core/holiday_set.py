"""
Holiday set parsed from a free-form list of ISO dates.
"""

import logging
import re
from datetime import date
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\n,]+")
_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class HolidaySet:
    """Immutable set of calendar dates that do not count as vacation days."""

    __slots__ = ("_dates",)

    def __init__(self, dates: Iterable[date] = ()):
        self._dates: FrozenSet[date] = frozenset(dates)

    def __contains__(self, day: object) -> bool:
        return day in self._dates

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self._dates))

    def __len__(self) -> int:
        return len(self._dates)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HolidaySet):
            return self._dates == other._dates
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._dates)

    def __repr__(self) -> str:
        return f"HolidaySet({[d.isoformat() for d in self]})"

    def in_range(self, start: date, end: date) -> List[date]:
        """Sorted holidays within the closed interval [start, end]."""
        return sorted(d for d in self._dates if start <= d <= end)

    def union(self, other: "HolidaySet") -> "HolidaySet":
        return HolidaySet(self._dates | other._dates)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "HolidaySet":
        """Read a holiday list from a UTF-8 text file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Holiday file not found: {file_path}")
        holidays = parse_holidays(file_path.read_text(encoding="utf-8"))
        logger.debug(f"Loaded {len(holidays)} holidays from {file_path}")
        return holidays


def load_holiday_file(path: Optional[str]) -> HolidaySet:
    """
    Load the configured holiday file for long-running services.

    An unreadable file is logged and treated as an empty holiday list so the
    service still starts.

    Args:
        path: Configured holiday file, or None.

    Returns:
        HolidaySet from the file, empty if there is none.
    """
    if not path:
        return HolidaySet()
    try:
        return HolidaySet.from_file(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring holiday file {path}: {e}")
        return HolidaySet()


def _parse_token(token: str):
    if not _ISO_DATE.match(token):
        return None
    try:
        return date.fromisoformat(token)
    except ValueError:
        # Well-formed but not a real day, e.g. 2024-02-30
        return None


def parse_holidays(raw_text: str) -> HolidaySet:
    """
    Parse holiday dates from free-form text.

    Entries are separated by newlines or commas. Only literal ``YYYY-MM-DD``
    tokens are kept; anything else is dropped without error.

    Args:
        raw_text: Text as typed by the user, may be empty.

    Returns:
        HolidaySet with every valid date found.
    """
    if not raw_text:
        return HolidaySet()

    tokens = [token.strip() for token in _SEPARATORS.split(raw_text)]
    tokens = [token for token in tokens if token]

    dates = []
    for token in tokens:
        parsed = _parse_token(token)
        if parsed is not None:
            dates.append(parsed)

    dropped = len(tokens) - len(dates)
    if dropped:
        logger.debug(f"Dropped {dropped} malformed holiday entries")

    return HolidaySet(dates)
