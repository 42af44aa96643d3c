"""Locale-aware date formatting and day-count pluralization."""

from datetime import date

from vacation_calculator.i18n.translations import get_translation

_UK_DAY_FORMS = ("день", "дні", "днів")


def format_date(value: date, language: str = "en") -> str:
    """Render a date the way the given language writes it."""
    return value.strftime(get_translation("format.date", language))


def pluralize_days(count: int, language: str = "en") -> str:
    """Noun form of "day" that agrees with ``count``.

    Ukrainian has three forms: 1, 21, 101 -> день; 2-4, 22-24 -> дні;
    everything else, including 11-14, -> днів.
    """
    if language == "uk":
        if count % 10 == 1 and count % 100 != 11:
            return _UK_DAY_FORMS[0]
        if count % 10 in (2, 3, 4) and count % 100 not in (12, 13, 14):
            return _UK_DAY_FORMS[1]
        return _UK_DAY_FORMS[2]
    return "day" if count == 1 else "days"


def weekday_name(value: date, language: str = "en") -> str:
    return get_translation(f"weekday.{value.weekday()}", language)
