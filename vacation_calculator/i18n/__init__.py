"""Internationalization (i18n) module for bilingual English/Ukrainian support."""

from vacation_calculator.i18n.formatting import format_date, pluralize_days, weekday_name
from vacation_calculator.i18n.translator import Translator, get_translator, set_language, t

__all__ = [
    "Translator",
    "format_date",
    "get_translator",
    "pluralize_days",
    "set_language",
    "t",
    "weekday_name",
]
