"""Translation strings for English and Ukrainian."""

from typing import Dict

# Type alias for translation dictionaries
TranslationDict = Dict[str, str]

TRANSLATIONS: Dict[str, TranslationDict] = {
    "en": {
        # =============================================================================
        # Formatting
        # =============================================================================
        "format.date": "%Y-%m-%d",

        # =============================================================================
        # Results
        # =============================================================================
        "result.title": "Vacation Calculation Result",
        "result.duration": "Calculated duration: {count} {noun} (inclusive).",
        "result.start": "Calculated start date: {date}.",
        "result.end": "Calculated end date: {date}.",
        "result.label.start": "Start date:",
        "result.label.end": "End date:",
        "result.label.duration": "Duration:",
        "result.label.calendar_days": "Calendar days:",
        "result.label.holidays": "Holidays in period:",
        "result.label.solved": "(calculated)",
        "result.holidays_title": "Holidays in Period",
        "result.holidays_list_title": "Holiday List",
        "result.no_holidays": "No valid holiday dates found.",

        # =============================================================================
        # Weekend advisory
        # =============================================================================
        "advisory.title": "Attention",
        "advisory.sunday_start": "The start date ({date}) falls on a Sunday.",
        "advisory.sunday_end": "The end date ({date}) falls on a Sunday.",

        # =============================================================================
        # Errors
        # =============================================================================
        "error.prefix": "Error:",
        "error.wrong_parameter_count": (
            "Please enter exactly two of the three parameters "
            "(start date, end date, duration)."
        ),
        "error.start_after_end": "The start date cannot be later than the end date.",
        "error.non_positive_duration": "The duration must be a positive number of days.",
        "error.unreachable_duration": (
            "The duration cannot be reached: the holiday list covers every "
            "day within the search limit."
        ),
        "error.date_range_exceeded": (
            "The duration runs past the supported date range (years 1-9999)."
        ),
        "export.saved": "Result saved to {path}",
        "export.saved_both": "Results saved to:\n  - {json_path}\n  - {csv_path}",
        "success.prefix": "Success:",

        # =============================================================================
        # Weekdays
        # =============================================================================
        "weekday.0": "Monday",
        "weekday.1": "Tuesday",
        "weekday.2": "Wednesday",
        "weekday.3": "Thursday",
        "weekday.4": "Friday",
        "weekday.5": "Saturday",
        "weekday.6": "Sunday",
    },
    "uk": {
        "format.date": "%d.%m.%Y",

        "result.title": "Результат розрахунку відпустки",
        "result.duration": "Розрахункова тривалість: {count} {noun} (включно).",
        "result.start": "Розрахункова дата початку: {date}.",
        "result.end": "Розрахункова дата завершення: {date}.",
        "result.label.start": "Дата початку:",
        "result.label.end": "Дата завершення:",
        "result.label.duration": "Тривалість:",
        "result.label.calendar_days": "Календарних днів:",
        "result.label.holidays": "Святкових днів:",
        "result.label.solved": "(розраховано)",
        "result.holidays_title": "Святкові дні в періоді",
        "result.holidays_list_title": "Список святкових днів",
        "result.no_holidays": "Коректних святкових дат не знайдено.",

        "advisory.title": "Увага",
        "advisory.sunday_start": "Дата початку ({date}) припадає на неділю.",
        "advisory.sunday_end": "Дата завершення ({date}) припадає на неділю.",

        "error.prefix": "Помилка:",
        "error.wrong_parameter_count": (
            "Будь ласка, введіть рівно два з трьох параметрів "
            "(Дата Початку, Дата Завершення, Тривалість)."
        ),
        "error.start_after_end": "Дата початку не може бути пізнішою за дату завершення.",
        "error.non_positive_duration": "Тривалість має бути додатним числом днів.",
        "error.unreachable_duration": (
            "Тривалість недосяжна: список святкових днів охоплює кожен "
            "день у межах пошуку."
        ),
        "error.date_range_exceeded": (
            "Тривалість виходить за межі підтримуваного діапазону дат (роки 1-9999)."
        ),
        "export.saved": "Результат збережено у {path}",
        "export.saved_both": "Результати збережено у:\n  - {json_path}\n  - {csv_path}",
        "success.prefix": "Успіх:",

        "weekday.0": "Понеділок",
        "weekday.1": "Вівторок",
        "weekday.2": "Середа",
        "weekday.3": "Четвер",
        "weekday.4": "П'ятниця",
        "weekday.5": "Субота",
        "weekday.6": "Неділя",
    },
}


def get_translation(key: str, language: str = "en", **kwargs) -> str:
    """Get a translated string.

    Falls back to English, then to the key itself.

    Args:
        key: The translation key.
        language: Language code ('en' or 'uk').
        **kwargs: Format arguments for the translation string.

    Returns:
        The translated and formatted string.
    """
    translations = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    text = translations.get(key) or TRANSLATIONS["en"].get(key, key)
    if kwargs:
        return text.format(**kwargs)
    return text
