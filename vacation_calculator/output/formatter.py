"""
Console output formatting using Rich.
"""

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vacation_calculator.data.schemas import CalculationMode, CalculationResult
from vacation_calculator.i18n import Translator, format_date, pluralize_days, weekday_name


def summarize_result(result: CalculationResult, language: str = "en") -> str:
    """
    One-line localized description of the solved value.

    Args:
        result: CalculationResult to describe.
        language: Message language.

    Returns:
        e.g. "Calculated duration: 7 days (inclusive)."
    """
    translator = Translator(language)
    if result.mode == CalculationMode.DURATION:
        return translator(
            "result.duration",
            count=result.duration,
            noun=pluralize_days(result.duration, translator.language),
        )
    return translator(
        f"result.{result.mode.value}",
        date=format_date(result.computed_value, translator.language),
    )


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, language: str = "en", console: Console = None):
        """
        Initialize the console formatter.

        Args:
            language: Language for labels and messages.
            console: Rich console to write to (created if not provided).
        """
        self.console = console or Console()
        self.translator = Translator(language)

    @property
    def language(self) -> str:
        return self.translator.language

    def print_result(self, result: CalculationResult) -> None:
        """
        Print a vacation calculation result.

        Args:
            result: CalculationResult to display.
        """
        t = self.translator

        self.console.print()
        self.console.rule(f"[bold blue]{t('result.title')}[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=20)
        table.add_column("Value", style="white")

        solved = f" [green]{t('result.label.solved')}[/green]"
        table.add_row(
            t("result.label.start"),
            format_date(result.start_date, self.language)
            + (solved if result.mode == CalculationMode.START else ""),
        )
        table.add_row(
            t("result.label.end"),
            format_date(result.end_date, self.language)
            + (solved if result.mode == CalculationMode.END else ""),
        )
        table.add_row(
            t("result.label.duration"),
            f"{result.duration} {pluralize_days(result.duration, self.language)}"
            + (solved if result.mode == CalculationMode.DURATION else ""),
        )
        table.add_row(t("result.label.calendar_days"), str(result.calendar_days))
        table.add_row(t("result.label.holidays"), str(len(result.holidays_in_range)))

        self.console.print(Panel(table, title=f"[bold]{t('result.title')}[/bold]"))
        self.console.print(Text(summarize_result(result, self.language), style="bold green"))

        if result.holidays_in_range:
            self.print_holidays(result.holidays_in_range, t("result.holidays_title"))

        if result.warnings:
            self.console.print()
            for warning in result.warnings:
                self.console.print(f"[yellow]{t('advisory.title')}:[/yellow] {warning}")

        self.console.print()

    def print_holidays(self, holidays: Iterable, title: str = None) -> None:
        """
        Print a table of holiday dates with weekday names.

        Args:
            holidays: Dates to display.
            title: Optional table title.
        """
        title = title or self.translator("result.holidays_list_title")
        holidays = list(holidays)

        if not holidays:
            self.console.print(f"[dim]{self.translator('result.no_holidays')}[/dim]")
            return

        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("#", style="dim", justify="right", width=4)
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="white", width=12)

        for index, holiday in enumerate(holidays, start=1):
            holiday_table.add_row(
                str(index),
                format_date(holiday, self.language),
                weekday_name(holiday, self.language),
            )

        self.console.print(holiday_table)

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]{self.translator('error.prefix')}[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]{self.translator('success.prefix')}[/bold green] {message}")


def error_message(error: Exception, language: str = "en") -> str:
    """Localized text for an InputError, or the plain message for other errors."""
    message_key = getattr(error, "message_key", None)
    if message_key is None:
        return str(error)
    return Translator(language)(message_key)
