"""
CLI interface for the vacation calculator.
"""

import logging
import sys
from typing import Optional

import click

from vacation_calculator import __version__
from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.calculator import VacationCalculator
from vacation_calculator.core.errors import InputError
from vacation_calculator.core.holiday_set import HolidaySet, parse_holidays
from vacation_calculator.core.input_parser import parse_inputs
from vacation_calculator.data.schemas import Config
from vacation_calculator.i18n import get_translator, set_language, t
from vacation_calculator.i18n.translator import SUPPORTED_LANGUAGES
from vacation_calculator.output.exporter import ResultExporter
from vacation_calculator.output.formatter import ConsoleFormatter, error_message

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_holidays(
    holidays_text: Optional[str], holidays_file: Optional[str], cfg: Config
) -> HolidaySet:
    """Merge holidays typed on the command line with the holiday file."""
    holidays = parse_holidays(holidays_text or "")
    file_path = holidays_file or cfg.holidays_file
    if file_path:
        holidays = holidays.union(HolidaySet.from_file(file_path))
    return holidays


def _language(ctx: click.Context, cfg: Config) -> str:
    return ctx.obj.get("language") or cfg.language


@click.group()
@click.version_option(version=__version__, prog_name="vacation-calc")
@click.option(
    "--language", "-l",
    type=click.Choice(SUPPORTED_LANGUAGES, case_sensitive=False),
    envvar="VACATION_CALC_LANGUAGE",
    help="Language for output (en=English, uk=Ukrainian).",
)
@click.pass_context
def main(ctx: click.Context, language: Optional[str]):
    """Vacation Calculator - solve a leave period's start, end or duration, skipping holidays."""
    ctx.ensure_object(dict)
    ctx.obj["language"] = language.lower() if language else None
    if language:
        set_language(language)


@main.command()
@click.option(
    "--start", "-s",
    default=None,
    help="Start date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--end", "-e",
    default=None,
    help="End date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--duration", "-d",
    default=None,
    help="Duration in non-holiday days",
)
@click.option(
    "--holidays", "-H", "holidays_text",
    default=None,
    help="Holiday dates, comma or newline separated (YYYY-MM-DD)",
)
@click.option(
    "--holidays-file", "-F",
    type=click.Path(),
    default=None,
    help="Text file with holiday dates",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "both", "console"]),
    default="console",
    help="Output format (default: console)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def calculate(ctx, start, end, duration, holidays_text, holidays_file, output, format, config, verbose):
    """Calculate the missing one of start date, end date and duration.

    Give exactly two of --start, --end and --duration.

    Example:
        vacation-calc calculate -s 2024-01-01 -d 10 -H "2024-01-06,2024-01-07"
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    formatter = ConsoleFormatter(get_translator().get_language())

    try:
        cfg = ConfigManager(config).load_config()
        language = _language(ctx, cfg)
        set_language(language)
        formatter = ConsoleFormatter(language)

        holidays = load_holidays(holidays_text, holidays_file, cfg)
        inputs = parse_inputs(start, end, duration)

        calculator = VacationCalculator(language=language, max_walk_days=cfg.max_walk_days)
        result = calculator.calculate(inputs, holidays)

        if format == "console" or format == "both":
            formatter.print_result(result)

        if format in ("json", "csv", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if format == "json":
                path = exporter.export_json(result, output)
                formatter.print_success(t("export.saved", path=path))
            elif format == "csv":
                path = exporter.export_csv(result, output)
                formatter.print_success(t("export.saved", path=path))
            else:  # both
                json_path, csv_path = exporter.export_both(result)
                formatter.print_success(
                    t("export.saved_both", json_path=json_path, csv_path=csv_path)
                )

    except InputError as e:
        logger.debug(f"Rejected request: {e.kind.value}: {e}")
        formatter.print_error(error_message(e, formatter.language))
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Calculation failed")
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
@click.option(
    "--holidays", "-H", "holidays_text",
    default=None,
    help="Holiday dates, comma or newline separated (YYYY-MM-DD)",
)
@click.option(
    "--holidays-file", "-F",
    type=click.Path(),
    default=None,
    help="Text file with holiday dates",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.pass_context
def holidays(ctx, holidays_text, holidays_file, config):
    """Show the holiday list as it will be used by calculate."""
    formatter = ConsoleFormatter(get_translator().get_language())

    try:
        cfg = ConfigManager(config).load_config()
        language = _language(ctx, cfg)
        set_language(language)
        formatter = ConsoleFormatter(language)

        holiday_set = load_holidays(holidays_text, holidays_file, cfg)

        formatter.console.print()
        formatter.print_holidays(holiday_set)
        formatter.console.print()

    except (ValueError, FileNotFoundError) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = ConfigManager(config).load_config()

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "vacation_calculator.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
