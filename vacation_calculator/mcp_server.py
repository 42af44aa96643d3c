"""
MCP Server for the Vacation Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the vacation calculator to Claude Desktop and other MCP clients.

Supports two transport modes:
- stdio: For local Claude Desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from typing import List, Optional, Union

from mcp.server.fastmcp import FastMCP

from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.calculator import VacationCalculator
from vacation_calculator.core.errors import InputError
from vacation_calculator.core.holiday_set import load_holiday_file, parse_holidays
from vacation_calculator.core.input_parser import parse_inputs
from vacation_calculator.output.exporter import ResultExporter
from vacation_calculator.output.formatter import error_message, summarize_result

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

default_holidays = load_holiday_file(config.holidays_file)
calculator = VacationCalculator(language=config.language, max_walk_days=config.max_walk_days)


def calculate_vacation(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    duration: Optional[int] = None,
    holidays: Optional[Union[str, List[str]]] = None,
) -> dict:
    """
    Calculate the missing value of a vacation period, skipping holidays.

    Provide exactly two of start_date, end_date and duration; the third is
    calculated. Holidays do not count toward the duration. The result warns
    when the start or end date falls on a Sunday.

    Args:
        start_date: First day of the vacation (YYYY-MM-DD)
        end_date: Last day of the vacation (YYYY-MM-DD)
        duration: Number of vacation days, holidays excluded (positive integer)
        holidays: Holiday dates, either one string separated by commas or
            newlines, or a list of YYYY-MM-DD strings. Added to the holidays
            from the configured holiday file.

    Returns:
        Dictionary with mode, start_date, end_date, duration, calendar_days,
        holidays_in_range, sunday_boundaries, warnings and summary, or an
        "error" entry when the request is invalid.

    Examples:
        Find the end date of a 10-day vacation:
        >>> calculate_vacation(start_date="2024-01-01", duration=10, holidays="2024-01-06")

        Count vacation days between two dates:
        >>> calculate_vacation(start_date="2024-01-01", end_date="2024-01-07")
    """
    if isinstance(holidays, list):
        holidays = "\n".join(holidays)

    inputs = parse_inputs(
        start_date, end_date, None if duration is None else str(duration)
    )

    try:
        result = calculator.calculate(
            inputs, default_holidays.union(parse_holidays(holidays or ""))
        )
    except InputError as e:
        return {"error": error_message(e, calculator.language), "kind": e.kind.value}

    response = ResultExporter.result_to_dict(result)
    response["summary"] = summarize_result(result, calculator.language)
    return response


def parse_holiday_list(text: str) -> dict:
    """
    Parse a holiday list the way calculate_vacation reads it.

    Args:
        text: Holiday dates separated by commas or newlines

    Returns:
        Dictionary with the count and the sorted ISO dates that were accepted.
    """
    holidays = parse_holidays(text)
    return {
        "count": len(holidays),
        "holidays": [d.isoformat() for d in holidays],
    }


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Vacation Calculator", host=host, port=port)
    mcp.tool()(calculate_vacation)
    mcp.tool()(parse_holiday_list)
    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Vacation Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    mcp = create_mcp_server(host=args.host, port=args.port)
    logger.info(f"Starting Vacation Calculator MCP server ({args.transport})")

    if args.transport == "sse":
        mcp.run(transport="sse")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
