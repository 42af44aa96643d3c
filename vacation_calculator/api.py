"""
FastAPI REST API for the vacation calculator.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from vacation_calculator import __version__
from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.calculator import VacationCalculator
from vacation_calculator.core.errors import InputError
from vacation_calculator.core.holiday_set import load_holiday_file, parse_holidays
from vacation_calculator.core.input_parser import parse_inputs
from vacation_calculator.i18n import Translator
from vacation_calculator.output.formatter import error_message, summarize_result

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

default_holidays = load_holiday_file(config.holidays_file)


# API Models
class CalculateRequest(BaseModel):
    """Request model for vacation calculation. Give exactly two of the three values."""

    start_date: Optional[str] = Field(None, description="Start date (YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY)")
    end_date: Optional[str] = Field(None, description="End date (YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY)")
    duration: Optional[Union[int, str]] = Field(None, description="Duration in non-holiday days")
    holidays: Optional[Union[str, List[str]]] = Field(
        None, description="Holiday dates as text or a list of YYYY-MM-DD strings"
    )
    language: Optional[str] = Field(None, description="Message language: en or uk")


class CalculateResponse(BaseModel):
    """Response model for vacation calculation."""

    mode: str
    start_date: date
    end_date: date
    duration: int
    calendar_days: int
    holidays_in_range: List[date]
    sunday_boundaries: List[str]
    warnings: List[str]
    summary: str
    calculation_timestamp: datetime


class ParseHolidaysRequest(BaseModel):
    """Request model for holiday list parsing."""

    text: str = Field("", description="Holiday dates, comma or newline separated")


class ParseHolidaysResponse(BaseModel):
    """Response model for holiday list parsing."""

    count: int
    holidays: List[date]


def _holidays_text(holidays: Optional[Union[str, List[str]]]) -> str:
    if holidays is None:
        return ""
    if isinstance(holidays, list):
        return "\n".join(holidays)
    return holidays


# FastAPI app
app = FastAPI(
    title="Vacation Calculator API",
    description="Solve the start date, end date or duration of a vacation, skipping holidays",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Vacation Calculator API",
        "version": __version__,
        "endpoints": {
            "POST /calculate": "Solve the missing start date, end date or duration",
            "POST /holidays/parse": "Parse a holiday list",
            "GET /health": "Health check",
        },
    }


@app.post("/calculate", response_model=CalculateResponse)
async def calculate_vacation(request: CalculateRequest):
    """
    Calculate the missing value of a vacation period.

    Provide exactly two of:
    - start_date
    - end_date
    - duration (positive number of non-holiday days)
    """
    language = Translator(request.language or config.language).get_language()

    inputs = parse_inputs(
        request.start_date,
        request.end_date,
        None if request.duration is None else str(request.duration),
    )
    holidays = default_holidays.union(parse_holidays(_holidays_text(request.holidays)))
    calculator = VacationCalculator(language=language, max_walk_days=config.max_walk_days)

    try:
        result = calculator.calculate(inputs, holidays)
    except InputError as e:
        raise HTTPException(
            status_code=400,
            detail={"kind": e.kind.value, "message": error_message(e, language)},
        )

    return CalculateResponse(
        mode=result.mode.value,
        start_date=result.start_date,
        end_date=result.end_date,
        duration=result.duration,
        calendar_days=result.calendar_days,
        holidays_in_range=result.holidays_in_range,
        sunday_boundaries=[b.value for b in result.sunday_boundaries],
        warnings=result.warnings,
        summary=summarize_result(result, language),
        calculation_timestamp=result.calculation_timestamp,
    )


@app.post("/holidays/parse", response_model=ParseHolidaysResponse)
async def parse_holiday_list(request: ParseHolidaysRequest):
    """Parse a holiday list; malformed entries are dropped."""
    holidays = list(parse_holidays(request.text))
    return ParseHolidaysResponse(count=len(holidays), holidays=holidays)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
