"""
Data models for the vacation calculator using Pydantic.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from vacation_calculator.i18n.translator import SUPPORTED_LANGUAGES


class CalculationMode(str, Enum):
    """Which of the three period parameters is solved for."""

    DURATION = "duration"
    START = "start"
    END = "end"


class Boundary(str, Enum):
    """Boundary of a vacation period."""

    START = "start"
    END = "end"


class CalculationInputs(BaseModel):
    """Two of start date, end date and duration; the third one is solved."""

    start_date: Optional[date] = Field(default=None, description="First day of the period")
    end_date: Optional[date] = Field(default=None, description="Last day of the period")
    duration: Optional[int] = Field(default=None, description="Number of non-holiday days")

    def present(self) -> tuple:
        """Presence flags for (start_date, end_date, duration)."""
        return (
            self.start_date is not None,
            self.end_date is not None,
            self.duration is not None,
        )


class CalculationResult(BaseModel):
    """Complete result of a vacation calculation."""

    mode: CalculationMode = Field(..., description="Quantity that was solved for")
    start_date: date = Field(..., description="Resolved first day of the period")
    end_date: date = Field(..., description="Resolved last day of the period")
    duration: int = Field(..., ge=0, description="Non-holiday days in the period")
    holidays_in_range: List[date] = Field(
        default_factory=list, description="Holidays inside the period, sorted"
    )
    sunday_boundaries: List[Boundary] = Field(
        default_factory=list, description="Boundaries that fall on a Sunday"
    )
    warnings: List[str] = Field(default_factory=list, description="Weekend advisories")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )

    @property
    def computed_value(self) -> Union[int, date]:
        """The solved quantity: a duration or one of the boundary dates."""
        if self.mode == CalculationMode.DURATION:
            return self.duration
        if self.mode == CalculationMode.START:
            return self.start_date
        return self.end_date

    @property
    def calendar_days(self) -> int:
        """Calendar days in the period, holidays included."""
        return (self.end_date - self.start_date).days + 1


class Config(BaseModel):
    """Configuration for the vacation calculator."""

    language: str = Field(default="en", description="Language for messages: en or uk")
    holidays_file: Optional[str] = Field(
        default=None, description="Text file with one holiday date per line"
    )
    max_walk_days: int = Field(
        default=36600,
        ge=1,
        le=1_000_000,
        description="Maximum calendar days the date solver may visit",
    )
    output_format: str = Field(default="json", description="Default output format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Only English and Ukrainian messages are available."""
        lang = v.lower().strip()
        if lang not in SUPPORTED_LANGUAGES:
            raise ValueError(f"language must be one of: {', '.join(SUPPORTED_LANGUAGES)}")
        return lang

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        if v not in ("json", "csv"):
            raise ValueError("output_format must be 'json' or 'csv'")
        return v
