"""
Data models and schemas for the vacation calculator.
"""

from vacation_calculator.data.schemas import (
    Boundary,
    CalculationInputs,
    CalculationMode,
    CalculationResult,
    Config,
)

__all__ = [
    "Boundary",
    "CalculationInputs",
    "CalculationMode",
    "CalculationResult",
    "Config",
]
