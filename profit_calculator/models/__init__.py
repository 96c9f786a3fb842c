"""Data models for profit projections."""

from .calculation_request import CalculationRequest
from .formatting import (
    CurrencyFormatter,
    build_chart_data,
    build_table_rows,
    format_break_even,
)
from .projection import (
    NO_BREAK_EVEN,
    PROJECTION_MONTHS,
    FinancialInputs,
    PeriodProjection,
    ProjectionAggregates,
    ProjectionSummary,
    compute_projection,
    growth_multiplier,
    round2,
)

__all__ = [
    "NO_BREAK_EVEN",
    "PROJECTION_MONTHS",
    "FinancialInputs",
    "PeriodProjection",
    "ProjectionAggregates",
    "ProjectionSummary",
    "compute_projection",
    "growth_multiplier",
    "round2",
    "CalculationRequest",
    "CurrencyFormatter",
    "build_chart_data",
    "build_table_rows",
    "format_break_even",
]
