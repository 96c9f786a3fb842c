"""
Six-month profit projection engine.

This module turns validated financial inputs into a month-by-month profit
projection, detects the break-even month and computes the return on
investment. ``compute_projection`` is a pure function: it performs no I/O,
reads no configuration and never raises for finite inputs. Figures that
overflow a float saturate to infinity instead.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECTION_MONTHS = 6
NO_BREAK_EVEN = "Not within 6 months"

BreakEvenMonth = Union[
    Annotated[int, Field(ge=1, le=PROJECTION_MONTHS)], Literal["Not within 6 months"]
]

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """
    Round a value half away from zero to two decimal places.

    The float is converted through its shortest decimal representation so
    that values such as 1.005 round to 1.01 rather than suffering from binary
    representation error. Infinities and NaN are returned unchanged.

    Args:
        value: The value to round

    Returns:
        The rounded value as a float
    """
    value = float(value)
    if not math.isfinite(value):
        return value

    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Keep every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        rounded = float(exact.quantize(_CENT, rounding=ROUND_HALF_UP))
    # Normalise -0.0 so serialized output never shows "-0.00"
    return rounded + 0.0


class FinancialInputs(BaseModel):
    """Validated inputs for a projection run."""

    model_config = ConfigDict(frozen=True)

    initial_investment: float = Field(..., description="Up-front investment")
    monthly_revenue: float = Field(..., description="Revenue in the first month")
    monthly_costs: float = Field(..., description="Flat monthly costs")
    growth_rate: float = Field(
        ..., description="Month-over-month revenue growth in percent"
    )


class PeriodProjection(BaseModel):
    """Projected figures for a single month."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, le=PROJECTION_MONTHS, description="Month (1-based)")
    revenue: float = Field(..., description="Revenue for the month")
    costs: float = Field(..., description="Costs for the month")
    profit: float = Field(..., description="Revenue minus costs for the month")
    cumulative_profit: float = Field(
        ..., description="Running sum of monthly profit"
    )
    net_profit: float = Field(
        ..., description="Cumulative profit minus the initial investment"
    )


class ProjectionAggregates(BaseModel):
    """Totals over the whole projection horizon."""

    model_config = ConfigDict(frozen=True)

    initial_investment: float = Field(..., description="Echoed initial investment")
    total_revenue_6m: float = Field(..., description="Revenue over all months")
    total_costs_6m: float = Field(..., description="Costs over all months")
    growth_rate: float = Field(..., description="Echoed growth rate in percent")


class ProjectionSummary(BaseModel):
    """Complete result of a projection run."""

    model_config = ConfigDict(frozen=True)

    roi: float = Field(..., description="Return on investment in percent")
    total_profit: float = Field(
        ..., description="Cumulative profit after the horizon minus investment"
    )
    break_even_month: BreakEvenMonth = Field(
        ..., description="First month with positive net profit, or the sentinel"
    )
    projections: List[PeriodProjection] = Field(
        ...,
        min_length=PROJECTION_MONTHS,
        max_length=PROJECTION_MONTHS,
        description="Monthly projections in month order",
    )
    aggregates: ProjectionAggregates = Field(..., description="Horizon totals")

    @field_validator("projections")
    @classmethod
    def validate_month_order(
        cls, v: List[PeriodProjection]
    ) -> List[PeriodProjection]:
        months = [projection.month for projection in v]
        if months != list(range(1, PROJECTION_MONTHS + 1)):
            raise ValueError(
                f"Projections must cover months 1-{PROJECTION_MONTHS} in order"
            )
        return v

    @property
    def breaks_even(self) -> bool:
        """Whether net profit turns positive within the horizon."""
        return isinstance(self.break_even_month, int)


def growth_multiplier(growth_rate: float, month: int) -> float:
    """
    Compounding factor applied to base revenue in a given month.

    Growth starts compounding in month 2; month 1 always uses a factor of 1.
    A factor too large for a float saturates to infinity.

    Args:
        growth_rate: Month-over-month growth in percent
        month: Month number (1-based)

    Returns:
        The revenue multiplier for the month
    """
    base = 1 + growth_rate / 100
    exponent = month - 1
    try:
        return base ** exponent
    except OverflowError:
        if base < 0 and exponent % 2:
            return -math.inf
        return math.inf


def compute_projection(inputs: FinancialInputs) -> ProjectionSummary:
    """
    Project monthly profit over the fixed six-month horizon.

    Running totals are kept unrounded; every figure is rounded only when it
    is recorded.

    Args:
        inputs: Validated financial inputs

    Returns:
        ProjectionSummary with monthly rows, break-even month and ROI
    """
    cumulative_profit = 0.0
    total_revenue = 0.0
    break_even_month: BreakEvenMonth = NO_BREAK_EVEN
    projections: List[PeriodProjection] = []

    for month in range(1, PROJECTION_MONTHS + 1):
        revenue = inputs.monthly_revenue * growth_multiplier(inputs.growth_rate, month)
        profit = revenue - inputs.monthly_costs
        cumulative_profit += profit
        total_revenue += revenue
        net_profit = cumulative_profit - inputs.initial_investment

        if break_even_month == NO_BREAK_EVEN and net_profit > 0:
            break_even_month = month

        projections.append(
            PeriodProjection(
                month=month,
                revenue=round2(revenue),
                costs=round2(inputs.monthly_costs),
                profit=round2(profit),
                cumulative_profit=round2(cumulative_profit),
                net_profit=round2(net_profit),
            )
        )

    total_profit = cumulative_profit - inputs.initial_investment
    if inputs.initial_investment > 0:
        roi = round2(total_profit / inputs.initial_investment * 100)
    else:
        roi = 0.0

    return ProjectionSummary(
        roi=roi,
        total_profit=round2(total_profit),
        break_even_month=break_even_month,
        projections=projections,
        aggregates=ProjectionAggregates(
            initial_investment=inputs.initial_investment,
            total_revenue_6m=round2(total_revenue),
            total_costs_6m=round2(inputs.monthly_costs * PROJECTION_MONTHS),
            growth_rate=inputs.growth_rate,
        ),
    )
