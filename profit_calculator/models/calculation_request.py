"""
Validation of submitted calculator forms.

A ``CalculationRequest`` is built from raw form or JSON input. It enforces
the contract the projection engine relies on (finite, non-negative amounts in
whole cents and a growth rate of at least -100%) and carries the contact
details that are archived alongside each calculation.
"""

import re
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .projection import FinancialInputs

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Column limits of the profit_calculations table
MAX_AMOUNT = Decimal("9999999999999.99")
MAX_GROWTH_RATE = 999.99
MIN_GROWTH_RATE = -100.0


class CalculationRequest(BaseModel):
    """A sanitized calculator submission."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore", frozen=True)

    user_name: str = Field(..., min_length=1, max_length=100, description="Name")
    user_email: str = Field(..., max_length=100, description="Contact email")
    company_name: str = Field(default="", max_length=100, description="Company")
    initial_investment: Decimal = Field(
        ..., ge=0, le=MAX_AMOUNT, decimal_places=2, description="Initial investment"
    )
    monthly_revenue: Decimal = Field(
        ..., ge=0, le=MAX_AMOUNT, decimal_places=2, description="Monthly revenue"
    )
    monthly_costs: Decimal = Field(
        ..., ge=0, le=MAX_AMOUNT, decimal_places=2, description="Monthly costs"
    )
    growth_rate: float = Field(
        ...,
        ge=MIN_GROWTH_RATE,
        le=MAX_GROWTH_RATE,
        allow_inf_nan=False,
        description="Month-over-month revenue growth in percent",
    )

    @field_validator("user_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email address")
        return v

    @field_validator("company_name", mode="before")
    @classmethod
    def default_company_name(cls, v):
        return "" if v is None else v

    def to_financial_inputs(self) -> FinancialInputs:
        """Project the submission onto the engine's inputs."""
        return FinancialInputs(
            initial_investment=float(self.initial_investment),
            monthly_revenue=float(self.monthly_revenue),
            monthly_costs=float(self.monthly_costs),
            growth_rate=self.growth_rate,
        )
