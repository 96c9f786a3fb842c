"""
Calculation service for handling calculator submissions.

This service validates a raw submission, runs the projection engine and
archives the result, keeping the engine itself free of request and database
concerns.
"""

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from profit_calculator.database.models import ProfitCalculation
from profit_calculator.models.calculation_request import CalculationRequest
from profit_calculator.models.projection import ProjectionSummary, compute_projection

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when a calculation cannot be archived."""


class CalculationResult(BaseModel):
    """Outcome of a successful calculator submission."""

    model_config = ConfigDict(frozen=True)

    calculation_id: int = Field(..., ge=1, description="Archived record id")
    request: CalculationRequest = Field(..., description="Validated submission")
    summary: ProjectionSummary = Field(..., description="Projection result")


class CalculationService:
    """Service for validating, computing and archiving calculations."""

    def __init__(self, session: Session) -> None:
        """Initialize the calculation service.

        Args:
            session: Database session used to archive calculations
        """
        self.session = session
        self.logger = logging.getLogger(__name__)

    def calculate(self, raw_input: Mapping[str, Any], user_ip: str) -> CalculationResult:
        """Validate a submission, project it and archive the record.

        Args:
            raw_input: Form or JSON fields as submitted
            user_ip: Address the submission originated from

        Returns:
            CalculationResult with the stored record id and projection

        Raises:
            pydantic.ValidationError: If the submission is invalid
            PersistenceError: If the record cannot be stored
        """
        calculation_request = CalculationRequest.model_validate(dict(raw_input))
        summary = compute_projection(calculation_request.to_financial_inputs())

        calculation_id = self._store_calculation(calculation_request, summary, user_ip)

        self.logger.info(
            f"Stored calculation {calculation_id}: roi={summary.roi} "
            f"break_even={summary.break_even_month}"
        )
        return CalculationResult(
            calculation_id=calculation_id,
            request=calculation_request,
            summary=summary,
        )

    def _store_calculation(
        self,
        calculation_request: CalculationRequest,
        summary: ProjectionSummary,
        user_ip: str,
    ) -> int:
        """Archive a calculation and return its id.

        The break-even sentinel is stored as month 0.
        """
        record = ProfitCalculation(
            user_name=calculation_request.user_name,
            user_email=calculation_request.user_email,
            company_name=calculation_request.company_name,
            initial_investment=calculation_request.initial_investment,
            monthly_revenue=calculation_request.monthly_revenue,
            monthly_costs=calculation_request.monthly_costs,
            growth_rate=calculation_request.growth_rate,
            calculated_roi=summary.roi,
            projected_profit=summary.total_profit,
            break_even_month=summary.break_even_month if summary.breaks_even else 0,
            user_ip=user_ip,
        )

        try:
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"Failed to store calculation: {str(e)}")
            raise PersistenceError("Unable to save calculation") from e

        return int(record.id)
