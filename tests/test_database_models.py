"""
Tests for SQLAlchemy database models.
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from profit_calculator.database.models import ProfitCalculation
from profit_calculator.models.projection import FinancialInputs, compute_projection


def _calculation(**overrides):
    values = {
        "user_name": "Test User",
        "user_email": "test@example.com",
        "initial_investment": 10000,
        "monthly_revenue": 3000,
        "monthly_costs": 2000,
        "growth_rate": 5,
        "calculated_roi": -15.94,
        "projected_profit": -1594.26,
        "break_even_month": 0,
        "user_ip": "127.0.0.1",
    }
    values.update(overrides)
    return ProfitCalculation(**values)


class TestProfitCalculationModel:
    """Test suite for the ProfitCalculation model."""

    def test_create_calculation(self, db_session):
        """Test creating a calculation record."""
        calculation = _calculation()
        db_session.add(calculation)
        db_session.commit()
        db_session.refresh(calculation)

        assert calculation.id is not None
        assert calculation.company_name == ""
        assert isinstance(calculation.calculation_date, datetime)
        assert float(calculation.projected_profit) == -1594.26

    def test_numeric_precision(self, db_session):
        """Test that money columns keep two decimal places."""
        calculation = _calculation(calculated_roi=200.0, projected_profit=2000.5)
        db_session.add(calculation)
        db_session.commit()
        db_session.refresh(calculation)

        assert float(calculation.calculated_roi) == 200.0
        assert float(calculation.projected_profit) == 2000.5

    def test_result_columns_fit_largest_inputs(self):
        """Test that ROI and profit columns hold results of the widest inputs."""
        summary = compute_projection(
            FinancialInputs(
                initial_investment=0.01,
                monthly_revenue=9999999999999.99,
                monthly_costs=0,
                growth_rate=999.99,
            )
        )
        columns = ProfitCalculation.__table__.c

        for column, value in [
            (columns.calculated_roi, summary.roi),
            (columns.projected_profit, summary.total_profit),
        ]:
            integer_digits = len(str(int(abs(value))))
            assert integer_digits <= column.type.precision - column.type.scale

    @pytest.mark.parametrize("month", [-1, 7])
    def test_break_even_month_range(self, db_session, month):
        """Test the break-even month check constraint."""
        db_session.add(_calculation(break_even_month=month))

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_required_fields(self, db_session):
        """Test that required columns are enforced."""
        db_session.add(_calculation(user_ip=None))

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_repr(self):
        """Test string representation."""
        calculation = _calculation(id=5)

        assert "ProfitCalculation(id=5" in repr(calculation)
        assert "test@example.com" in repr(calculation)
