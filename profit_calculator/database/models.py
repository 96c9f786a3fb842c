"""
SQLAlchemy database models for the profit calculator.

Each submitted calculation is archived with the original inputs, the headline
results and the address it was submitted from.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Integer, Numeric, String

from .base import Base


class ProfitCalculation(Base):
    """Archived calculator submission and its headline results."""

    __tablename__ = 'profit_calculations'

    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String(100), nullable=False)
    user_email = Column(String(100), nullable=False, index=True)
    company_name = Column(String(100), default='', nullable=False)
    initial_investment = Column(Numeric(15, 2), nullable=False)
    monthly_revenue = Column(Numeric(15, 2), nullable=False)
    monthly_costs = Column(Numeric(15, 2), nullable=False)
    growth_rate = Column(Numeric(5, 2), nullable=False)
    # Sized for maximum amounts at maximum growth over a 0.01 investment
    calculated_roi = Column(Numeric(28, 2), nullable=False)
    projected_profit = Column(Numeric(24, 2), nullable=False)
    break_even_month = Column(Integer, nullable=False, default=0)  # 0 = not within horizon
    calculation_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    user_ip = Column(String(45), nullable=False)

    # Constraints and indexes
    __table_args__ = (
        CheckConstraint("break_even_month >= 0 AND break_even_month <= 6", name='ck_break_even_month_range'),
        Index('idx_profit_calculations_date', 'calculation_date'),
    )

    def __repr__(self):
        return f"<ProfitCalculation(id={self.id}, user_email='{self.user_email}', roi={self.calculated_roi})>"
