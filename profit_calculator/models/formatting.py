"""
Display helpers for projection results.

This module formats currency and percentage figures and shapes a
``ProjectionSummary`` into the rows of the projection table and the series of
the projection chart.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .projection import ProjectionSummary

CHART_TITLE = "6-Month Financial Projection"


class CurrencyFormatter(BaseModel):
    """Formats currency and percentage values for display."""

    currency_symbol: str = Field(default="$", description="Currency symbol")
    decimal_places: int = Field(
        default=2, ge=0, le=10, description="Number of decimal places"
    )
    show_currency_symbol: bool = Field(
        default=True, description="Whether to show currency symbol"
    )

    def format_currency(self, amount: float, show_symbol: Optional[bool] = None) -> str:
        """
        Format a currency amount for display.

        Negative amounts keep the sign in front of the symbol, e.g. ``-$9,000.00``.

        Args:
            amount: The amount to format
            show_symbol: Override the default symbol display setting

        Returns:
            Formatted currency string
        """
        show_symbol = (
            show_symbol if show_symbol is not None else self.show_currency_symbol
        )

        formatted = f"{abs(amount):,.{self.decimal_places}f}"
        sign = "-" if amount < 0 and float(formatted.replace(",", "")) != 0 else ""

        if show_symbol:
            return f"{sign}{self.currency_symbol}{formatted}"
        return f"{sign}{formatted}"

    def format_percentage(self, percent: float, decimal_places: int = 2) -> str:
        """
        Format a percentage for display.

        Args:
            percent: The value in percent (12.5 = 12.5%)
            decimal_places: Number of decimal places to show

        Returns:
            Formatted percentage string
        """
        return f"{percent:.{decimal_places}f}%"


def format_break_even(summary: ProjectionSummary) -> str:
    """Describe the break-even month for display."""
    if summary.breaks_even:
        return f"Month {summary.break_even_month}"
    return str(summary.break_even_month)


def build_table_rows(
    summary: ProjectionSummary, formatter: Optional[CurrencyFormatter] = None
) -> List[Dict[str, str]]:
    """
    Build the rows of the projection table.

    Args:
        summary: Projection to display
        formatter: Currency formatter (defaults to dollars)

    Returns:
        One dictionary of display strings per month
    """
    formatter = formatter or CurrencyFormatter()
    rows = []
    for projection in summary.projections:
        rows.append(
            {
                "label": f"Month {projection.month}",
                "revenue": formatter.format_currency(projection.revenue),
                "costs": formatter.format_currency(projection.costs),
                "profit": formatter.format_currency(projection.profit),
                "cumulative_profit": formatter.format_currency(
                    projection.cumulative_profit
                ),
                "net_profit": formatter.format_currency(projection.net_profit),
                "status": "positive" if projection.net_profit >= 0 else "negative",
            }
        )
    return rows


def build_chart_data(summary: ProjectionSummary) -> Dict[str, Any]:
    """
    Build the line chart series for a projection.

    Args:
        summary: Projection to chart

    Returns:
        Dictionary with the chart title, month labels and one dataset per series
    """
    projections = summary.projections
    return {
        "title": CHART_TITLE,
        "labels": [f"Month {p.month}" for p in projections],
        "datasets": [
            {"label": "Monthly Revenue", "data": [p.revenue for p in projections]},
            {"label": "Monthly Costs", "data": [p.costs for p in projections]},
            {"label": "Net Profit", "data": [p.net_profit for p in projections]},
            {
                "label": "Cumulative Profit",
                "data": [p.cumulative_profit for p in projections],
            },
        ],
    }
