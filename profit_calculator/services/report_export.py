"""
Report export for computed projections.

This module renders a previously computed ``ProjectionSummary`` as a CSV file
or as a standalone HTML report. Exports never recompute the projection; the
submitted payload is validated and rendered as-is.
"""

import csv
import io
import json
import logging
from datetime import date
from typing import Any, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from profit_calculator.models.formatting import (
    CurrencyFormatter,
    build_table_rows,
    format_break_even,
)
from profit_calculator.models.projection import PeriodProjection, ProjectionSummary

logger = logging.getLogger(__name__)

REPORT_TITLE = "Profit Prediction Report"
CSV_HEADER = ["Month", "Revenue", "Costs", "Profit", "Cumulative Profit", "Net Profit"]
EXPORT_FORMATS = {
    "csv": ("text/csv; charset=utf-8", "csv"),
    # No PDF renderer is available; the printable document is served as HTML
    "pdf": ("text/html; charset=utf-8", "html"),
}

_environment = Environment(
    loader=PackageLoader("profit_calculator", "templates"),
    autoescape=select_autoescape(["html"]),
)


class ExportError(Exception):
    """Raised when a report cannot be exported; the message is user-facing."""


class ExportedReport(BaseModel):
    """A rendered report ready for download."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Rendered report body")
    content_type: str = Field(..., description="MIME type of the report")
    filename: str = Field(..., description="Suggested download file name")


def export_csv(summary: ProjectionSummary) -> str:
    """
    Render the monthly projections as CSV.

    Args:
        summary: Projection to export

    Returns:
        CSV text with a header row and one row per month
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADER)
    for projection in summary.projections:
        writer.writerow(
            [
                projection.month,
                f"{projection.revenue:.2f}",
                f"{projection.costs:.2f}",
                f"{projection.profit:.2f}",
                f"{projection.cumulative_profit:.2f}",
                f"{projection.net_profit:.2f}",
            ]
        )
    return buffer.getvalue()


def parse_csv_report(text: str) -> List[PeriodProjection]:
    """
    Parse CSV produced by ``export_csv`` back into monthly projections.

    Args:
        text: CSV text

    Returns:
        List of PeriodProjection in file order

    Raises:
        ExportError: If the header or any row is malformed
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if header != CSV_HEADER:
        raise ExportError("Report file has an unexpected header row")

    projections = []
    for line_number, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != len(CSV_HEADER):
            raise ExportError(f"Report row {line_number} has {len(row)} columns")
        try:
            projections.append(
                PeriodProjection(
                    month=int(row[0]),
                    revenue=float(row[1]),
                    costs=float(row[2]),
                    profit=float(row[3]),
                    cumulative_profit=float(row[4]),
                    net_profit=float(row[5]),
                )
            )
        except (ValueError, ValidationError) as e:
            raise ExportError(f"Report row {line_number} is invalid") from e
    return projections


def export_html(
    summary: ProjectionSummary, formatter: Optional[CurrencyFormatter] = None
) -> str:
    """
    Render the projection as a standalone HTML report.

    Args:
        summary: Projection to export
        formatter: Currency formatter (defaults to dollars)

    Returns:
        HTML document with a summary block and the monthly table
    """
    formatter = formatter or CurrencyFormatter()
    aggregates = summary.aggregates
    template = _environment.get_template("report.html")
    return template.render(
        title=REPORT_TITLE,
        roi=formatter.format_percentage(summary.roi),
        total_profit=formatter.format_currency(summary.total_profit),
        break_even=format_break_even(summary),
        initial_investment=formatter.format_currency(aggregates.initial_investment),
        total_revenue=formatter.format_currency(aggregates.total_revenue_6m),
        total_costs=formatter.format_currency(aggregates.total_costs_6m),
        growth_rate=formatter.format_percentage(aggregates.growth_rate),
        headings=CSV_HEADER,
        rows=build_table_rows(summary, formatter),
    )


def load_summary(data: Any) -> ProjectionSummary:
    """
    Validate a previously computed projection submitted for export.

    Args:
        data: Projection as a dictionary or JSON string

    Returns:
        The validated ProjectionSummary

    Raises:
        ExportError: If the data is missing, unreadable or incomplete
    """
    if data is None or data == "" or data == {}:
        raise ExportError("No calculation data available for export.")

    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ExportError(
                "Calculation data is invalid. Please recalculate and try again."
            ) from e

    try:
        return ProjectionSummary.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected export payload: {e.error_count()} validation errors")
        raise ExportError(
            "Calculation data is invalid. Please recalculate and try again."
        ) from e


def export_report(
    data: Any,
    fmt: Any,
    filename_prefix: str = "profit-prediction-report",
    formatter: Optional[CurrencyFormatter] = None,
    today: Optional[date] = None,
) -> ExportedReport:
    """
    Export a previously computed projection in the requested format.

    Args:
        data: Projection as a dictionary or JSON string
        fmt: Export format, ``csv`` or ``pdf``
        filename_prefix: Download file name without date or extension
        formatter: Currency formatter for the document report
        today: Date stamped into the file name (defaults to today)

    Returns:
        ExportedReport with content, MIME type and file name

    Raises:
        ExportError: If the format is unsupported or the data is unusable
    """
    fmt = str(fmt or "").strip().lower()
    if fmt not in EXPORT_FORMATS:
        raise ExportError(f"Unsupported export format: {fmt or 'none'}")

    summary = load_summary(data)
    content_type, extension = EXPORT_FORMATS[fmt]

    if fmt == "csv":
        content = export_csv(summary)
    else:
        content = export_html(summary, formatter)

    stamp = (today or date.today()).isoformat()
    logger.info(f"Exported {fmt} report")
    return ExportedReport(
        content=content,
        content_type=content_type,
        filename=f"{filename_prefix}-{stamp}.{extension}",
    )
