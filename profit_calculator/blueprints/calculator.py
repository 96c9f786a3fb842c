"""
Calculator blueprint for profit projections.

This module provides the API endpoints for calculating a projection from a
submitted form and for exporting a previously computed projection.
"""

from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from profit_calculator.database.base import get_db
from profit_calculator.models.formatting import CurrencyFormatter, build_chart_data
from profit_calculator.services.calculation_service import (
    CalculationService,
    PersistenceError,
)
from profit_calculator.services.report_export import ExportError, export_report

calculator_bp = Blueprint("calculator", __name__, url_prefix="/api")


def _request_fields() -> dict:
    """Read submitted fields from a JSON body or form data."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _validation_details(error: ValidationError) -> list:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "__root__",
            "message": err["msg"],
        }
        for err in error.errors()
    ]


@calculator_bp.route("/calculate", methods=["POST"])
def calculate_profit() -> Any:
    """Calculate and archive a six-month profit projection.

    Returns:
        JSON response with the calculation id, projection results and chart data
    """
    try:
        data = _request_fields()

        # Get database session
        db: Session = next(get_db())
        try:
            service = CalculationService(db)
            result = service.calculate(data, request.remote_addr or "unknown")
        finally:
            db.close()

        return (
            jsonify(
                {
                    "calculation_id": result.calculation_id,
                    "results": result.summary.model_dump(mode="json"),
                    "chart": build_chart_data(result.summary),
                }
            ),
            200,
        )

    except ValidationError as e:
        return (
            jsonify({"error": "Invalid input", "details": _validation_details(e)}),
            400,
        )

    except PersistenceError:
        return jsonify({"error": "Unable to save calculation. Please try again."}), 503

    except Exception as e:
        current_app.logger.error(f"Error calculating profit: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@calculator_bp.route("/export", methods=["POST"])
def export_report_file() -> Any:
    """Export a previously computed projection as CSV or an HTML document.

    Returns:
        File download response, or JSON error response
    """
    try:
        data = _request_fields()
        formatter = CurrencyFormatter(
            currency_symbol=current_app.config["CURRENCY_SYMBOL"]
        )

        report = export_report(
            data.get("data"),
            data.get("format", ""),
            filename_prefix=current_app.config["REPORT_FILENAME_PREFIX"],
            formatter=formatter,
        )

        return Response(
            report.content,
            content_type=report.content_type,
            headers={
                "Content-Disposition": f'attachment; filename="{report.filename}"'
            },
        )

    except ExportError as e:
        return jsonify({"error": str(e)}), 400

    except Exception as e:
        current_app.logger.error(f"Error exporting report: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
