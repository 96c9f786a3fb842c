"""Profit Calculator Flask Application Factory."""

from typing import Optional

import click
from flask import Flask

from profit_calculator.config import get_global_settings


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production);
            overrides APP_ENV when given

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app_env = config_name or settings.app_env
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["DATABASE_URL"] = settings.db_url
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = app_env == "development"
    app.config["TESTING"] = app_env == "testing"
    app.config["CURRENCY_SYMBOL"] = settings.currency_symbol
    app.config["REPORT_FILENAME_PREFIX"] = settings.report_filename_prefix

    app.logger.setLevel(settings.log_level)

    # Register blueprints
    from profit_calculator.blueprints.calculator import calculator_bp
    from profit_calculator.blueprints.health import health_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(calculator_bp)

    @app.cli.command("init-db")
    def init_db() -> None:
        """Create the profit_calculations table."""
        from profit_calculator.database.base import create_tables

        create_tables()
        click.echo("Initialized the database.")

    return app
