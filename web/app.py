"""Flask JSON API for fleet maintenance due status."""

import logging
from pathlib import Path
from typing import Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from fleet import (
    Category,
    NotFoundError,
    Settings,
    build_dashboard,
    get_upcoming_maintenance,
    load_fleet,
    utc_now,
)
from fleet.calculations import Clock

logger = logging.getLogger(__name__)


def get_fleet():
    """Load a fresh fleet snapshot for the current request."""
    return load_fleet(current_app.config["FLEET_FILE"])


def get_clock() -> Clock:
    return current_app.config["CLOCK"]


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a 'true'/'false' query value; anything else means no filter."""
    if value is None:
        return None
    return value.lower() == "true"


def create_app(
    settings: Optional[Settings] = None,
    fleet_file: Optional[Path] = None,
    clock: Clock = utc_now,
) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: Defaults to Settings.from_env()
        fleet_file: Overrides settings.fleet_file
        clock: Source of the current instant for due calculations
    """
    settings = settings or Settings.from_env()

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["FLEET_FILE"] = Path(fleet_file or settings.fleet_file)
    app.config["DASHBOARD_WORKERS"] = settings.dashboard_workers
    app.config["CLOCK"] = clock

    @app.errorhandler(NotFoundError)
    def handle_not_found(error: NotFoundError):
        return jsonify(success=False, error=error.message), 404

    @app.errorhandler(Exception)
    def handle_error(error: Exception):
        if isinstance(error, HTTPException):
            return jsonify(success=False, error=error.description), error.code
        logger.exception("Unhandled error on %s", request.path)
        return jsonify(success=False, error="Server Error"), 500

    @app.route("/health")
    def health():
        return jsonify(status="OK", message="Server is running")

    @app.route("/api/trucks/<truck_id>/upcoming-maintenance")
    def upcoming_maintenance(truck_id: str):
        """Due and overdue maintenance for one truck, most urgent first."""
        report = get_upcoming_maintenance(get_fleet(), truck_id, clock=get_clock())
        return jsonify(success=True, **report.to_dict())

    @app.route("/api/maintenance-rules/dashboard")
    def maintenance_dashboard():
        """Overdue and due-soon tallies across all non-inactive trucks."""
        dashboard = build_dashboard(
            get_fleet(),
            clock=get_clock(),
            max_workers=current_app.config["DASHBOARD_WORKERS"],
        )
        return jsonify(success=True, **dashboard.to_dict())

    @app.route("/api/maintenance-rules")
    def list_rules():
        category = request.args.get("category") or None
        if category is not None:
            try:
                category = Category(category)
            except ValueError:
                return jsonify(success=False, error=f"Unknown category '{category}'"), 400
        is_active = parse_bool(request.args.get("isActive"))

        rules = get_fleet().find_rules(category=category, is_active=is_active)
        return jsonify(success=True, count=len(rules), data=[r.to_dict() for r in rules])

    @app.route("/api/maintenance-rules/<rule_id>")
    def get_rule(rule_id: str):
        rule = get_fleet().find_rule_by_id(rule_id)
        if rule is None:
            raise NotFoundError("Maintenance rule not found")
        return jsonify(success=True, data=rule.to_dict())

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    create_app(settings).run(debug=True, host="0.0.0.0", port=5001)
