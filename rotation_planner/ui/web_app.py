"""
Web application module for the Rotation Planner.

This module contains the Flask server exposing the rotation engine as JSON
API endpoints, so a front-end can request a plan for the match being set up.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, Response, jsonify, request

from ..models import DEFAULT_CONFIG, RotationConfig
from ..services import (
    STRATEGIES, STRATEGY_CHECKPOINT, STRATEGY_MINUTE, InvalidConfigError, RotationService,
    generate_player_list
)
from ..utils import APP_TITLE, MAX_GOALIES, MIN_GOALIES, MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN

logger = logging.getLogger(__name__)


def _parse_request(data: Dict[str, Any]) -> Tuple[List[str], List[str], RotationConfig]:
    """
    Extract roster, goalies and config from a request body.

    The roster is either an explicit ``players`` list or a ``player_count``
    that expands to placeholder names.
    """
    if data.get("players"):
        players = list(data["players"])
    else:
        players = generate_player_list(int(data.get("player_count", 0)))
    goalies = list(data.get("goalies") or [])
    config = RotationConfig.from_dict(data.get("config"))
    return players, goalies, config


def _initial_positions(data: Dict[str, Any]) -> Optional[Dict[int, str]]:
    raw = data.get("initial_positions")
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise InvalidConfigError("initial_positions must map position numbers to player names")
    return {int(position): player for position, player in raw.items()}


def _error_response(error: Exception):
    logger.warning("Rejected rotation request: %s", error)
    return jsonify({
        "success": False,
        "error": str(error),
        "kind": type(error).__name__,
    }), 400


def create_app() -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    # ==================== API Endpoints ==================== #

    @app.route("/api/rotation/defaults", methods=["GET"])
    def rotation_defaults():
        """Default configuration and input limits for the setup form."""
        return jsonify({
            "success": True,
            "title": APP_TITLE,
            "config": DEFAULT_CONFIG.to_dict(),
            "min_goalies": MIN_GOALIES,
            "max_goalies": MAX_GOALIES,
            "strategies": list(STRATEGIES),
        })

    @app.route("/api/rotation", methods=["POST"])
    def plan_rotation():
        """Build a rotation plan from a roster, goalies and optional config overrides."""
        data = request.get_json(silent=True) or {}
        try:
            players, goalies, config = _parse_request(data)
            service = RotationService(config)
            strategy = data.get("strategy", STRATEGY_CHECKPOINT)

            if strategy == STRATEGY_MINUTE:
                plan = service.plan_minute_by_minute(
                    players, goalies,
                    initial_positions=_initial_positions(data),
                    fairness_threshold=int(
                        data.get("fairness_threshold", MINUTE_MODEL_FAIRNESS_THRESHOLD_MIN)
                    ),
                )
                return jsonify({
                    "success": True,
                    "strategy": strategy,
                    "result": plan.to_dict(),
                    "report": service.render(plan),
                })

            plan = service.plan(players, goalies, strategy)
            return jsonify({
                "success": True,
                "strategy": strategy,
                "config": config.to_dict(),
                "result": plan.to_dict(),
                "fairness": service.fairness(plan).to_dict(),
                "report": service.render(plan),
            })
        except (ValueError, TypeError) as e:  # RotationError is a ValueError
            return _error_response(e)

    @app.route("/api/rotation/csv", methods=["POST"])
    def export_rotation_csv():
        """Export the accumulated minute table of a plan as CSV."""
        data = request.get_json(silent=True) or {}
        try:
            players, goalies, config = _parse_request(data)
            service = RotationService(config)
            csv_content = service.export_csv(service.plan_match(players, goalies))
        except (ValueError, TypeError) as e:
            return _error_response(e)

        return Response(
            csv_content,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=rotation_minutes.csv"},
        )

    return app


def run_web_app(host: str = "127.0.0.1", port: int = 7122) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    run_web_app()
