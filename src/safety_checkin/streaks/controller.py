from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.auth import require_role
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DataAccessError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    @app.route("/api/worker/streak", methods=["GET"], endpoint="worker_streak")
    def worker_streak():
        try:
            worker_id = require_role(Role.WORKER)
            summary = container.streak_service.get_streak(worker_id)
            return jsonify(summary.to_payload()), 200
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except DataAccessError as e:
            return jsonify({"error": "Failed to fetch streak data", "details": str(e)}), 503
        except Exception:
            logger.exception("[GET /api/worker/streak] unexpected error")
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/teams/<team_id>/streaks", methods=["GET"], endpoint="team_streaks")
    def team_streaks(team_id: str):
        try:
            require_role(Role.TEAM_LEADER, Role.SUPERVISOR)
            summaries = container.streak_service.get_team_overview(team_id)
            return jsonify({"teamId": team_id, "workers": [s.to_team_row() for s in summaries]}), 200
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except DataAccessError as e:
            return jsonify({"error": "Failed to fetch team streaks", "details": str(e)}), 503
        except Exception:
            logger.exception("[GET /api/teams/%s/streaks] unexpected error", team_id)
            return jsonify({"error": "Internal server error"}), 500
