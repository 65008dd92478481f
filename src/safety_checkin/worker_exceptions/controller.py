from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.auth import require_role
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DataAccessError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    @app.route("/api/worker/can-report-incident", methods=["GET"], endpoint="worker_can_report_incident")
    def can_report_incident():
        try:
            worker_id = require_role(Role.WORKER)
            eligibility = container.worker_exception_service.can_report_incident(worker_id)
            return jsonify(eligibility.to_payload()), 200
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except DataAccessError as e:
            return jsonify({"error": "Failed to check report status", "details": str(e)}), 503
        except Exception:
            logger.exception("[GET /api/worker/can-report-incident] unexpected error")
            return jsonify({"error": "Failed to check report status"}), 500
