from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..common.number_utils import to_decimal
from ..core.exceptions import ValidationError
from .serializers import result_to_dict, rules_from_dict, shift_from_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/incentives/rules", methods=["GET"], endpoint="api_incentive_rules")
    def api_incentive_rules():
        return jsonify({"success": True, "rules": container.distribution_service.rules.to_dict()})

    @app.route("/api/incentives/distribute", methods=["POST"], endpoint="api_incentive_distribute")
    def api_incentive_distribute():
        """Distribute an incentive over the shifts posted in the body (nothing is persisted)."""
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                return jsonify({"success": False, "message": "Request body must be a JSON object"}), 400

            raw_shifts = data.get("shifts") or []
            if not isinstance(raw_shifts, list) or not raw_shifts:
                return jsonify({"success": False, "message": "At least one shift is required"}), 400
            if "target_incentive" not in data:
                return jsonify({"success": False, "message": "target_incentive is required"}), 400

            # Fresh objects per request, so concurrent requests never share shift state.
            shifts = [shift_from_dict(s) for s in raw_shifts]
            primary_id = str(data.get("primary_shift_id") or shifts[0].id)
            primary = next((s for s in shifts if str(s.id) == primary_id), None)
            if not primary:
                return jsonify({"success": False, "message": f"Unknown primary shift {primary_id}"}), 400

            rules = rules_from_dict(data.get("rules"))
            result = container.distribution_service.distribute(
                primary,
                to_decimal(data["target_incentive"], "target_incentive"),
                shifts,
                rules=rules,
            )
            return jsonify(result_to_dict(result, shifts)), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            logger.exception("Unhandled error in /api/incentives/distribute")
            return jsonify({"success": False, "message": str(e)}), 500
