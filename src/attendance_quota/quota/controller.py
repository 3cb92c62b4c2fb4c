from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.enums import Horizon
from ..core.exceptions import ValidationError
from ..container import Container
from .payload import parse_config, parse_horizon_request, parse_report_request, parse_schedule

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.quota_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/quota/totals", methods=["POST"], endpoint="api_quota_totals")
    def api_quota_totals():
        body = request.get_json(silent=True) or {}
        if not isinstance(body, dict):
            return _error("Request body must be a JSON object", 400)
        try:
            schedule = parse_schedule(body.get("schedule"))
            config = parse_config({"months_in_term": body.get("months_in_term")}, service.config)
            totals = service.totals(schedule, config=config)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to compute lecture totals")
            return _error("Internal error while computing totals", 500)

        return jsonify(
            {
                "success": True,
                "schedule": schedule.as_dict(),
                "totals": {h.value: n for h, n in totals.items()},
            }
        )

    @app.route("/api/quota/report", methods=["POST"], endpoint="api_quota_report")
    def api_quota_report():
        body = request.get_json(silent=True)
        try:
            req = parse_report_request(body, service.config)
            report = service.build_report(
                req.schedule,
                req.progress,
                config=req.config,
                day_total=req.day_total,
                day_attended=req.day_attended,
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to build quota report")
            return _error("Internal error while building the report", 500)

        return jsonify({"success": True, **report.to_dict()})

    @app.route("/api/quota/horizon", methods=["POST"], endpoint="api_quota_horizon")
    def api_quota_horizon():
        body = request.get_json(silent=True)
        horizon_s = request.args.get("horizon", Horizon.TERM.value).lower()
        try:
            try:
                horizon = Horizon(horizon_s)
            except ValueError:
                raise ValidationError(f"Unknown horizon: {horizon_s!r}") from None
            req = parse_horizon_request(body, service.config)
            result = service.compute_horizon(horizon, req.total, req.progress, config=req.config)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to compute horizon quota")
            return _error("Internal error while computing the quota", 500)

        return jsonify({"success": True, "result": result.to_dict()})
