from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import RetrievalError, ValidationError
from ..container import Container
from .model import SectionRef

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}


def register(app: Flask, container: Container) -> None:
    def _flag(name: str) -> bool:
        return (request.args.get(name) or "").strip().lower() in _TRUE

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(RetrievalError)
    def handle_retrieval_error(e: RetrievalError):
        return jsonify({"error": str(e), "resource": e.resource, "key": e.key}), 502

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/rosters", methods=["GET"], endpoint="api_rosters")
    def api_rosters():
        section_ids = request.args.getlist("section_id")
        subject = request.args.get("subject")

        result = container.enrollment_resolver.resolve_enrollment(section_ids, subject, _flag("homeroom"))
        return jsonify(result.to_dict())

    @app.route("/api/sections/<section_id>/roster", methods=["GET"], endpoint="api_section_roster")
    def api_section_roster(section_id: str):
        ref = SectionRef.from_mapping(
            {
                "sectionId": section_id,
                "subject": request.args.get("subject"),
                "isHomeroom": _flag("homeroom"),
            }
        )
        view = container.roster_service.load_roster(ref)
        return jsonify(view.to_dict())

    @app.route("/api/rosters/load", methods=["POST"], endpoint="api_rosters_load")
    def api_rosters_load():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError("Expected a JSON object describing the class")

        view = container.roster_service.load_roster_from_mapping(payload)
        return jsonify(view.to_dict())
