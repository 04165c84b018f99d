"""HTTP routes for the JSON API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from calculator.core.compound import calculate
from calculator.schemas.compound import CalculationRequest, InputValidationError
from calculator.schemas.ping import PingResponse

api_bp = Blueprint("api", __name__)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(service=current_app.config["APP_NAME"])
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Compound interest for a JSON body shaped like the HTML form."""
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        return jsonify({"detail": "Request body must be a JSON object."}), HTTPStatus.BAD_REQUEST

    outcome = calculate(CalculationRequest.from_form(raw_payload))
    if isinstance(outcome, InputValidationError):
        return jsonify({"detail": outcome.message}), HTTPStatus.UNPROCESSABLE_ENTITY
    # non-finite amounts serialize as null
    return current_app.response_class(
        outcome.model_dump_json(by_alias=True), mimetype="application/json"
    )
