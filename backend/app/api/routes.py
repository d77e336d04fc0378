"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from backend.core.projection import calculate_investment
from backend.schemas.investment import (
    ErrorResponse,
    InvestmentRequest,
    InvestmentResponse,
    PingResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected API payload: %d error(s)", exc.error_count())
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.post("/calc/investment")
def investment() -> Any:
    """Year-by-year projection at full precision."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = InvestmentRequest.model_validate(raw_payload)
    logger.info("Projecting %s", payload.model_dump())

    outcome = calculate_investment(payload)
    if isinstance(outcome, str):
        logger.warning("Projection rejected: %s", outcome)
        return jsonify(ErrorResponse(error=outcome).model_dump()), HTTPStatus.BAD_REQUEST

    response = InvestmentResponse(results=outcome)
    return jsonify(response.model_dump())
