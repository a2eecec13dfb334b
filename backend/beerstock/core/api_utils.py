"""
Common API utilities for consistent response formatting across all controllers.
"""

import logging
from typing import Any, Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from beerstock.core.exceptions import BeerNotFoundError, BeerStockError

logger = logging.getLogger(__name__)


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API response format for all endpoints.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def status_for(error: BeerStockError) -> int:
    """HTTP status code for a domain error: 404 for lookups, 400 for rule violations."""
    if isinstance(error, BeerNotFoundError):
        return 404
    return 400


def register_error_handlers(app: Flask) -> None:
    """Render domain and validation errors as JSON api_response payloads."""

    @app.errorhandler(BeerStockError)
    def handle_beer_stock_error(error: BeerStockError):
        status_code = status_for(error)
        logger.warning(
            "Request rejected",
            extra={
                "context": {
                    "error": type(error).__name__,
                    "message": error.message,
                    "status_code": status_code,
                }
            },
        )
        return api_response(False, error.message, None, status_code)

    @app.errorhandler(ValueError)
    def handle_validation_error(error: ValueError):
        logger.warning(
            "Invalid request data",
            extra={"context": {"error": str(error)}},
        )
        return api_response(False, str(error), None, 400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return api_response(False, error.description or error.name, None, error.code or 500)
