"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, jsonify

from beerstock.core.limiter_config import limiter
from beerstock.db import session as db_session

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"])
@limiter.exempt
def health_check():
    """
    Report whether the database is reachable.

    Status codes:
        200: database answered ``SELECT 1``
        503: database unreachable
    """
    if db_session.check_database_connection():
        return jsonify({"status": "healthy", "database": "connected"}), 200

    logger.warning("Health check failed", extra={"context": {"database": "unreachable"}})
    return jsonify({"status": "unhealthy", "database": "unreachable"}), 503
