"""
Beer controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only; business rules live in BeerService
- Opens one database session per request and always closes it
- Leaves error rendering to the handlers in core.api_utils
"""

from flask import Blueprint, jsonify, request

from beerstock.core.limiter_config import limiter
from beerstock.db.session import SessionLocal
from beerstock.repositories.beer_repository import BeerRepository
from beerstock.schemas.dtos import BeerDTO, QuantityDTO
from beerstock.services.beer_service import BeerService

beer_bp = Blueprint("beers", __name__, url_prefix="/api/v1/beers")


def _json_body():
    # silent=True so a malformed body surfaces as our own 400 message
    return request.get_json(silent=True)


@beer_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_beer():
    """Register a new beer."""
    beer_dto = BeerDTO.from_dict(_json_body())
    beer_dto.validate()
    db = SessionLocal()
    try:
        service = BeerService(BeerRepository(db))
        created = service.create_beer(beer_dto)
        return jsonify(created.to_dict()), 201
    finally:
        db.close()


@beer_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def list_beers():
    """List all beers."""
    db = SessionLocal()
    try:
        service = BeerService(BeerRepository(db))
        return jsonify([beer.to_dict() for beer in service.list_all()]), 200
    finally:
        db.close()


@beer_bp.route("/<path:name>", methods=["GET"])
@limiter.limit("100 per minute")
def find_by_name(name):
    """Get a beer by its name."""
    db = SessionLocal()
    try:
        service = BeerService(BeerRepository(db))
        return jsonify(service.find_by_name(name).to_dict()), 200
    finally:
        db.close()


@beer_bp.route("/<int:beer_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_by_id(beer_id):
    """Delete a beer."""
    db = SessionLocal()
    try:
        service = BeerService(BeerRepository(db))
        service.delete_by_id(beer_id)
        return "", 204
    finally:
        db.close()


@beer_bp.route("/<int:beer_id>/increment", methods=["PATCH"])
@limiter.limit("30 per minute")
def increment(beer_id):
    """Add stock to a beer."""
    quantity_dto = QuantityDTO.from_dict(_json_body())
    quantity_dto.validate()
    db = SessionLocal()
    try:
        service = BeerService(BeerRepository(db))
        updated = service.increment(beer_id, quantity_dto.quantity)
        return jsonify(updated.to_dict()), 200
    finally:
        db.close()


@beer_bp.route("/<int:beer_id>/decrement", methods=["PATCH"])
@limiter.limit("30 per minute")
def decrement(beer_id):
    """Remove stock from a beer."""
    quantity_dto = QuantityDTO.from_dict(_json_body())
    quantity_dto.validate()
    db = SessionLocal()
    try:
        service = BeerService(BeerRepository(db))
        updated = service.decrement(beer_id, quantity_dto.quantity)
        return jsonify(updated.to_dict()), 200
    finally:
        db.close()
