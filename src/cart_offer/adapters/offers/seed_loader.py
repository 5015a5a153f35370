"""Loading of offer seed files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from cart_offer.application.errors import MalformedRequestError
from cart_offer.domain.offers.models import Offer
from cart_offer.ports.offer_store import OfferStore

logger = logging.getLogger(__name__)

OFFER_SEED_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["restaurant_id", "offer_type", "offer_value", "customer_segment"],
        "properties": {
            "restaurant_id": {"type": "integer"},
            "offer_type": {"type": "string", "enum": ["FLATX", "FLAT", "PERCENTAGE"]},
            "offer_value": {"type": "integer", "minimum": 0},
            "customer_segment": {"type": "array", "items": {"type": "string"}},
        },
    },
}


def validate_seed_data(data: Any) -> None:
    """Validate parsed seed data against OFFER_SEED_SCHEMA."""
    try:
        jsonschema.validate(instance=data, schema=OFFER_SEED_SCHEMA)
    except jsonschema.ValidationError as e:
        raise MalformedRequestError(f"Offer seed validation failed: {e.message}") from e


def load_offers(path: str | Path) -> list[Offer]:
    """
    Read offers from a JSON seed file.

    The file holds a list of objects shaped like the body of POST /api/v1/offer.
    Order in the file is preserved.

    Raises:
        FileNotFoundError: if the file does not exist
        MalformedRequestError: if the file is not valid JSON or fails validation
    """
    seed_path = Path(path)
    if not seed_path.exists():
        raise FileNotFoundError(f"Offer seed file not found: {seed_path}")

    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedRequestError(f"Invalid JSON in offer seed file {seed_path}: {e}") from e

    validate_seed_data(data)
    return [
        Offer.new(
            restaurant_id=item["restaurant_id"],
            offer_type=item["offer_type"],
            offer_value=item["offer_value"],
            segments=item["customer_segment"],
        )
        for item in data
    ]


def seed_store(store: OfferStore, path: str | Path) -> int:
    """Append every offer of the seed file to the store and return how many were added."""
    offers = load_offers(path)
    for offer in offers:
        store.add_offer(offer)
    logger.info(f"Seeded {len(offers)} offers from {path}")
    return len(offers)
