"""Pydantic models for API requests and responses."""

from cart_offer.app.api.models.offers import (
    ApplyOfferRequest,
    ApplyOfferResponse,
    OfferRequest,
    OfferResponse,
)

__all__ = [
    "OfferRequest",
    "OfferResponse",
    "ApplyOfferRequest",
    "ApplyOfferResponse",
]
