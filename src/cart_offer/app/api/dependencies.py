"""Request-scoped access to the collaborators owned by the application instance."""

from __future__ import annotations

from fastapi import Request

from cart_offer.application.matcher import OfferMatcher
from cart_offer.ports.offer_store import OfferStore


def get_offer_matcher(request: Request) -> OfferMatcher:
    return request.app.state.offer_matcher


def get_offer_store(request: Request) -> OfferStore:
    return request.app.state.offer_store
