"""Router for offer registration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cart_offer.app.api.dependencies import get_offer_matcher
from cart_offer.app.api.models.offers import OfferRequest, OfferResponse
from cart_offer.application.matcher import OfferMatcher

router = APIRouter()


@router.post("/offer", response_model=OfferResponse)
def add_offer(
    body: OfferRequest,
    matcher: OfferMatcher = Depends(get_offer_matcher),
) -> OfferResponse:
    """Register an offer. Offers are matched in the order they were added."""
    matcher.add_offer(body.to_offer())
    return OfferResponse(response_msg="success")
