"""Router for applying offers to a cart."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cart_offer.app.api.dependencies import get_offer_matcher
from cart_offer.app.api.models.offers import ApplyOfferRequest, ApplyOfferResponse
from cart_offer.application.matcher import OfferMatcher

router = APIRouter()


@router.post("/cart/apply_offer", response_model=ApplyOfferResponse)
def apply_offer(
    body: ApplyOfferRequest,
    matcher: OfferMatcher = Depends(get_offer_matcher),
) -> ApplyOfferResponse:
    """
    Apply the first offer matching the restaurant and the user's segment.

    The user's segment is resolved through the segment service. When no offer
    matches, the cart value is returned unchanged.
    """
    result = matcher.apply_offer_for_user(body.to_apply_request())
    return ApplyOfferResponse(cart_value=result.cart_value)
