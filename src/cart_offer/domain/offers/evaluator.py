from __future__ import annotations

from typing import Iterable, Optional

from cart_offer.domain.offers import rules
from cart_offer.domain.offers.models import ApplyRequest, ApplyResult, Offer


def find_matching_offer(offers: Iterable[Offer], restaurant_id: int, segment: str) -> Optional[Offer]:
    """Return the earliest offer for the restaurant that targets the segment."""
    for offer in offers:
        if rules.offer_matches(offer, restaurant_id, segment):
            return offer
    return None


def evaluate_apply_offer(offers: Iterable[Offer], request: ApplyRequest, segment: str) -> ApplyResult:
    offer = find_matching_offer(offers, request.restaurant_id, segment)
    if offer is None:
        return ApplyResult(cart_value=request.cart_value)
    return ApplyResult(cart_value=rules.compute_discounted_value(request.cart_value, offer))
