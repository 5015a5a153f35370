from __future__ import annotations

from cart_offer.domain.offers.models import Offer, OfferType


def offer_matches(offer: Offer, restaurant_id: int, segment: str) -> bool:
    return offer.restaurant_id == restaurant_id and segment in offer.segments


def compute_discounted_value(cart_value: int, offer: Offer) -> int:
    """
    Apply the offer's formula to a cart value.

    FLAT subtracts offer_value and is not clamped, so the result can go negative.
    PERCENTAGE subtracts offer_value percent of the cart, truncated to an integer.
    """
    if offer.offer_type is OfferType.FLAT:
        return cart_value - offer.offer_value
    if offer.offer_type is OfferType.PERCENTAGE:
        return cart_value - (cart_value * offer.offer_value) // 100
    raise ValueError(f"Unsupported offer type: {offer.offer_type}")
