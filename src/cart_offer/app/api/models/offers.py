"""Pydantic models for offer and cart API payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from cart_offer.domain.offers.models import ApplyRequest, Offer


class OfferRequest(BaseModel):
    """Body of POST /api/v1/offer."""

    restaurant_id: int
    offer_type: Literal["FLATX", "FLAT", "PERCENTAGE"] = Field(..., description="FLATX (alias FLAT) | PERCENTAGE")
    offer_value: int = Field(..., ge=0)
    customer_segment: list[str]

    def to_offer(self) -> Offer:
        return Offer.new(
            restaurant_id=self.restaurant_id,
            offer_type=self.offer_type,
            offer_value=self.offer_value,
            segments=self.customer_segment,
        )


class OfferResponse(BaseModel):
    response_msg: str = "success"


class ApplyOfferRequest(BaseModel):
    """Body of POST /api/v1/cart/apply_offer."""

    cart_value: int = Field(..., ge=0)
    restaurant_id: int
    user_id: int

    def to_apply_request(self) -> ApplyRequest:
        return ApplyRequest(
            cart_value=self.cart_value,
            restaurant_id=self.restaurant_id,
            user_id=self.user_id,
        )


class ApplyOfferResponse(BaseModel):
    cart_value: int
