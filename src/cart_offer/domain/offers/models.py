from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from cart_offer.domain.errors import MalformedRequestError


class OfferType(str, Enum):
    """Discount formula of an offer. Values are the wire names."""

    FLAT = "FLATX"
    PERCENTAGE = "PERCENTAGE"

    @classmethod
    def parse(cls, value: "str | OfferType") -> "OfferType":
        if isinstance(value, OfferType):
            return value
        if value == "FLAT":
            return cls.FLAT
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join([m.value for m in cls] + ["FLAT"])
            raise MalformedRequestError(f"Unknown offer_type {value!r} (expected one of: {allowed})") from None


@dataclass(frozen=True)
class Offer:
    """A discount rule scoped to one restaurant and a set of customer segments."""

    restaurant_id: int
    offer_type: OfferType
    offer_value: int
    segments: frozenset[str]

    @staticmethod
    def new(
        restaurant_id: int,
        offer_type: "str | OfferType",
        offer_value: int,
        segments: Iterable[str],
    ) -> "Offer":
        if offer_value < 0:
            raise MalformedRequestError(f"offer_value must be >= 0, got {offer_value}")
        return Offer(
            restaurant_id=restaurant_id,
            offer_type=OfferType.parse(offer_type),
            offer_value=offer_value,
            segments=frozenset(segments),
        )


@dataclass(frozen=True)
class ApplyRequest:
    cart_value: int
    restaurant_id: int
    user_id: int

    def __post_init__(self) -> None:
        if self.cart_value < 0:
            raise MalformedRequestError(f"cart_value must be >= 0, got {self.cart_value}")


@dataclass(frozen=True)
class SegmentResponse:
    segment: str


@dataclass(frozen=True)
class ApplyResult:
    cart_value: int
