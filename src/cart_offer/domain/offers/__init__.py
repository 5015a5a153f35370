from __future__ import annotations

from cart_offer.domain.offers.evaluator import evaluate_apply_offer, find_matching_offer
from cart_offer.domain.offers.models import (
    ApplyRequest,
    ApplyResult,
    Offer,
    OfferType,
    SegmentResponse,
)

__all__ = [
    "evaluate_apply_offer",
    "find_matching_offer",
    "ApplyRequest",
    "ApplyResult",
    "Offer",
    "OfferType",
    "SegmentResponse",
]
