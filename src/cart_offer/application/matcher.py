from __future__ import annotations

import logging

from cart_offer.application.errors import SegmentLookupError
from cart_offer.domain.offers.evaluator import evaluate_apply_offer
from cart_offer.domain.offers.models import ApplyRequest, ApplyResult, Offer
from cart_offer.ports.offer_store import OfferStore
from cart_offer.ports.segment_lookup import SegmentLookup

logger = logging.getLogger(__name__)


class OfferMatcher:
    def __init__(self, store: OfferStore, segment_lookup: SegmentLookup) -> None:
        self.store = store
        self.segment_lookup = segment_lookup

    def add_offer(self, offer: Offer) -> bool:
        added = self.store.add_offer(offer)
        logger.info(
            f"Added {offer.offer_type.value} offer value={offer.offer_value} "
            f"restaurant={offer.restaurant_id} segments={sorted(offer.segments)}"
        )
        return added

    def resolve_segment(self, user_id: int) -> str:
        try:
            return self.segment_lookup.resolve(user_id).segment
        except SegmentLookupError:
            logger.warning(f"Segment lookup failed for user {user_id}")
            raise
        except Exception as e:
            logger.error(f"Segment lookup raised unexpectedly for user {user_id}: {e}")
            raise SegmentLookupError(f"Segment lookup failed for user {user_id}: {e}", user_id=user_id) from e

    def apply_offer(self, request: ApplyRequest, segment: str) -> ApplyResult:
        """Apply the first stored offer matching the restaurant and segment, if any."""
        offers = self.store.all_offers()
        result = evaluate_apply_offer(offers, request, segment)
        logger.info(
            f"Cart for restaurant={request.restaurant_id} segment={segment}: "
            f"{request.cart_value} -> {result.cart_value} ({len(offers)} offers available)"
        )
        return result

    def apply_offer_for_user(self, request: ApplyRequest) -> ApplyResult:
        segment = self.resolve_segment(request.user_id)
        return self.apply_offer(request, segment)
