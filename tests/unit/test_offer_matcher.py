"""Unit tests for OfferMatcher."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from cart_offer.adapters.offers.in_memory_offer_store import InMemoryOfferStore
from cart_offer.application.errors import SegmentLookupError
from cart_offer.application.matcher import OfferMatcher
from cart_offer.domain.offers.models import ApplyRequest, Offer


def make_offer(offer_type: str, offer_value: int, segments: tuple[str, ...]) -> Offer:
    return Offer.new(restaurant_id=1, offer_type=offer_type, offer_value=offer_value, segments=segments)


def test_multi_segment_routing(matcher: OfferMatcher) -> None:
    """Users in p1 get the flat offer, users in p2 get the percentage offer."""
    matcher.add_offer(make_offer("FLATX", 10, ("p1",)))
    matcher.add_offer(make_offer("PERCENTAGE", 20, ("p2",)))

    p1 = matcher.apply_offer_for_user(ApplyRequest(cart_value=200, restaurant_id=1, user_id=1))
    p2 = matcher.apply_offer_for_user(ApplyRequest(cart_value=200, restaurant_id=1, user_id=2))

    assert p1.cart_value == 190
    assert p2.cart_value == 160


def test_apply_offer_with_explicit_segment(matcher: OfferMatcher) -> None:
    matcher.add_offer(make_offer("PERCENTAGE", 10, ("gold",)))

    result = matcher.apply_offer(ApplyRequest(cart_value=200, restaurant_id=1, user_id=99), "gold")

    assert result.cart_value == 180


def test_apply_offer_reads_current_store(matcher: OfferMatcher, store: InMemoryOfferStore) -> None:
    request = ApplyRequest(cart_value=200, restaurant_id=1, user_id=1)
    assert matcher.apply_offer(request, "p1").cart_value == 200

    store.add_offer(make_offer("FLATX", 10, ("p1",)))

    assert matcher.apply_offer(request, "p1").cart_value == 190


def test_unknown_user_propagates_lookup_failure(matcher: OfferMatcher) -> None:
    matcher.add_offer(make_offer("FLATX", 10, ("p1",)))

    with pytest.raises(SegmentLookupError):
        matcher.apply_offer_for_user(ApplyRequest(cart_value=200, restaurant_id=1, user_id=42))


def test_unexpected_lookup_exception_is_wrapped(store: InMemoryOfferStore) -> None:
    lookup = Mock()
    lookup.resolve.side_effect = RuntimeError("boom")
    matcher = OfferMatcher(store, lookup)

    with pytest.raises(SegmentLookupError, match="boom") as exc_info:
        matcher.resolve_segment(5)

    assert exc_info.value.user_id == 5
    lookup.resolve.assert_called_once_with(5)
