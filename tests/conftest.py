"""Shared fixtures for cart offer tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cart_offer.adapters.offers.in_memory_offer_store import InMemoryOfferStore
from cart_offer.adapters.segments.static_segment_lookup import StaticSegmentLookup
from cart_offer.app.server import create_app
from cart_offer.application.matcher import OfferMatcher


@pytest.fixture
def store() -> InMemoryOfferStore:
    return InMemoryOfferStore()


@pytest.fixture
def segment_lookup() -> StaticSegmentLookup:
    """User 1 is in segment p1, user 2 in segment p2."""
    return StaticSegmentLookup({1: "p1", 2: "p2"})


@pytest.fixture
def matcher(store: InMemoryOfferStore, segment_lookup: StaticSegmentLookup) -> OfferMatcher:
    return OfferMatcher(store, segment_lookup)


@pytest.fixture
def client(store: InMemoryOfferStore, segment_lookup: StaticSegmentLookup) -> TestClient:
    app = create_app(store=store, segment_lookup=segment_lookup)
    return TestClient(app)
