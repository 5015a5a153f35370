from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cart_offer.ports.offer_store import OfferStore
    from cart_offer.ports.segment_lookup import SegmentLookup

from cart_offer.adapters.offers.in_memory_offer_store import InMemoryOfferStore
from cart_offer.adapters.offers.seed_loader import seed_store
from cart_offer.adapters.segments.http_segment_lookup import HttpSegmentLookup
from cart_offer.adapters.segments.static_segment_lookup import StaticSegmentLookup
from cart_offer.settings import Settings, get_settings

SEGMENT_LOOKUP_ADAPTERS = ("http", "static")


def create_segment_lookup(settings: Settings) -> "SegmentLookup":
    """
    Build the segment lookup named by SEGMENT_LOOKUP_ADAPTER.

    "http" calls the remote segment service; "static" serves STATIC_USER_SEGMENTS.
    """
    adapter = settings.segment_lookup_adapter
    if adapter not in SEGMENT_LOOKUP_ADAPTERS:
        raise ValueError(
            f"Unknown SEGMENT_LOOKUP_ADAPTER {adapter!r} (expected one of: {', '.join(SEGMENT_LOOKUP_ADAPTERS)})"
        )
    if adapter == "static":
        return StaticSegmentLookup(settings.static_user_segments)
    return HttpSegmentLookup(settings)


def create_offer_store(settings: Settings) -> "OfferStore":
    """Create an empty offer store, seeded from OFFERS_SEED_FILE when it is set."""
    store: OfferStore = InMemoryOfferStore()
    if settings.offers_seed_file:
        seed_store(store, settings.offers_seed_file)
    return store


def create_adapters(
    settings: Optional[Settings] = None,
) -> tuple["OfferStore", "SegmentLookup"]:
    """Create the offer store (seeded when OFFERS_SEED_FILE is set) and the segment lookup."""
    settings = settings or get_settings()
    return (create_offer_store(settings), create_segment_lookup(settings))
