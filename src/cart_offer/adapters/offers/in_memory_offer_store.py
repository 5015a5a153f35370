from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from cart_offer.domain.offers.models import Offer
from cart_offer.ports.offer_store import OfferStore

logger = logging.getLogger(__name__)


class InMemoryOfferStore(OfferStore):
    """Insertion-ordered offer log. Writes and snapshots are serialized by a lock."""

    def __init__(self, offers: Optional[Iterable[Offer]] = None) -> None:
        self._offers: List[Offer] = list(offers or [])
        self._lock = threading.Lock()

    def add_offer(self, offer: Offer) -> bool:
        with self._lock:
            self._offers.append(offer)
            count = len(self._offers)
        logger.debug(f"Stored offer #{count} for restaurant {offer.restaurant_id}")
        return True

    def all_offers(self) -> list[Offer]:
        with self._lock:
            return list(self._offers)

    def clear(self) -> None:
        """Drop every offer. Used by test harnesses to reset state."""
        with self._lock:
            self._offers.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._offers)
