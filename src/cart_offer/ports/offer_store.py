from __future__ import annotations

from typing import Protocol

from cart_offer.domain.offers.models import Offer


class OfferStore(Protocol):
    def add_offer(self, offer: Offer) -> bool: ...

    def all_offers(self) -> list[Offer]: ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...
