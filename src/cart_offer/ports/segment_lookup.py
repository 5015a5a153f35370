from __future__ import annotations

from typing import Protocol

from cart_offer.domain.offers.models import SegmentResponse


class SegmentLookup(Protocol):
    def resolve(self, user_id: int) -> SegmentResponse:
        """
        Resolve the customer segment of a user.

        Implementations raise SegmentLookupError when the segment cannot be
        determined; callers must not substitute a default segment.
        """
        ...
